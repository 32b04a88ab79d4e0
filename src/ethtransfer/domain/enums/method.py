from enum import Enum


class ERC20Method(str, Enum):
    """ERC20 methods recognised in transaction call-data."""

    ALLOWANCE = "allowance"        # allowance(address,address)
    APPROVE = "approve"            # approve(address,uint256)
    BALANCE_OF = "balanceOf"       # balanceOf(address)
    TOTAL_SUPPLY = "totalSupply"   # totalSupply()
    TRANSFER = "transfer"          # transfer(address,uint256)
    TRANSFER_FROM = "transferFrom"  # transferFrom(address,address,uint256)
    UNIDENTIFIED = "unidentified"  # no selector, cannot be encoded
