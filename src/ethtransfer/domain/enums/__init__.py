from ethtransfer.domain.enums.category import InvocationKind, TxCategory
from ethtransfer.domain.enums.error_kind import ErrorKind
from ethtransfer.domain.enums.method import ERC20Method
from ethtransfer.domain.enums.token import TokenSymbol
from ethtransfer.domain.enums.transfer_type import TransferType

__all__ = [
    "ERC20Method",
    "ErrorKind",
    "InvocationKind",
    "TokenSymbol",
    "TransferType",
    "TxCategory",
]
