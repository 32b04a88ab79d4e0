"""ERC20 function selectors (first 4 bytes of keccak256 of the signature)."""

from types import MappingProxyType

from ethtransfer.domain.enums import ERC20Method
from ethtransfer.exceptions import UnexpectedType

SELECTOR_SIZE = 4

METHOD_SELECTORS: MappingProxyType[ERC20Method, bytes] = MappingProxyType({
    ERC20Method.ALLOWANCE: bytes.fromhex("dd62ed3e"),      # allowance(address,address)
    ERC20Method.APPROVE: bytes.fromhex("095ea7b3"),        # approve(address,uint256)
    ERC20Method.BALANCE_OF: bytes.fromhex("70a08231"),     # balanceOf(address)
    ERC20Method.TOTAL_SUPPLY: bytes.fromhex("18160ddd"),   # totalSupply()
    ERC20Method.TRANSFER: bytes.fromhex("a9059cbb"),       # transfer(address,uint256)
    ERC20Method.TRANSFER_FROM: bytes.fromhex("23b872dd"),  # transferFrom(address,address,uint256)
})

_SELECTOR_METHODS: MappingProxyType[bytes, ERC20Method] = MappingProxyType(
    {selector: method for method, selector in METHOD_SELECTORS.items()}
)

TRANSFER_METHODS = frozenset({ERC20Method.TRANSFER, ERC20Method.TRANSFER_FROM})


def method_selector(method: ERC20Method) -> bytes:
    """Selector for a named method. UNIDENTIFIED has none and raises UnexpectedType."""
    selector = METHOD_SELECTORS.get(method)
    if selector is None:
        raise UnexpectedType(f"{method.value} has no selector")
    return selector


def selector_hex(method: ERC20Method) -> str:
    return "0x" + method_selector(method).hex()


def method_from_input(input_data: bytes) -> ERC20Method:
    """Identify the method from call-data's leading 4 bytes.

    Short buffers and unknown selectors are UNIDENTIFIED. Selectors are
    pairwise distinct, so at most one method can match.
    """
    if len(input_data) < SELECTOR_SIZE:
        return ERC20Method.UNIDENTIFIED
    return _SELECTOR_METHODS.get(bytes(input_data[:SELECTOR_SIZE]), ERC20Method.UNIDENTIFIED)
