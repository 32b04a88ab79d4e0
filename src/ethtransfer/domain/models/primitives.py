"""Pydantic value types for chain primitives.

Addresses and hashes are kept as canonical lowercase ``0x`` hex text, so two
values that differ only in casing compare equal.
"""

from typing import Annotated

from pydantic import BeforeValidator, Field

from ethtransfer.exceptions import ERC20Error
from ethtransfer.parser.utils.hex import bytes_to_address, bytes_to_hash, string_to_h160, string_to_h256, strip_0x

MAX_UINT256 = 2**256 - 1


def normalize_address(value: object) -> str:
    try:
        if isinstance(value, (bytes, bytearray)):
            return bytes_to_address(bytes(value))
        if isinstance(value, str):
            return string_to_h160(strip_0x(value))
    except ERC20Error as exc:
        # ValueError so pydantic reports a ValidationError
        raise ValueError(str(exc)) from exc
    raise ValueError(f"Cannot interpret {type(value).__name__} as an address")


def normalize_hash(value: object) -> str:
    try:
        if isinstance(value, (bytes, bytearray)):
            return bytes_to_hash(bytes(value))
        if isinstance(value, str):
            return string_to_h256(strip_0x(value))
    except ERC20Error as exc:
        raise ValueError(str(exc)) from exc
    raise ValueError(f"Cannot interpret {type(value).__name__} as a 32-byte hash")


Address = Annotated[str, BeforeValidator(normalize_address)]
Hash32 = Annotated[str, BeforeValidator(normalize_hash)]
U256 = Annotated[int, Field(ge=0, le=MAX_UINT256)]
