"""Hex text <-> fixed-width big-endian values."""

import re

from ethtransfer.exceptions import InvalidHex, UnexpectedSize

ADDRESS_SIZE = 20
HASH_SIZE = 32

_HEX_RE = re.compile(r"[0-9a-fA-F]*")


def decode_hex(text: str) -> bytes:
    """Decode unprefixed hex text. Raises InvalidHex on non-hex characters or odd length."""
    # bytes.fromhex() accepts whitespace between pairs
    if not _HEX_RE.fullmatch(text):
        raise InvalidHex(f"Invalid hex string {text!r}")
    if len(text) % 2:
        raise InvalidHex(f"Odd-length hex string {text!r}")
    return bytes.fromhex(text)


def decode_fixed(text: str, size: int) -> bytes:
    data = decode_hex(text)
    if len(data) != size:
        raise UnexpectedSize(f"Expected {size} bytes, got {len(data)}")
    return data


def string_to_h160(text: str) -> str:
    """Parse 40 hex chars (no 0x prefix) into a canonical address."""
    return bytes_to_address(decode_fixed(text, ADDRESS_SIZE))


def string_to_h256(text: str) -> str:
    """Parse 64 hex chars (no 0x prefix) into a canonical 32-byte hash."""
    return bytes_to_hash(decode_fixed(text, HASH_SIZE))


def strip_0x(text: str) -> str:
    if text[:2] in ("0x", "0X"):
        return text[2:]
    return text


def bytes_to_address(data: bytes) -> str:
    if len(data) != ADDRESS_SIZE:
        raise UnexpectedSize(f"Expected {ADDRESS_SIZE} bytes, got {len(data)}")
    return "0x" + data.hex()


def bytes_to_hash(data: bytes) -> str:
    if len(data) != HASH_SIZE:
        raise UnexpectedSize(f"Expected {HASH_SIZE} bytes, got {len(data)}")
    return "0x" + data.hex()


def address_to_bytes(address: str) -> bytes:
    return decode_fixed(strip_0x(address), ADDRESS_SIZE)


def hash_to_bytes(value: str) -> bytes:
    return decode_fixed(strip_0x(value), HASH_SIZE)


def parse_quantity(raw: str | int | None) -> int | None:
    """Parse an RPC hex quantity ("0x1a") or an Etherscan decimal string ("26").

    None and "" mean absent.
    """
    if raw is None or raw == "":
        return None
    if isinstance(raw, int):
        return raw
    if raw[:2] in ("0x", "0X"):
        digits = raw[2:]
        if digits == "":
            return 0
        try:
            return int(digits, 16)
        except ValueError as exc:
            raise InvalidHex(f"Invalid hex quantity {raw!r}") from exc
    try:
        return int(raw)
    except ValueError as exc:
        raise InvalidHex(f"Invalid quantity {raw!r}") from exc
