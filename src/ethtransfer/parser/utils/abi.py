"""Sequential readers/writers for 32-byte ABI words.

ByteCursor decodes call-data field by field; ByteBuilder is its exact inverse
and is used to build call-data (tests, fixtures, re-encoding).
"""

from ethtransfer.exceptions import UnexpectedEndOfData
from ethtransfer.parser.utils.hex import (
    ADDRESS_SIZE,
    HASH_SIZE,
    address_to_bytes,
    bytes_to_address,
    bytes_to_hash,
    hash_to_bytes,
)

WORD_SIZE = 32
ADDRESS_PADDING = WORD_SIZE - ADDRESS_SIZE  # 12
MAX_UINT256 = 2**256 - 1


class ByteCursor:
    """Single-pass, bounds-checked reader over an immutable buffer.

    The offset only moves forward and never passes the end of the buffer:
    a read that would overrun raises UnexpectedEndOfData and leaves the
    offset unchanged.
    """

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._offset = 0

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def remaining(self) -> int:
        return len(self._data) - self._offset

    def _advance(self, size: int) -> int:
        if size < 0:
            raise ValueError(f"Negative read size: {size}")
        if size > self.remaining:
            raise UnexpectedEndOfData(
                f"Need {size} bytes at offset {self._offset}, only {self.remaining} left"
            )
        start = self._offset
        self._offset += size
        return start

    def next_bytes(self, size: int) -> bytes:
        start = self._advance(size)
        return self._data[start:start + size]

    def skip(self, size: int) -> None:
        self._advance(size)

    def next_fixed_address(self) -> str:
        """Read a 32-byte word holding a right-aligned address.

        The 12 leading padding bytes are skipped without checking that they
        are zero, so a word with dirty high bytes still decodes to its low
        20 bytes.
        """
        word = self.next_bytes(WORD_SIZE)
        return bytes_to_address(word[ADDRESS_PADDING:])

    def next_raw_address(self) -> str:
        """Read exactly 20 bytes, no word alignment."""
        return bytes_to_address(self.next_bytes(ADDRESS_SIZE))

    def next_hash(self) -> str:
        return bytes_to_hash(self.next_bytes(HASH_SIZE))

    def next_unsigned_int(self) -> int:
        return int.from_bytes(self.next_bytes(WORD_SIZE), "big")


class ByteBuilder:
    """Appends ABI fields to a growing buffer."""

    def __init__(self) -> None:
        self._data = bytearray()

    def push_bytes(self, data: bytes) -> "ByteBuilder":
        self._data.extend(data)
        return self

    def push_fixed_address(self, address: str) -> "ByteBuilder":
        """Left-pad the address with 12 zero bytes to a full word."""
        self._data.extend(bytes(ADDRESS_PADDING))
        return self.push_raw_address(address)

    def push_raw_address(self, address: str) -> "ByteBuilder":
        self._data.extend(address_to_bytes(address))
        return self

    def push_hash(self, value: str) -> "ByteBuilder":
        self._data.extend(hash_to_bytes(value))
        return self

    def push_unsigned_int(self, value: int) -> "ByteBuilder":
        if not 0 <= value <= MAX_UINT256:
            raise OverflowError(f"{value} does not fit in uint256")
        self._data.extend(value.to_bytes(WORD_SIZE, "big"))
        return self

    def to_bytes(self) -> bytes:
        return bytes(self._data)

    def __len__(self) -> int:
        return len(self._data)
