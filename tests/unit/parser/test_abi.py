"""Tests for ByteCursor / ByteBuilder."""

import pytest

from ethtransfer.exceptions import UnexpectedEndOfData
from ethtransfer.parser.utils.abi import MAX_UINT256, ByteBuilder, ByteCursor

TRANSFER_WORDS = (
    "a9059cbb"
    "0000000000000000000000000000000000000000000000000000000000000001"
    "0000000000000000000000000000000000000000000000000000000000000002"
)
ADDR_ONE = "0x" + "00" * 19 + "01"


class TestByteCursor:
    def test_decode_transfer_call(self):
        cursor = ByteCursor(bytes.fromhex(TRANSFER_WORDS))
        assert cursor.next_bytes(4) == bytes.fromhex("a9059cbb")
        assert cursor.next_fixed_address() == ADDR_ONE
        assert cursor.next_unsigned_int() == 2
        assert cursor.remaining == 0

    def test_offset_advances(self):
        cursor = ByteCursor(bytes(64))
        cursor.skip(4)
        assert cursor.offset == 4
        cursor.next_raw_address()
        assert cursor.offset == 24

    def test_overrun_raises_and_keeps_offset(self):
        cursor = ByteCursor(bytes(40))
        cursor.skip(4)
        cursor.next_fixed_address()
        assert cursor.offset == 36
        with pytest.raises(UnexpectedEndOfData):
            cursor.next_unsigned_int()
        assert cursor.offset == 36

    def test_skip_past_end(self):
        cursor = ByteCursor(b"\x01\x02")
        with pytest.raises(UnexpectedEndOfData):
            cursor.skip(3)
        assert cursor.offset == 0

    def test_exact_end_is_ok(self):
        cursor = ByteCursor(bytes(32))
        assert cursor.next_hash() == "0x" + "00" * 32
        assert cursor.next_bytes(0) == b""

    def test_empty_buffer(self):
        with pytest.raises(UnexpectedEndOfData):
            ByteCursor(b"").next_bytes(1)

    def test_fixed_address_ignores_dirty_padding(self):
        word = bytes([0xFF] * 12) + bytes.fromhex("22" * 20)
        assert ByteCursor(word).next_fixed_address() == "0x" + "22" * 20

    def test_unsigned_int_is_big_endian(self):
        word = bytes(31) + b"\x01"
        assert ByteCursor(word).next_unsigned_int() == 1
        word = b"\x01" + bytes(31)
        assert ByteCursor(word).next_unsigned_int() == 2**248

    def test_max_uint256(self):
        assert ByteCursor(b"\xff" * 32).next_unsigned_int() == MAX_UINT256

    def test_negative_size_rejected(self):
        with pytest.raises(ValueError):
            ByteCursor(bytes(4)).next_bytes(-1)


class TestByteBuilder:
    def test_encode_transfer_call(self):
        encoded = (
            ByteBuilder()
            .push_bytes(bytes.fromhex("a9059cbb"))
            .push_fixed_address(ADDR_ONE)
            .push_unsigned_int(2)
            .to_bytes()
        )
        assert encoded == bytes.fromhex(TRANSFER_WORDS)

    def test_fixed_address_left_pads(self):
        encoded = ByteBuilder().push_fixed_address("0x" + "ab" * 20).to_bytes()
        assert encoded == bytes(12) + bytes.fromhex("ab" * 20)

    def test_raw_address_no_padding(self):
        builder = ByteBuilder().push_raw_address("AB" * 20)
        assert len(builder) == 20

    def test_uint_overflow(self):
        with pytest.raises(OverflowError):
            ByteBuilder().push_unsigned_int(2**256)
        with pytest.raises(OverflowError):
            ByteBuilder().push_unsigned_int(-1)


class TestRoundTrip:
    @pytest.mark.parametrize("address", [ADDR_ONE, "0x" + "ff" * 20, "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48"])
    def test_address_fields(self, address):
        data = ByteBuilder().push_fixed_address(address).push_raw_address(address).to_bytes()
        cursor = ByteCursor(data)
        assert cursor.next_fixed_address() == address
        assert cursor.next_raw_address() == address

    def test_hash_and_int(self):
        tx_hash = "0x43a5d6d13b6a9dca381e3f4b4677a4b9e5d9f80d1a5b6cfa2b1404fab733bcee"
        data = ByteBuilder().push_hash(tx_hash).push_unsigned_int(MAX_UINT256).push_unsigned_int(0).to_bytes()
        cursor = ByteCursor(data)
        assert cursor.next_hash() == tx_hash
        assert cursor.next_unsigned_int() == MAX_UINT256
        assert cursor.next_unsigned_int() == 0
