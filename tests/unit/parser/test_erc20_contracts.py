import pytest
from pydantic import ValidationError

from ethtransfer.domain.enums import TokenSymbol
from ethtransfer.exceptions import UnexpectedType
from ethtransfer.parser.erc20.contracts import (
    TOKEN_ADDRESSES,
    ContractAddress,
    address_for_token,
    token_for_address,
)

TUSD = "0x0000000000085d4780B73119b644AE5ecd22b376"
UNKNOWN = "0x9999999999999999999999999999999999999999"


class TestContractRegistry:
    def test_sixteen_tokens_bijective(self):
        assert len(TOKEN_ADDRESSES) == 16
        assert len(set(TOKEN_ADDRESSES.values())) == 16
        assert TokenSymbol.UNIDENTIFIED not in TOKEN_ADDRESSES

    def test_usdc_address(self):
        assert address_for_token(TokenSymbol.USDC) == "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48"
        assert token_for_address("0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48").symbol == TokenSymbol.USDC

    def test_case_insensitive_lookup(self):
        contract = token_for_address(TUSD)
        assert contract.symbol == TokenSymbol.TUSD
        assert token_for_address(TUSD.lower()) == contract
        assert token_for_address(TUSD.upper().replace("0X", "0x")) == contract

    def test_round_trip_known(self):
        contract = token_for_address(TUSD)
        assert address_for_token(contract) == TUSD.lower()

    def test_unknown_address_wraps_raw(self):
        contract = token_for_address(UNKNOWN)
        assert contract.symbol == TokenSymbol.UNIDENTIFIED
        assert not contract.is_known
        assert address_for_token(contract) == UNKNOWN

    def test_lookup_from_bytes(self):
        raw = bytes.fromhex("dac17f958d2ee523a2206206994597c13d831ec7")
        assert token_for_address(raw).symbol == TokenSymbol.USDT

    def test_unidentified_symbol_has_no_address(self):
        with pytest.raises(UnexpectedType):
            address_for_token(TokenSymbol.UNIDENTIFIED)

    def test_equality_by_address(self):
        assert ContractAddress.from_symbol(TokenSymbol.DAI) == token_for_address(
            "0x6B175474E89094C44Da98b954EedeAC495271d0F"
        )
        assert len({token_for_address(TUSD), token_for_address(TUSD.lower())}) == 1

    @pytest.mark.parametrize("symbol", [s for s in TokenSymbol if s != TokenSymbol.UNIDENTIFIED])
    def test_every_symbol_round_trips(self, symbol):
        assert token_for_address(address_for_token(symbol)).symbol == symbol

    def test_symbol_must_match_address(self):
        with pytest.raises(ValidationError):
            ContractAddress(symbol=TokenSymbol.USDC, address=UNKNOWN)
        with pytest.raises(ValidationError):
            ContractAddress(symbol=TokenSymbol.UNIDENTIFIED, address=TUSD)

    def test_address_for_token_returns_stored_address(self):
        contract = ContractAddress(symbol=TokenSymbol.UNIDENTIFIED, address=UNKNOWN)
        assert address_for_token(contract) == contract.address
        assert contract == token_for_address(UNKNOWN)
