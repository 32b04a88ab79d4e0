"""Known ERC20 contract addresses (Ethereum mainnet) <-> token symbols."""

from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, model_validator

from ethtransfer.domain.enums import TokenSymbol
from ethtransfer.domain.models.primitives import Address, normalize_address
from ethtransfer.exceptions import UnexpectedType

# Mixed-case entries are checksummed; stored lowercase after normalization
TOKEN_ADDRESSES: MappingProxyType[TokenSymbol, str] = MappingProxyType({
    symbol: normalize_address(addr)
    for symbol, addr in {
        TokenSymbol.TUSD: "0x0000000000085d4780B73119b644AE5ecd22b376",
        TokenSymbol.LINK: "0x514910771af9ca656af840dff83e8264ecf986ca",
        TokenSymbol.BNB: "0xB8c77482e45F1F44dE1745F52C74426C631bDD52",
        TokenSymbol.USDC: "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48",
        TokenSymbol.WBTC: "0x2260fac5e5542a773aa44fbcfedf7c193bc2c599",
        TokenSymbol.CDAI: "0x5d3a536E4D6DbD6114cc1Ead35777bAB948E3643",
        TokenSymbol.OKB: "0x75231f58b43240c9718dd58b4967c5114342a86c",
        TokenSymbol.CRO: "0xa0b73e1ff0b80914ab6fe0444e65848c4c34450b",
        TokenSymbol.WFIL: "0x6e1A19F235bE7ED8E3369eF73b196C07257494DE",
        TokenSymbol.BAT: "0x0d8775f648430679a709e98d2b0cb6250d2887ef",
        TokenSymbol.BUSD: "0x4fabb145d64652a948d72533023f6e7a623c7c53",
        TokenSymbol.USDT: "0xdac17f958d2ee523a2206206994597c13d831ec7",
        TokenSymbol.LEO: "0x2af5d2ad76741191d15dfe7bf6ac92d4bd912ca3",
        TokenSymbol.VEN: "0xd850942ef8811f2a866692a623011bde52a462c1",
        TokenSymbol.DAI: "0x6b175474e89094c44da98b954eedeac495271d0f",
        TokenSymbol.UNI: "0x1f9840a85d5af5bf1d1762f925bdaddc4201f984",
    }.items()
})

_ADDRESS_TOKENS: MappingProxyType[str, TokenSymbol] = MappingProxyType(
    {addr: symbol for symbol, addr in TOKEN_ADDRESSES.items()}
)


class ContractAddress(BaseModel):
    """A contract address tagged with its token symbol, or UNIDENTIFIED.

    The symbol must be the one the registry assigns to the address.
    Equality and hashing use the address only.
    """

    model_config = ConfigDict(frozen=True)

    symbol: TokenSymbol
    address: Address

    @model_validator(mode="after")
    def _symbol_matches_address(self) -> "ContractAddress":
        expected = _ADDRESS_TOKENS.get(self.address, TokenSymbol.UNIDENTIFIED)
        if self.symbol != expected:
            raise ValueError(f"{self.address} is {expected.value}, not {self.symbol.value}")
        return self

    @classmethod
    def from_address(cls, address: str | bytes) -> "ContractAddress":
        addr = normalize_address(address)
        return cls(symbol=_ADDRESS_TOKENS.get(addr, TokenSymbol.UNIDENTIFIED), address=addr)

    @classmethod
    def from_symbol(cls, symbol: TokenSymbol) -> "ContractAddress":
        """Known token by symbol. UNIDENTIFIED carries no address and raises UnexpectedType."""
        if symbol not in TOKEN_ADDRESSES:
            raise UnexpectedType(f"No known address for {symbol.value}")
        return cls(symbol=symbol, address=TOKEN_ADDRESSES[symbol])

    @property
    def is_known(self) -> bool:
        return self.symbol != TokenSymbol.UNIDENTIFIED

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ContractAddress):
            return NotImplemented
        return self.address == other.address

    def __hash__(self) -> int:
        return hash(self.address)


def token_for_address(address: str | bytes) -> ContractAddress:
    """Lookup by address: the matching token, or UNIDENTIFIED wrapping the raw address."""
    return ContractAddress.from_address(address)


def address_for_token(contract: ContractAddress | TokenSymbol) -> str:
    """Lookup by symbol: the known address, or the wrapped address for UNIDENTIFIED."""
    if isinstance(contract, TokenSymbol):
        return ContractAddress.from_symbol(contract).address
    return contract.address
