"""Transaction record as supplied by a node or indexer."""

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, PlainSerializer

from ethtransfer.domain.models.primitives import U256, Address, Hash32
from ethtransfer.exceptions import ERC20Error
from ethtransfer.parser.utils.hex import decode_hex, parse_quantity, strip_0x

ZERO_ADDRESS = "0x" + "00" * 20
ZERO_HASH = "0x" + "00" * 32


def _call_data(value: object) -> object:
    if isinstance(value, str):
        try:
            return decode_hex(strip_0x(value))
        except ERC20Error as exc:
            raise ValueError(str(exc)) from exc
    return value


CallData = Annotated[
    bytes,
    BeforeValidator(_call_data),
    PlainSerializer(lambda v: "0x" + v.hex(), return_type=str, when_used="json"),
]


class Transaction(BaseModel):
    """Immutable transaction record. ``to_address`` is None for contract creation."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    hash: Hash32 = ZERO_HASH
    nonce: U256 = 0
    block_hash: Hash32 | None = Field(default=None, alias="blockHash")
    block_number: int | None = Field(default=None, alias="blockNumber")
    transaction_index: int | None = Field(default=None, alias="transactionIndex")
    from_address: Address = Field(default=ZERO_ADDRESS, alias="from")
    to_address: Address | None = Field(default=None, alias="to")
    value: U256 = 0
    gas_price: U256 = Field(default=0, alias="gasPrice")
    gas: U256 = 0
    input: CallData = b""
    raw: CallData | None = None

    @classmethod
    def empty(cls) -> "Transaction":
        """All-default record: zero hash and sender, no recipient, no call-data."""
        return cls()

    @classmethod
    def from_rpc(cls, tx_data: dict[str, Any]) -> "Transaction":
        """Build from an ``eth_getTransactionByHash`` object or an Etherscan ``txlist`` row.

        RPC quantities are 0x-hex, Etherscan's are decimal strings; both parse.
        Empty strings (Etherscan's "to" for contract creation) mean absent.
        """
        return cls(
            hash=tx_data["hash"],
            nonce=parse_quantity(tx_data.get("nonce")) or 0,
            block_hash=tx_data.get("blockHash") or None,
            block_number=parse_quantity(tx_data.get("blockNumber")),
            transaction_index=parse_quantity(tx_data.get("transactionIndex")),
            from_address=tx_data["from"],
            to_address=tx_data.get("to") or None,
            value=parse_quantity(tx_data.get("value")) or 0,
            gas_price=parse_quantity(tx_data.get("gasPrice")) or 0,
            gas=parse_quantity(tx_data.get("gas")) or 0,
            input=tx_data.get("input") or b"",
            raw=tx_data.get("raw") or None,
        )
