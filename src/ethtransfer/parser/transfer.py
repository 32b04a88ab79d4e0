"""Transfer extraction: canonical (sender, recipient, amount, contract) from a transaction.

Two closed variants: EthereumTransfer (native value, no contract) and
TokenTransfer (ERC20 transfer/transferFrom, contract = the called address).
All fields are decoded once, at extraction; accessors never fail.
"""

import logging
from collections.abc import Iterable
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, model_validator
from pydantic.alias_generators import to_camel

from ethtransfer.config import settings
from ethtransfer.domain.enums import ERC20Method, InvocationKind, TransferType, TxCategory
from ethtransfer.domain.models.primitives import U256, Address, Hash32
from ethtransfer.domain.models.transaction import Transaction
from ethtransfer.exceptions import NoTransferTransaction, UnexpectedEndOfData
from ethtransfer.parser.classifier import parse_transaction
from ethtransfer.parser.erc20.contracts import ContractAddress
from ethtransfer.parser.erc20.methods import SELECTOR_SIZE, TRANSFER_METHODS
from ethtransfer.parser.utils.abi import ByteCursor

logger = logging.getLogger(__name__)


class TransactionId(BaseModel):
    """Block position when both parts are known, otherwise the hash."""

    model_config = ConfigDict(frozen=True)

    hash: Hash32 | None = None
    block_number: int | None = None
    transaction_index: int | None = None

    @property
    def by_block(self) -> bool:
        return self.block_number is not None and self.transaction_index is not None


class TransferRecord(BaseModel):
    """Serializable view. ``model_dump(by_alias=True)`` gives camelCase keys."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    kind: TransferType
    sender: Address
    recipient: Address
    contract: Address | None = None
    amount: U256
    hash: Hash32
    block_hash: Hash32 | None = None
    block_number: int | None = None
    transaction_index: int | None = None


class ClassifiedTransfer(BaseModel):
    """Token iff ``contract`` is set. Token resolution happens once, at construction."""

    model_config = ConfigDict(frozen=True)

    kind: TransferType
    transaction: Transaction
    sender: Address
    recipient: Address
    amount: U256
    contract: Address | None = None

    _token: ContractAddress | None = PrivateAttr(default=None)
    _symbol: str | None = PrivateAttr(default=None)

    @model_validator(mode="after")
    def _kind_matches_contract(self) -> "ClassifiedTransfer":
        if (self.kind == TransferType.TOKEN) != (self.contract is not None):
            raise ValueError(f"{self.kind.value} transfer with contract={self.contract}")
        return self

    def model_post_init(self, context: Any, /) -> None:
        if self.contract is None:
            self._symbol = settings.native_symbol
            return
        self._token = ContractAddress.from_address(self.contract)
        self._symbol = self._token.symbol.value if self._token.is_known else None

    @property
    def tx_hash(self) -> str:
        return self.transaction.hash

    @property
    def block_hash(self) -> str | None:
        return self.transaction.block_hash

    @property
    def block_number(self) -> int | None:
        return self.transaction.block_number

    @property
    def transaction_index(self) -> int | None:
        return self.transaction.transaction_index

    @property
    def is_ethereum(self) -> bool:
        return self.kind == TransferType.ETHEREUM

    @property
    def is_token(self) -> bool:
        return not self.is_ethereum

    @property
    def token(self) -> ContractAddress | None:
        return self._token

    @property
    def symbol(self) -> str | None:
        """Native symbol for Ether, token symbol for known contracts, None otherwise."""
        return self._symbol

    def transaction_id(self) -> TransactionId:
        if self.block_number is not None and self.transaction_index is not None:
            return TransactionId(block_number=self.block_number, transaction_index=self.transaction_index)
        return TransactionId(hash=self.tx_hash)

    def to_record(self) -> TransferRecord:
        return TransferRecord(
            kind=self.kind,
            sender=self.sender,
            recipient=self.recipient,
            contract=self.contract,
            amount=self.amount,
            hash=self.tx_hash,
            block_hash=self.block_hash,
            block_number=self.block_number,
            transaction_index=self.transaction_index,
        )


class EthereumTransfer(ClassifiedTransfer):
    kind: Literal[TransferType.ETHEREUM] = TransferType.ETHEREUM
    contract: None = None


class TokenTransfer(ClassifiedTransfer):
    kind: Literal[TransferType.TOKEN] = TransferType.TOKEN
    contract: Address
    method: Literal[ERC20Method.TRANSFER, ERC20Method.TRANSFER_FROM] = ERC20Method.TRANSFER


Transfer = Annotated[EthereumTransfer | TokenTransfer, Field(discriminator="kind")]


def _ethereum_transfer(tx: Transaction) -> EthereumTransfer:
    if tx.to_address is None:
        raise NoTransferTransaction(f"TX {tx.hash} has no recipient")
    return EthereumTransfer(transaction=tx, sender=tx.from_address, recipient=tx.to_address, amount=tx.value)


def _token_transfer(method: ERC20Method, tx: Transaction) -> TokenTransfer:
    if tx.to_address is None:
        raise NoTransferTransaction(f"TX {tx.hash} calls {method.value} without a contract")

    # Cursor errors (UnexpectedEndOfData) propagate unchanged
    cursor = ByteCursor(tx.input)
    cursor.skip(SELECTOR_SIZE)
    if method == ERC20Method.TRANSFER:
        sender = tx.from_address
        recipient = cursor.next_fixed_address()
    else:
        sender = cursor.next_fixed_address()
        recipient = cursor.next_fixed_address()
    amount = cursor.next_unsigned_int()

    return TokenTransfer(
        transaction=tx,
        sender=sender,
        recipient=recipient,
        amount=amount,
        contract=tx.to_address,
        method=method,
    )


def extract_transfer(transaction: Transaction) -> EthereumTransfer | TokenTransfer:
    """Classify and decode one transaction.

    Raises NoTransferTransaction for anything other than an Ether transfer or
    an ERC20 transfer/transferFrom call, and UnexpectedEndOfData when the
    call-data is too short for the method's arguments.
    """
    parsed = parse_transaction(transaction)

    if parsed.category == TxCategory.ETHEREUM_TRANSFER:
        return _ethereum_transfer(parsed.transaction)

    invocation = parsed.invocation
    if (
        parsed.category == TxCategory.CONTRACT_INVOCATION
        and invocation is not None
        and invocation.kind == InvocationKind.TOKEN_CALL
        and invocation.method in TRANSFER_METHODS
    ):
        return _token_transfer(invocation.method, invocation.transaction)

    detail = invocation.method.value if invocation is not None else parsed.category.value
    raise NoTransferTransaction(f"TX {transaction.hash} is not a transfer ({detail})")


def extract_transfers(
    transactions: Iterable[Transaction],
    skip_malformed: bool | None = None,
) -> list[EthereumTransfer | TokenTransfer]:
    """Extract every transfer-shaped transaction, skipping the rest.

    Truncated token calls raise unless ``skip_malformed`` (default from settings).
    """
    if skip_malformed is None:
        skip_malformed = settings.skip_malformed

    transfers: list[EthereumTransfer | TokenTransfer] = []
    for tx in transactions:
        try:
            transfers.append(extract_transfer(tx))
        except NoTransferTransaction as exc:
            logger.debug("Skipping TX %s: %s", tx.hash, exc)
        except UnexpectedEndOfData as exc:
            if not skip_malformed:
                raise
            logger.warning("Skipping malformed TX %s: %s", tx.hash, exc)
    return transfers
