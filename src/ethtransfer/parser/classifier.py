"""Transaction classification: recipient + call-data -> category -> ERC20 method."""

import logging

from pydantic import BaseModel, ConfigDict

from ethtransfer.domain.enums import ERC20Method, InvocationKind, TxCategory
from ethtransfer.domain.models.transaction import Transaction
from ethtransfer.parser.erc20.methods import method_from_input

logger = logging.getLogger(__name__)


class ContractInvocation(BaseModel):
    """A call to a contract, resolved to an ERC20 method when the selector is known."""

    model_config = ConfigDict(frozen=True)

    kind: InvocationKind
    method: ERC20Method = ERC20Method.UNIDENTIFIED
    transaction: Transaction

    @property
    def is_token_call(self) -> bool:
        return self.kind == InvocationKind.TOKEN_CALL


class ParsedTransaction(BaseModel):
    """Transaction tagged with its category. ``invocation`` is set iff category is CONTRACT_INVOCATION."""

    model_config = ConfigDict(frozen=True)

    category: TxCategory
    transaction: Transaction
    invocation: ContractInvocation | None = None


def classify(to_address: str | None, input_data: bytes) -> TxCategory:
    """Total over (recipient present/absent) x (call-data empty/non-empty).

    A recipient with empty call-data is a plain Ether transfer.
    """
    if to_address is None:
        if not input_data:
            return TxCategory.OTHER
        return TxCategory.CONTRACT_CREATION
    if not input_data:
        return TxCategory.ETHEREUM_TRANSFER
    return TxCategory.CONTRACT_INVOCATION


def resolve_invocation(transaction: Transaction) -> ContractInvocation:
    method = method_from_input(transaction.input)
    if method == ERC20Method.UNIDENTIFIED:
        return ContractInvocation(kind=InvocationKind.OTHER, transaction=transaction)
    return ContractInvocation(kind=InvocationKind.TOKEN_CALL, method=method, transaction=transaction)


def parse_transaction(transaction: Transaction) -> ParsedTransaction:
    category = classify(transaction.to_address, transaction.input)
    invocation = None
    if category == TxCategory.CONTRACT_INVOCATION:
        invocation = resolve_invocation(transaction)
        logger.debug("TX %s: %s -> %s", transaction.hash, category.value, invocation.method.value)
    else:
        logger.debug("TX %s: %s", transaction.hash, category.value)
    return ParsedTransaction(category=category, transaction=transaction, invocation=invocation)
