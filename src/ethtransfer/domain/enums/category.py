from enum import Enum


class TxCategory(str, Enum):
    """Top-level shape of a transaction, decided from recipient + call-data only."""

    ETHEREUM_TRANSFER = "ethereumTransfer"
    CONTRACT_INVOCATION = "contractInvocation"
    CONTRACT_CREATION = "contractCreation"
    OTHER = "other"


class InvocationKind(str, Enum):
    TOKEN_CALL = "tokenCall"
    OTHER = "other"
