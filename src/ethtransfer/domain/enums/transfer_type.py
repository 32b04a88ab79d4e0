from enum import Enum


class TransferType(str, Enum):
    """Asset moved by a transfer. Token iff a contract address is present."""

    ETHEREUM = "ethereum"
    TOKEN = "token"
