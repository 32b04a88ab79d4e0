from enum import Enum


class ErrorKind(str, Enum):
    """Categorized extraction errors. Values are the serialized (camelCase) names."""

    NO_TRANSFER_TRANSACTION = "noTransferTransaction"
    UNEXPECTED_SIZE = "unexpectedSize"
    UNEXPECTED_END_OF_DATA = "unexpectedEndOfData"
    UNEXPECTED_TYPE = "unexpectedType"
    INVALID_HEX = "invalidHex"
