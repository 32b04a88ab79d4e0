"""Errors raised while decoding and classifying transactions.

Every error is recoverable: callers may skip the record, retry with other
input, or surface the failure. Extraction is all-or-nothing, so no partially
populated transfer is ever returned alongside one of these.
"""

from ethtransfer.domain.enums import ErrorKind


class ERC20Error(Exception):
    """Base class for all extraction errors."""

    kind: ErrorKind | None = None

    def __init__(self, message: str | None = None) -> None:
        default = self.kind.value if self.kind is not None else type(self).__name__
        super().__init__(message or default)

    def to_dict(self) -> dict[str, str | None]:
        return {"kind": self.kind.value if self.kind is not None else None, "message": str(self)}


class NoTransferTransaction(ERC20Error):
    """Neither an Ether transfer nor an ERC20 transfer/transferFrom call."""

    kind = ErrorKind.NO_TRANSFER_TRANSACTION


class UnexpectedSize(ERC20Error):
    """Hex input decoded to the wrong number of bytes."""

    kind = ErrorKind.UNEXPECTED_SIZE


class UnexpectedEndOfData(ERC20Error):
    """The buffer ran out before a requested field could be read."""

    kind = ErrorKind.UNEXPECTED_END_OF_DATA


class UnexpectedType(ERC20Error):
    """The value has no representation for the requested operation."""

    kind = ErrorKind.UNEXPECTED_TYPE


class InvalidHex(ERC20Error):
    """Input contains characters that are not hexadecimal digits."""

    kind = ErrorKind.INVALID_HEX
