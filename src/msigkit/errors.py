"""Exceptions raised by the strict decoders."""

from typing import Optional


class MultisigError(Exception):
    """
    Failure while resolving or decoding multisig state.

    Attributes:
        operation: Short tag of the failing operation, e.g. "transaction"
        cause: The underlying exception, if any
    """

    def __init__(self, operation: str, cause: Optional[BaseException] = None):
        self.operation = operation
        self.cause = cause
        super().__init__(f"{operation}: {cause}" if cause is not None else operation)


TRANSACTION_STATUS = "transaction_status"
TRANSACTION = "transaction"
TRANSACTION_DETAIL = "transaction_detail"
