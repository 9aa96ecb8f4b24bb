"""
Error types raised by the service layer.

Every failure the API reports to a client is an instance of
``ProductApiError``.  Each subclass is tagged with an ``ErrorKind``, the
HTTP status code it maps to and the short ``error`` label placed in the
JSON body.  The exception handlers registered in ``main.py`` translate
these errors into ``{"error": ..., "message": ...}`` responses; anything
that is not a ``ProductApiError`` becomes a generic 500.
"""

from enum import Enum
from typing import Dict, List, Optional


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    UNAUTHORIZED = "unauthorized"
    INTERNAL = "internal"


class ProductApiError(Exception):
    """Base class for errors that map to an HTTP response."""

    kind: ErrorKind = ErrorKind.INTERNAL
    status_code: int = 500
    error: str = "Internal Server Error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @property
    def public_message(self) -> str:
        """Message that is safe to send to the client."""
        return self.message

    def to_dict(self) -> Dict[str, str]:
        return {"error": self.error, "message": self.public_message}


class ValidationError(ProductApiError):
    """The client sent structurally or semantically invalid data.

    ``fields`` lists the names of every payload field that failed
    validation, in the order the checks ran.
    """

    kind = ErrorKind.VALIDATION
    status_code = 400
    error = "Validation Error"

    def __init__(self, message: str, fields: Optional[List[str]] = None) -> None:
        super().__init__(message)
        self.fields = list(fields or [])


class NotFoundError(ProductApiError):
    kind = ErrorKind.NOT_FOUND
    status_code = 404
    error = "Product not found"

    @classmethod
    def for_product(cls, product_id: str) -> "NotFoundError":
        return cls(f"Product with id {product_id} does not exist")


class UnauthorizedError(ProductApiError):
    kind = ErrorKind.UNAUTHORIZED
    status_code = 401
    error = "Unauthorized"


class InternalError(ProductApiError):
    """Unexpected fault.  The detail is logged, never sent to the client."""

    kind = ErrorKind.INTERNAL
    status_code = 500
    error = "Internal Server Error"

    GENERIC_MESSAGE = "Something went wrong on our end"

    @property
    def public_message(self) -> str:
        return self.GENERIC_MESSAGE
