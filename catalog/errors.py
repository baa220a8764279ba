# ============================================
# catalog/errors.py — Catalog Error Taxonomy
# ============================================
# Every failure the service or the client can report is a CatalogError
# tagged with an ErrorKind. The HTTP layer maps kinds to status codes;
# the client maps status codes back to kinds, so the UI only ever deals
# with a kind, a message and (for server responses) a status.

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    TRANSPORT = "transport"
    STORAGE = "storage"


class CatalogError(Exception):
    """Base class for all catalog errors."""

    kind: ErrorKind = ErrorKind.STORAGE
    status_code: int = 500

    def __init__(self, message: str, *, status: Optional[int] = None, detail: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.detail = detail
        if status is not None:
            self.status_code = status

    def to_dict(self) -> dict:
        return {"message": self.message}


class ValidationError(CatalogError):
    """A required field is missing or a field breaks a product invariant."""

    kind = ErrorKind.VALIDATION
    status_code = 400


class NotFoundError(CatalogError):
    """The requested product does not exist."""

    kind = ErrorKind.NOT_FOUND
    status_code = 404


class StorageError(CatalogError):
    """The underlying store failed, or the server reported a failure."""

    kind = ErrorKind.STORAGE
    status_code = 500


class TransportError(CatalogError):
    """No response reached the client."""

    kind = ErrorKind.TRANSPORT
    status_code = 0


_KIND_BY_STATUS = {
    400: ValidationError,
    404: NotFoundError,
}


def error_for_status(status: int, message: str) -> CatalogError:
    """Build the error matching an HTTP status returned by the server."""
    error_cls = _KIND_BY_STATUS.get(status, StorageError)
    return error_cls(message, status=status)
