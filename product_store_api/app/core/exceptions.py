"""
Error taxonomy for the product store.

Raised by the store when the underlying SQLite database cannot be
opened, read or written.  The API layer never exposes the driver
message; ``ERROR_STATUS`` maps each kind to the HTTP status returned
to clients.  ``StorageInitError`` has no entry: it is only raised
while the application starts and aborts startup instead of producing
a response.
"""

from __future__ import annotations

from typing import Dict, Type

from fastapi import status
from fastapi.exceptions import RequestValidationError


class StorageError(Exception):
    """Base class for all store failures."""


class StorageInitError(StorageError):
    """The database file or the product table could not be created."""


class StorageQueryError(StorageError):
    """Reading the product collection failed."""


class StorageWriteError(StorageError):
    """Replacing the product collection failed; nothing was changed."""


# Malformed or type-mismatched JSON bodies surface as FastAPI's
# validation error.
RequestDeserializationError = RequestValidationError


ERROR_STATUS: Dict[Type[Exception], int] = {
    StorageQueryError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    StorageWriteError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    RequestDeserializationError: status.HTTP_400_BAD_REQUEST,
}

ERROR_DETAIL: Dict[Type[Exception], str] = {
    StorageQueryError: "Internal storage error",
    StorageWriteError: "Internal storage error",
    RequestDeserializationError: "Malformed request body",
}
