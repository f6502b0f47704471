"""
Bioskop API: Exception Hierarchy
=================================

What:  Application-specific exceptions, one per HTTP outcome the API produces.
How:   Each exception carries a client-safe `message` and a `context` dict
       that is logged but never returned. Global handlers registered in
       main.py turn them into `{"error": message}` responses.
Who:   Raised by the service layer; caught by the handlers in main.py.

Exception Hierarchy:
    BioskopError (base)
    ├── ValidationError   → 400 Bad Request
    ├── NotFoundError     → 404 Not Found
    └── DatabaseError     → 500 Internal Server Error

Messages are Indonesian, matching the wire contract existing clients expect.
"""

from typing import Any, Dict, Optional

INVALID_INPUT = "Invalid input"
REQUIRED_FIELDS_MISSING = "Nama dan Lokasi wajib diisi"
DATA_NOT_FOUND = "Data tidak ditemukan"


class BioskopError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "Terjadi kesalahan pada server",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(BioskopError):
    """
    Raised when client input fails validation.

    When:    Empty `nama` or `lokasi` on create/update. Malformed bodies are
             rejected earlier by FastAPI's own RequestValidationError, which
             main.py maps to the same 400 status.
    HTTP:    400 Bad Request
    """

    def __init__(
        self,
        message: str = INVALID_INPUT,
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(BioskopError):
    """
    Raised when the targeted row does not exist.

    When:    Lookup returned no row, or UPDATE/DELETE affected zero rows.
    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "bioskop",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=DATA_NOT_FOUND, context=ctx)


class DatabaseError(BioskopError):
    """
    Raised when a store operation fails.

    When:    Connection lost, query failure, commit failure, row decode failure.
    HTTP:    500 Internal Server Error

    The message names the failed operation only ("Gagal mengambil data");
    driver error text stays in the server log via `context`.
    """

    def __init__(
        self,
        message: str = "Gagal mengakses database",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
