"""Custom exceptions for centralized error handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class AppError(Exception):
    """Base application error."""

    code: str
    message: str
    status_code: int
    details: Any | None = None

    def __str__(self) -> str:
        return self.message


class NotFoundError(AppError):
    """Resource not found."""

    def __init__(self, message: str = "not found", details: Any | None = None) -> None:
        super().__init__(code="not_found", message=message, status_code=404, details=details)


class ValidationError(AppError):
    """Input validation error."""

    def __init__(self, message: str = "Validation error", details: Any | None = None) -> None:
        super().__init__(code="validation_error", message=message, status_code=400, details=details)


class StorageError(AppError):
    """The database rejected or failed an operation.

    The driver's message is kept verbatim so callers see exactly what the
    storage layer reported.
    """

    def __init__(self, message: str = "Storage error", details: Any | None = None) -> None:
        super().__init__(code="storage_error", message=message, status_code=500, details=details)
