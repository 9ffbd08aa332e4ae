"""Centralized error handlers."""

from __future__ import annotations

import logging
from typing import Any

from flask import Flask
from marshmallow import ValidationError as MarshmallowValidationError
from werkzeug.exceptions import HTTPException

from inventory.errors import AppError, StorageError, ValidationError
from inventory.utils.responses import fail

logger = logging.getLogger(__name__)


def _first_message(messages: Any) -> str | None:
    """Pick the first human-readable message out of marshmallow's error tree."""

    if isinstance(messages, str):
        return messages
    if isinstance(messages, dict):
        for value in messages.values():
            found = _first_message(value)
            if found:
                return found
    if isinstance(messages, (list, tuple)):
        for value in messages:
            found = _first_message(value)
            if found:
                return found
    return None


def register_error_handlers(app: Flask) -> None:
    """Register error handlers for the Flask app."""

    @app.errorhandler(AppError)
    def _handle_app_error(exc: AppError):
        if isinstance(exc, StorageError):
            logger.warning("Storage failure surfaced to client: %s", exc.message)
        return fail(exc.message, exc.status_code)

    @app.errorhandler(MarshmallowValidationError)
    def _handle_schema_error(exc: MarshmallowValidationError):
        # exc.messages is a dict of field -> list[str]
        wrapped = ValidationError(message=_first_message(exc.messages) or "Validation error", details=exc.messages)
        return fail(wrapped.message, wrapped.status_code)

    @app.errorhandler(HTTPException)
    def _handle_http_exception(exc: HTTPException):
        # Examples: unmatched /api/items/abc, /favicon.ico.
        status = int(getattr(exc, "code", 500) or 500)
        if status == 404:
            return fail("not found", 404)

        return fail(getattr(exc, "description", None) or "HTTP error", status)

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        logger.exception("Unhandled exception")
        return fail("Internal server error", 500)
