"""Helpers for consistent JSON responses.

Success bodies are the payload itself; failures are ``{"error": message}``.
"""

from __future__ import annotations

from typing import Any

from flask import Response, jsonify


def ok(data: Any, status_code: int = 200) -> tuple[Response, int]:
    """Success response."""

    return jsonify(data), status_code


def fail(message: str, status_code: int) -> tuple[Response, int]:
    """Error response."""

    return jsonify({"error": message}), status_code
