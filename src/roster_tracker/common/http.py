"""JSON response helpers shared by the controllers."""

from __future__ import annotations

import logging

from flask import jsonify, request

from ..core.enums import ErrorCode
from ..core.exceptions import DomainError, DuplicateRollNoError, ValidationError

logger = logging.getLogger(__name__)


def ok(payload: dict | None = None, status: int = 200):
    body = {"success": True}
    body.update(payload or {})
    return jsonify(body), status


def fail(message: str, error: ErrorCode, status: int):
    return jsonify({"success": False, "error": error.value, "message": message}), status


def domain_error(e: DomainError):
    """Map a domain exception to its HTTP status."""
    if isinstance(e, DuplicateRollNoError):
        return fail(str(e), e.code, 409)
    if isinstance(e, ValidationError):
        return fail(str(e), e.code, 400)
    logger.error("domain error: %s", e)
    return fail(str(e), e.code, 500)


def internal_error(context: str):
    logger.exception("%s failed", context)
    return fail(f"Internal error while {context}", ErrorCode.INTERNAL_ERROR, 500)


def form_data() -> dict:
    """JSON body if present, else form fields."""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()
