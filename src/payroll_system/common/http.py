from __future__ import annotations

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from ..core.exceptions import DomainError


def json_body() -> dict:
    """Request JSON as a dict; an absent or malformed body reads as `{}`."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def error_response(app: Flask, action: str, e: DomainError):
    """Log a failed request and answer `{"error": ...}` with the error's status."""
    if e.status_code >= 500:
        app.logger.error("Error %s: %s", action, e)
    else:
        app.logger.info("Rejected %s: %s", action, e)
    return jsonify({"error": str(e)}), e.status_code


def register_error_handlers(app: Flask) -> None:
    """Answer every failure as JSON, including ones no controller anticipated."""

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return jsonify({"error": e.description}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        app.logger.exception("Unhandled error on %s %s", request.method, request.path)
        return jsonify({"error": str(e)}), 500
