from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import error_response
from ..container import Container
from ..core.exceptions import DomainError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/upload", methods=["POST"], endpoint="upload_image")
    def upload_image():
        try:
            filename = container.upload_service.save_image(request.files.get("image"))
            return jsonify({"filename": filename})
        except DomainError as e:
            return error_response(app, "uploading file", e)
