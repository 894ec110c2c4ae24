from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import error_response, json_body
from ..container import Container
from ..core.exceptions import DomainError


def register(app: Flask, container: Container) -> None:
    service = container.department_service

    @app.route("/api/department", methods=["POST"], endpoint="create_department")
    def create_department():
        try:
            department_id = service.create(json_body())
            return jsonify({"message": "Department added", "id": department_id}), 201
        except DomainError as e:
            return error_response(app, "inserting department", e)

    @app.route("/api/department", methods=["GET"], endpoint="list_departments")
    def list_departments():
        try:
            return jsonify([d.to_dict() for d in service.list_all()])
        except DomainError as e:
            return error_response(app, "fetching departments", e)

    @app.route("/api/department/<int:department_id>", methods=["GET"], endpoint="get_department")
    def get_department(department_id: int):
        try:
            return jsonify(service.get(department_id).to_dict())
        except DomainError as e:
            return error_response(app, "fetching department", e)

    @app.route("/api/department/<int:department_id>", methods=["PUT"], endpoint="update_department")
    def update_department(department_id: int):
        try:
            service.update(department_id, json_body())
            return jsonify({"message": "Department updated"})
        except DomainError as e:
            return error_response(app, "updating department", e)

    @app.route("/api/department/<int:department_id>", methods=["DELETE"], endpoint="delete_department")
    def delete_department(department_id: int):
        try:
            service.delete(department_id)
            return jsonify({"message": "Department deleted"})
        except DomainError as e:
            return error_response(app, "deleting department", e)
