from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import error_response, json_body
from ..container import Container
from ..core.exceptions import DomainError


def register(app: Flask, container: Container) -> None:
    service = container.leave_service

    @app.route("/api/leaves", methods=["POST"], endpoint="create_leave")
    def create_leave():
        try:
            leave_id = service.create(json_body())
            return jsonify({"message": "Leave created", "id": leave_id}), 201
        except DomainError as e:
            return error_response(app, "creating leave", e)

    @app.route("/api/leaves", methods=["GET"], endpoint="list_leaves")
    def list_leaves():
        try:
            return jsonify([leave.to_dict() for leave in service.list_all()])
        except DomainError as e:
            return error_response(app, "fetching leaves", e)

    @app.route("/api/leaves/employee/<int:employee_id>", methods=["GET"], endpoint="list_employee_leaves")
    def list_employee_leaves(employee_id: int):
        try:
            return jsonify([leave.to_dict() for leave in service.list_for_employee(employee_id)])
        except DomainError as e:
            return error_response(app, "fetching employee leaves", e)

    @app.route("/api/leaves/<int:leave_id>", methods=["PUT"], endpoint="update_leave")
    def update_leave(leave_id: int):
        try:
            service.update(leave_id, json_body())
            return jsonify({"message": "Leave updated"})
        except DomainError as e:
            return error_response(app, "updating leave", e)

    @app.route("/api/leaves/<int:leave_id>", methods=["DELETE"], endpoint="delete_leave")
    def delete_leave(leave_id: int):
        try:
            service.delete(leave_id)
            return jsonify({"message": "Leave deleted"})
        except DomainError as e:
            return error_response(app, "deleting leave", e)
