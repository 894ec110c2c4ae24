from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import error_response, json_body
from ..container import Container
from ..core.exceptions import DomainError


def register(app: Flask, container: Container) -> None:
    service = container.employee_service

    @app.route("/api/employees", methods=["POST"], endpoint="create_employee")
    def create_employee():
        try:
            employee_id = service.create(json_body())
            return jsonify({"message": "Employee added", "id": employee_id}), 201
        except DomainError as e:
            return error_response(app, "inserting employee", e)

    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    def list_employees():
        try:
            return jsonify([employee.to_dict() for employee in service.list_all()])
        except DomainError as e:
            return error_response(app, "fetching employees", e)

    @app.route("/api/employees/<int:employee_id>", methods=["GET"], endpoint="get_employee")
    def get_employee(employee_id: int):
        try:
            return jsonify(service.get(employee_id).to_dict())
        except DomainError as e:
            return error_response(app, "fetching employee", e)

    @app.route("/api/employees/<int:employee_id>", methods=["PUT"], endpoint="update_employee")
    def update_employee(employee_id: int):
        try:
            service.update(employee_id, json_body())
            return jsonify({"message": "Employee updated successfully"})
        except DomainError as e:
            return error_response(app, "updating employee", e)

    @app.route("/api/employees/<int:employee_id>", methods=["DELETE"], endpoint="delete_employee")
    def delete_employee(employee_id: int):
        try:
            service.delete(employee_id)
            return jsonify({"message": "Employee deleted"})
        except DomainError as e:
            return error_response(app, "deleting employee", e)
