from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import error_response, json_body
from ..container import Container
from ..core.exceptions import DomainError


def register(app: Flask, container: Container) -> None:
    auth = container.auth_service
    cookie_name = app.config["AUTH_COOKIE_NAME"]

    @app.route("/api/register", methods=["POST"], endpoint="register")
    def register_user():
        data = json_body()
        try:
            user_id = auth.register(
                firstname=data.get("firstname") or "",
                lastname=data.get("lastname") or "",
                email=data.get("email") or "",
                password=data.get("password") or "",
            )
            return jsonify({"message": "User registered", "id": user_id}), 201
        except DomainError as e:
            return error_response(app, "registering user", e)

    @app.route("/api/login", methods=["POST"], endpoint="login")
    def login():
        data = json_body()
        try:
            user, session_id = auth.login(email=data.get("email") or "", password=data.get("password") or "")
        except DomainError as e:
            return error_response(app, "during login", e)

        resp = jsonify({"message": "Login successful", "user": user.to_dict()})
        resp.set_cookie(
            cookie_name,
            session_id,
            httponly=True,
            samesite=app.config.get("SESSION_COOKIE_SAMESITE") or "Lax",
            secure=bool(app.config.get("SESSION_COOKIE_SECURE", False)),
        )
        return resp

    @app.route("/api/logout", methods=["POST"], endpoint="logout")
    def logout():
        auth.logout(request.cookies.get(cookie_name))
        resp = jsonify({"message": "Logged out"})
        resp.delete_cookie(cookie_name)
        return resp

    @app.route("/api/me", methods=["GET"], endpoint="me")
    def me():
        try:
            user = auth.current_user(request.cookies.get(cookie_name))
            return jsonify({"user": user.to_dict()})
        except DomainError as e:
            return error_response(app, "reading session", e)
