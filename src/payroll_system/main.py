from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify
from flask_cors import CORS

from config import get_settings_module

from .container import Container, build_container
from .common.http import register_error_handlers
from .core.constants import DEFAULT_MAX_UPLOAD_BYTES
from .database.bootstrap import apply_schema, apply_seed_sql, ensure_default_department, list_tables
from .departments.controller import register as register_departments
from .employees.controller import register as register_employees
from .leaves.controller import register as register_leaves
from .uploads.controller import register as register_uploads
from .users.controller import register as register_users

REPO_ROOT = Path(__file__).resolve().parents[2]


def _init_database(app: Flask, settings, db_config: dict) -> None:
    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
        app.logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
    if bool(getattr(settings, "AUTO_SEED_DB", False)):
        apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")
        ensure_default_department(db_config)
        app.logger.info("seed ready")


def create_app(settings_module: Optional[str] = None, *, container: Optional[Container] = None) -> Flask:
    """Build the API application.

    Passing `container` skips every database step and serves the given
    repositories instead, which is how the tests run without MySQL.
    """
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    db_config = getattr(settings, "DB_CONFIG")

    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["AUTH_COOKIE_NAME"] = getattr(settings, "AUTH_COOKIE_NAME", "payroll_sid")
    app.config["SESSION_COOKIE_SECURE"] = bool(getattr(settings, "SESSION_COOKIE_SECURE", False))
    app.config["SESSION_COOKIE_SAMESITE"] = getattr(settings, "SESSION_COOKIE_SAMESITE", "Lax")
    app.logger.setLevel(getattr(settings, "LOG_LEVEL", logging.INFO))

    CORS(app, origins=getattr(settings, "CORS_ORIGINS", "*"), supports_credentials=True)

    if container is None:
        app.logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )
        _init_database(app, settings, db_config)
        container = build_container(
            db_config=db_config,
            upload_dir=getattr(settings, "UPLOAD_DIR", REPO_ROOT / "uploads"),
            max_upload_bytes=int(getattr(settings, "MAX_UPLOAD_BYTES", DEFAULT_MAX_UPLOAD_BYTES)),
            password_hash_method=getattr(settings, "PASSWORD_HASH_METHOD", "scrypt"),
        )

    app.extensions["payroll_container"] = container
    register_error_handlers(app)

    @app.route("/api/hello", methods=["GET"], endpoint="hello")
    def hello():
        return jsonify({"message": "Hello from backend"})

    register_employees(app, container)
    register_leaves(app, container)
    register_departments(app, container)
    register_users(app, container)
    register_uploads(app, container)

    return app
