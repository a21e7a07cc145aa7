"""Student dashboard REST backend: students, courses and enrollment stats."""

from __future__ import annotations

import logging
import time

from flask import Flask, g, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from . import config
from .db import Database
from .logging_config import ACCESS_LOGGER_NAME
from .repositories import CourseRepository, StudentRepository
from .repositories.base import Clock
from .routes import courses_bp, health_bp, reports_bp, students_bp
from .routes.common import EXTENSION_KEY, Services, json_error

logger = logging.getLogger(__name__)
access_logger = logging.getLogger(ACCESS_LOGGER_NAME)


def _register_access_log(app: Flask) -> None:
    @app.before_request
    def _start_timer():
        g.request_started = time.perf_counter()

    @app.after_request
    def _log_request(response):
        started = g.pop("request_started", None)
        elapsed = (time.perf_counter() - started) * 1000 if started else 0.0
        access_logger.info(
            "%s %s %s %.3f ms - %s",
            request.method,
            request.full_path.rstrip("?"),
            response.status_code,
            elapsed,
            response.content_length if response.content_length is not None else "-",
        )
        return response


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(HTTPException)
    def _http_error(exc: HTTPException):
        response, status = json_error(exc.description or exc.name, exc.code or 500)
        # Keep headers such as Allow on 405 responses.
        for name, value in exc.get_headers():
            if name.lower() != "content-type":
                response.headers[name] = value
        return response, status

    @app.errorhandler(Exception)
    def _unexpected_error(exc: Exception):
        logger.exception("Unhandled error while serving %s %s", request.method, request.path)
        return json_error("Internal server error.", 500)


def create_app(database: Database | None = None, clock: Clock | None = None) -> Flask:
    """Build the Flask application.

    ``database`` defaults to a handle built from MONGODB_URI; ``clock`` feeds
    the createdAt/updatedAt timestamps.
    """

    app = Flask(__name__)
    app.json.sort_keys = False
    CORS(app)

    database = (database or Database()).connect()
    students = StudentRepository(database, clock)
    app.extensions[EXTENSION_KEY] = Services(
        database=database,
        students=students,
        courses=CourseRepository(database, students, clock),
        started_at=time.monotonic(),
        environment=config.get_environment(),
    )

    app.register_blueprint(courses_bp)
    app.register_blueprint(students_bp)
    app.register_blueprint(reports_bp)
    app.register_blueprint(health_bp)

    _register_access_log(app)
    _register_error_handlers(app)
    return app


__all__ = ["create_app", "Database"]
