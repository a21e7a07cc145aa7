"""Response helpers shared by the blueprints."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict

from flask import current_app, jsonify

from ..db import Database
from ..errors import ServiceError
from ..repositories import CourseRepository, StudentRepository

logger = logging.getLogger(__name__)

EXTENSION_KEY = "student_dashboard"


@dataclass
class Services:
    database: Database
    students: StudentRepository
    courses: CourseRepository
    started_at: float
    environment: str


def get_services() -> Services:
    return current_app.extensions[EXTENSION_KEY]


def json_error(message: str, status: int, details: Dict[str, Any] | None = None):
    payload: Dict[str, Any] = {"message": message}
    if details:
        payload["details"] = details
    return jsonify(payload), status


def service_error(exc: ServiceError):
    return json_error(exc.message, exc.status_code, exc.details)


def handle_db_error(action: str):
    logger.exception("%s due to MongoDB error", action)
    return json_error("Database unavailable. Please try again later.", 500)


__all__ = [
    "EXTENSION_KEY",
    "Services",
    "get_services",
    "json_error",
    "service_error",
    "handle_db_error",
]
