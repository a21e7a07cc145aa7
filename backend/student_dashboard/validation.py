"""Payload validation for student and course requests.

These are pure functions: they never touch the database. Uniqueness is left to
the unique indexes and reported by the repositories.
"""

from __future__ import annotations

import math
from datetime import date, datetime, timezone
from typing import Any, Dict, Tuple

from .models import STATUS_ACTIVE, STATUS_VALUES

Cleaned = Dict[str, Any]
Errors = Dict[str, str]


def _clean_string(value: Any) -> str:
    return str(value).strip() if value is not None else ""


def parse_date(value: Any) -> datetime:
    """Parse an ISO-8601 date or datetime into a naive UTC datetime."""

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    else:
        text = _clean_string(value)
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        parsed = datetime.fromisoformat(text)

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed.replace(microsecond=parsed.microsecond // 1000 * 1000)


def _parse_number(value: Any) -> float | int:
    if isinstance(value, bool):
        raise ValueError
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        text = _clean_string(value)
        number = float(text)
    if not math.isfinite(number):
        raise ValueError
    if isinstance(value, (int, float)):
        return value
    return int(number) if number.is_integer() and "." not in text else number


def _validate_status(payload: Dict[str, Any], cleaned: Cleaned, errors: Errors, *, require_all: bool) -> None:
    if "status" not in payload:
        if require_all:
            cleaned["status"] = STATUS_ACTIVE
        return

    status = _clean_string(payload.get("status")).lower()
    if status not in STATUS_VALUES:
        errors["status"] = "Status must be one of: " + ", ".join(STATUS_VALUES) + "."
    else:
        cleaned["status"] = status


def validate_student_payload(payload: Any, *, require_all: bool) -> Tuple[Cleaned, Errors]:
    """Check a student create (``require_all``) or partial update payload."""

    if not isinstance(payload, dict):
        return {}, {"_global": "Request body must be JSON."}

    errors: Errors = {}
    cleaned: Cleaned = {}

    def require_field(field: str, message: str) -> bool:
        if field not in payload or _clean_string(payload.get(field)) == "":
            errors[field] = message
            return False
        return True

    if require_all or "name" in payload:
        if require_field("name", "Name is required."):
            cleaned["name"] = _clean_string(payload.get("name"))

    if require_all or "email" in payload:
        if require_field("email", "Email is required."):
            cleaned["email"] = _clean_string(payload.get("email"))

    if require_all or "course" in payload:
        if require_field("course", "Course is required."):
            cleaned["course"] = _clean_string(payload.get("course"))

    if require_all or "enrollmentDate" in payload:
        if require_field("enrollmentDate", "Enrollment date is required."):
            try:
                cleaned["enrollmentDate"] = parse_date(payload.get("enrollmentDate"))
            except (TypeError, ValueError):
                errors["enrollmentDate"] = "Enrollment date must be an ISO-8601 date."

    _validate_status(payload, cleaned, errors, require_all=require_all)

    return cleaned, errors


def validate_course_payload(payload: Any, *, require_all: bool) -> Tuple[Cleaned, Errors]:
    """Check a course create (``require_all``) or partial update payload."""

    if not isinstance(payload, dict):
        return {}, {"_global": "Request body must be JSON."}

    errors: Errors = {}
    cleaned: Cleaned = {}

    def require_field(field: str, message: str) -> bool:
        if field not in payload or _clean_string(payload.get(field)) == "":
            errors[field] = message
            return False
        return True

    if require_all or "name" in payload:
        if require_field("name", "Course name is required."):
            cleaned["name"] = _clean_string(payload.get("name"))

    if require_all or "description" in payload:
        if require_field("description", "Description is required."):
            cleaned["description"] = _clean_string(payload.get("description"))

    if require_all or "duration" in payload:
        if require_field("duration", "Duration is required."):
            try:
                duration = _parse_number(payload.get("duration"))
                if duration < 0:
                    raise ValueError
                cleaned["duration"] = duration
            except (TypeError, ValueError):
                errors["duration"] = "Duration must be a non-negative number of months."

    _validate_status(payload, cleaned, errors, require_all=require_all)

    return cleaned, errors


__all__ = ["parse_date", "validate_student_payload", "validate_course_payload"]
