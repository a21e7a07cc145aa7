"""Student and course field definitions and JSON serialization."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Mapping

STATUS_ACTIVE = "active"
STATUS_INACTIVE = "inactive"
STATUS_VALUES = (STATUS_ACTIVE, STATUS_INACTIVE)

STUDENT_FIELDS = ("name", "email", "course", "enrollmentDate", "status")
COURSE_FIELDS = ("name", "description", "duration", "status")


def utcnow() -> datetime:
    """Current UTC time as a naive datetime at millisecond precision.

    MongoDB stores datetimes as naive UTC milliseconds, so values produced here
    round-trip unchanged. Two updates to the same record within one
    millisecond therefore share an ``updatedAt`` value.
    """

    now = datetime.now(timezone.utc).replace(tzinfo=None)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def format_datetime(value: Any) -> Any:
    if not isinstance(value, datetime):
        return value
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    else:
        value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _serialize_timestamps(document: Mapping[str, Any], payload: Dict[str, Any]) -> Dict[str, Any]:
    payload["createdAt"] = format_datetime(document.get("createdAt"))
    payload["updatedAt"] = format_datetime(document.get("updatedAt"))
    return payload


def serialize_student(document: Mapping[str, Any]) -> Dict[str, Any]:
    """Convert a MongoDB student document into a JSON-serialisable dict."""

    student = {
        "_id": str(document.get("_id", "")),
        "name": document.get("name"),
        "email": document.get("email"),
        "course": document.get("course"),
        "enrollmentDate": format_datetime(document.get("enrollmentDate")),
        "status": document.get("status", STATUS_ACTIVE),
    }
    return _serialize_timestamps(document, student)


def serialize_course(document: Mapping[str, Any]) -> Dict[str, Any]:
    """Serialize a raw Mongo course document to JSON-friendly dict."""

    duration = document.get("duration")
    if isinstance(duration, float) and duration.is_integer():
        duration = int(duration)

    course = {
        "_id": str(document.get("_id", "")),
        "name": document.get("name"),
        "description": document.get("description"),
        "duration": duration,
        "status": document.get("status", STATUS_ACTIVE),
    }
    return _serialize_timestamps(document, course)


__all__ = [
    "STATUS_ACTIVE",
    "STATUS_INACTIVE",
    "STATUS_VALUES",
    "STUDENT_FIELDS",
    "COURSE_FIELDS",
    "utcnow",
    "format_datetime",
    "serialize_student",
    "serialize_course",
]
