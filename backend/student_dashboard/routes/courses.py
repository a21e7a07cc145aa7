"""Course CRUD endpoints."""

from __future__ import annotations

from flask import Blueprint, jsonify, request
from pymongo.errors import PyMongoError

from ..errors import ServiceError
from ..models import serialize_course
from .common import get_services, handle_db_error, service_error

courses_bp = Blueprint("courses", __name__, url_prefix="/api/courses")


@courses_bp.get("")
def list_courses():
    try:
        courses = get_services().courses.list_all()
        return jsonify([serialize_course(doc) for doc in courses])
    except PyMongoError:
        return handle_db_error("Failed to list courses")


@courses_bp.post("")
def create_course():
    data = request.get_json(silent=True)
    try:
        course = get_services().courses.create(data)
        return jsonify(serialize_course(course)), 201
    except ServiceError as exc:
        return service_error(exc)
    except PyMongoError:
        return handle_db_error("Failed to create course")


@courses_bp.get("/<course_id>")
def get_course(course_id: str):
    try:
        return jsonify(serialize_course(get_services().courses.get(course_id)))
    except ServiceError as exc:
        return service_error(exc)
    except PyMongoError:
        return handle_db_error("Failed to load course")


@courses_bp.put("/<course_id>")
def update_course(course_id: str):
    data = request.get_json(silent=True)
    try:
        course = get_services().courses.update(course_id, data)
        return jsonify(serialize_course(course))
    except ServiceError as exc:
        return service_error(exc)
    except PyMongoError:
        return handle_db_error("Failed to update course")


@courses_bp.delete("/<course_id>")
def delete_course(course_id: str):
    try:
        get_services().courses.delete(course_id)
        return jsonify({"message": "Course deleted successfully"})
    except ServiceError as exc:
        return service_error(exc)
    except PyMongoError:
        return handle_db_error("Failed to delete course")


__all__ = ["courses_bp"]
