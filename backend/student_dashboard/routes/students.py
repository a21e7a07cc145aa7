"""Student CRUD and search endpoints."""

from __future__ import annotations

from flask import Blueprint, jsonify, request
from pymongo.errors import PyMongoError

from ..errors import ServiceError
from ..models import serialize_student
from .common import get_services, handle_db_error, service_error

students_bp = Blueprint("students", __name__, url_prefix="/api/students")


@students_bp.get("")
def list_students():
    try:
        students = get_services().students.list_all()
        return jsonify([serialize_student(doc) for doc in students])
    except PyMongoError:
        return handle_db_error("Failed to list students")


@students_bp.post("")
def create_student():
    data = request.get_json(silent=True)
    try:
        student = get_services().students.create(data)
        return jsonify(serialize_student(student)), 201
    except ServiceError as exc:
        return service_error(exc)
    except PyMongoError:
        return handle_db_error("Failed to create student")


# Registered ahead of /<student_id> so "search" is never taken for an id.
@students_bp.get("/search")
def search_students():
    try:
        students = get_services().students.search(request.args.get("q"))
        return jsonify([serialize_student(doc) for doc in students])
    except PyMongoError:
        return handle_db_error("Failed to search students")


@students_bp.get("/<student_id>")
def get_student(student_id: str):
    try:
        return jsonify(serialize_student(get_services().students.get(student_id)))
    except ServiceError as exc:
        return service_error(exc)
    except PyMongoError:
        return handle_db_error("Failed to load student")


@students_bp.put("/<student_id>")
def update_student(student_id: str):
    data = request.get_json(silent=True)
    try:
        student = get_services().students.update(student_id, data)
        return jsonify(serialize_student(student))
    except ServiceError as exc:
        return service_error(exc)
    except PyMongoError:
        return handle_db_error("Failed to update student")


@students_bp.delete("/<student_id>")
def delete_student(student_id: str):
    try:
        get_services().students.delete(student_id)
        return jsonify({"message": "Student deleted successfully"})
    except ServiceError as exc:
        return service_error(exc)
    except PyMongoError:
        return handle_db_error("Failed to delete student")


__all__ = ["students_bp"]
