"""Repositories over the students and courses collections."""

from .courses import CourseRepository
from .students import StudentRepository

__all__ = ["CourseRepository", "StudentRepository"]
