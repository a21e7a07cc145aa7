"""Application route blueprints and helpers."""

from .courses import courses_bp
from .health import health_bp
from .reports import reports_bp
from .students import students_bp

__all__ = ["courses_bp", "health_bp", "reports_bp", "students_bp"]
