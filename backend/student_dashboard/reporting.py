"""Dashboard statistics and enrollment reports.

Each figure comes from its own query, so a write landing between two queries
can leave totals that disagree with the grouped counts. The results are a
best-effort snapshot; no transaction is used.
"""

from __future__ import annotations

import math
from typing import Any, Dict, List

from .db import Database
from .models import STATUS_ACTIVE, STATUS_INACTIVE

COURSE_GROUP_PIPELINE: List[Dict[str, Any]] = [
    {"$group": {"_id": "$course", "count": {"$sum": 1}}},
    {"$sort": {"_id": 1}},
]


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def success_rate(graduates: int, total_students: int) -> int:
    """Percentage of graduated (inactive) students, 0 when there are none."""

    if total_students <= 0:
        return 0
    return _round_half_up(graduates / total_students * 100)


def _students_by_course(database: Database) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for entry in database.students.aggregate(COURSE_GROUP_PIPELINE):
        key = entry.get("_id")
        counts["" if key is None else str(key)] = int(entry.get("count", 0) or 0)
    return counts


def dashboard_stats(database: Database) -> Dict[str, Any]:
    students = database.students
    courses = database.courses

    total_students = students.count_documents({})
    active_students = students.count_documents({"status": STATUS_ACTIVE})
    total_courses = courses.count_documents({})
    active_courses = courses.count_documents({"status": STATUS_ACTIVE})
    graduates = students.count_documents({"status": STATUS_INACTIVE})
    course_counts = _students_by_course(database)

    return {
        "totalStudents": total_students,
        "activeStudents": active_students,
        "totalCourses": total_courses,
        "activeCourses": active_courses,
        "graduates": graduates,
        "courseCounts": course_counts,
        "successRate": success_rate(graduates, total_students),
    }


def build_report(database: Database) -> Dict[str, Any]:
    """Student totals grouped by the free-text ``course`` value.

    ``totalCourses`` counts distinct course values among students, which is
    not necessarily the number of course documents.
    """

    students = database.students
    total_students = students.count_documents({})
    distinct_courses = students.distinct("course")

    return {
        "totalStudents": total_students,
        "totalCourses": len(distinct_courses),
        "studentsByCourse": _students_by_course(database),
    }


__all__ = ["dashboard_stats", "build_report", "success_rate"]
