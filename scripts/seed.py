"""Seed helper that loads sample courses and students into MongoDB."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Dict, List

from dotenv import load_dotenv
from pymongo.errors import PyMongoError

ROOT_DIR = Path(__file__).resolve().parent.parent
BACKEND_DIR = ROOT_DIR / "backend"
ENV_PATH = BACKEND_DIR / ".env"
SEED_PATH = Path(__file__).resolve().parent / "seed.json"

if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))

from student_dashboard.db import Database  # noqa: E402
from student_dashboard.errors import ServiceError  # noqa: E402
from student_dashboard.repositories import CourseRepository, StudentRepository  # noqa: E402


def load_env() -> None:
    if ENV_PATH.exists():
        load_dotenv(ENV_PATH)


def read_seed_file() -> Dict[str, List[Dict[str, Any]]]:
    with SEED_PATH.open("r", encoding="utf-8") as seed_file:
        data = json.load(seed_file)
    if not isinstance(data, dict):
        raise ValueError("Seed file must contain an object of collections")
    for name in ("courses", "students"):
        if not isinstance(data.get(name, []), list):
            raise ValueError(f"Seed data for collection '{name}' must be a list")
    return data


def main() -> None:
    load_env()
    database = Database().connect()
    students = StudentRepository(database)
    courses = CourseRepository(database, students)

    try:
        seed_data = read_seed_file()

        database.students.delete_many({})
        database.courses.delete_many({})

        course_docs = seed_data.get("courses", [])
        for payload in course_docs:
            courses.create(payload)
        print(f"Loaded {len(course_docs)} document(s) into 'courses' collection")

        student_docs = seed_data.get("students", [])
        for payload in student_docs:
            students.create(payload)
        print(f"Loaded {len(student_docs)} document(s) into 'students' collection")

        print(f"Seeding complete for database '{database.db_name}'.")
    except ServiceError as exc:
        print(f"Invalid seed record: {exc.message} {exc.details or ''}".rstrip())
        raise SystemExit(1)
    except PyMongoError as exc:  # pragma: no cover - requires Mongo connection
        print(f"MongoDB error: {exc}")
        raise SystemExit(1)
    finally:
        database.close()


if __name__ == "__main__":
    main()
