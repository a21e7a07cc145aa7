"""Payload validation runs without a database."""

from __future__ import annotations

import sys
import unittest
from datetime import datetime
from pathlib import Path

BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))

from student_dashboard.validation import (  # noqa: E402
    parse_date,
    validate_course_payload,
    validate_student_payload,
)


class StudentPayloadTestCase(unittest.TestCase):
    def test_create_requires_every_field(self) -> None:
        cleaned, errors = validate_student_payload({}, require_all=True)

        self.assertEqual({"status": "active"}, cleaned)
        self.assertEqual(
            {"name", "email", "course", "enrollmentDate"}, set(errors)
        )

    def test_blank_strings_count_as_missing(self) -> None:
        _, errors = validate_student_payload(
            {
                "name": "   ",
                "email": "a@x.com",
                "course": "CS101",
                "enrollmentDate": "2024-01-01",
            },
            require_all=True,
        )

        self.assertEqual({"name": "Name is required."}, errors)

    def test_create_defaults_status_and_parses_date(self) -> None:
        cleaned, errors = validate_student_payload(
            {
                "name": " Ana ",
                "email": "a@x.com",
                "course": "CS101",
                "enrollmentDate": "2024-01-01",
                "nickname": "dropped",
            },
            require_all=True,
        )

        self.assertEqual({}, errors)
        self.assertEqual(
            {
                "name": "Ana",
                "email": "a@x.com",
                "course": "CS101",
                "enrollmentDate": datetime(2024, 1, 1),
                "status": "active",
            },
            cleaned,
        )

    def test_partial_update_only_checks_supplied_fields(self) -> None:
        cleaned, errors = validate_student_payload({"status": "inactive"}, require_all=False)

        self.assertEqual({}, errors)
        self.assertEqual({"status": "inactive"}, cleaned)

    def test_rejects_unknown_status_and_bad_date(self) -> None:
        _, errors = validate_student_payload(
            {"status": "graduated", "enrollmentDate": "yesterday"}, require_all=False
        )

        self.assertIn("status", errors)
        self.assertIn("enrollmentDate", errors)

    def test_non_object_body(self) -> None:
        _, errors = validate_student_payload(None, require_all=True)
        self.assertEqual({"_global": "Request body must be JSON."}, errors)

        _, errors = validate_student_payload(["Ana"], require_all=False)
        self.assertEqual({"_global": "Request body must be JSON."}, errors)


class CoursePayloadTestCase(unittest.TestCase):
    def test_create_requires_name_description_and_duration(self) -> None:
        _, errors = validate_course_payload({"status": "active"}, require_all=True)

        self.assertEqual({"name", "description", "duration"}, set(errors))

    def test_duration_accepts_numbers_and_numeric_strings(self) -> None:
        for raw, expected in [(6, 6), ("6", 6), (1.5, 1.5), ("2.5", 2.5)]:
            with self.subTest(raw=raw):
                cleaned, errors = validate_course_payload({"duration": raw}, require_all=False)
                self.assertEqual({}, errors)
                self.assertEqual(expected, cleaned["duration"])

    def test_duration_rejects_non_numbers(self) -> None:
        for raw in [True, "six", -1, "nan"]:
            with self.subTest(raw=raw):
                _, errors = validate_course_payload({"duration": raw}, require_all=False)
                self.assertIn("duration", errors)


class ParseDateTestCase(unittest.TestCase):
    def test_plain_date(self) -> None:
        self.assertEqual(datetime(2024, 1, 1), parse_date("2024-01-01"))

    def test_utc_designator_is_normalized_to_naive_utc(self) -> None:
        self.assertEqual(
            datetime(2024, 1, 1, 8, 30), parse_date("2024-01-01T10:30:00+02:00")
        )
        self.assertEqual(
            datetime(2024, 1, 1, 10, 30, 0, 123000),
            parse_date("2024-01-01T10:30:00.123456Z"),
        )


if __name__ == "__main__":
    unittest.main()
