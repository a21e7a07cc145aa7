"""Course collection operations, including the enrolled-students guard."""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from pymongo import ASCENDING, ReturnDocument
from pymongo.errors import DuplicateKeyError

from ..db import Database
from ..errors import ConflictError, NotFoundError, ValidationError
from ..validation import validate_course_payload
from .base import BaseRepository, Clock
from .students import StudentRepository

logger = logging.getLogger(__name__)

DUPLICATE_NAME_MESSAGE = "A course with this name already exists."
ENROLLED_STUDENTS_MESSAGE = "Cannot delete course with enrolled students"


class CourseRepository(BaseRepository):
    not_found_message = "Course not found"

    def __init__(
        self,
        database: Database,
        students: StudentRepository | None = None,
        clock: Clock | None = None,
    ):
        super().__init__(database, clock)
        self.students = students or StudentRepository(database, clock)

    @property
    def collection(self):
        return self.database.courses

    def list_all(self) -> List[Dict[str, Any]]:
        """All courses ordered by name."""
        return list(self.collection.find().sort("name", ASCENDING))

    def get(self, course_id: str) -> Dict[str, Any]:
        document = self.collection.find_one({"_id": self._object_id(course_id)})
        if document is None:
            raise NotFoundError(self.not_found_message)
        return document

    def create(self, payload: Any) -> Dict[str, Any]:
        cleaned, errors = validate_course_payload(payload, require_all=True)
        self._raise_if_invalid(errors)

        now = self.clock()
        document = dict(cleaned, createdAt=now, updatedAt=now)
        try:
            result = self.collection.insert_one(document)
        except DuplicateKeyError:
            raise ValidationError(
                DUPLICATE_NAME_MESSAGE, {"name": "Choose a different course name."}
            ) from None

        document["_id"] = result.inserted_id
        return document

    def update(self, course_id: str, payload: Any) -> Dict[str, Any]:
        object_id = self._object_id(course_id)
        cleaned, errors = validate_course_payload(payload, require_all=False)
        self._raise_if_invalid(errors)
        if not cleaned:
            raise ValidationError("No changes supplied.")

        cleaned["updatedAt"] = self.clock()
        try:
            document = self.collection.find_one_and_update(
                {"_id": object_id},
                {"$set": cleaned},
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError:
            raise ValidationError(
                DUPLICATE_NAME_MESSAGE, {"name": "Choose a different course name."}
            ) from None

        if document is None:
            raise NotFoundError(self.not_found_message)
        return document

    def delete(self, course_id: str) -> Dict[str, Any]:
        """Delete a course that no student references.

        Students point at courses through their free-text ``course`` field,
        which may hold either the course id or its name; both count.
        """

        course = self.get(course_id)
        references = [str(course["_id"]), course.get("name")]
        enrolled = self.students.count_enrolled(ref for ref in references if ref)
        if enrolled > 0:
            logger.info(
                "Refusing to delete course %s: %d enrolled student(s)", course_id, enrolled
            )
            raise ConflictError(ENROLLED_STUDENTS_MESSAGE)

        document = self.collection.find_one_and_delete({"_id": course["_id"]})
        if document is None:
            raise NotFoundError(self.not_found_message)
        return document


__all__ = ["CourseRepository", "DUPLICATE_NAME_MESSAGE", "ENROLLED_STUDENTS_MESSAGE"]
