"""Student collection operations."""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, Iterable, List

from pymongo import DESCENDING, ReturnDocument
from pymongo.errors import DuplicateKeyError

from ..errors import NotFoundError, ValidationError
from ..validation import validate_student_payload
from .base import BaseRepository

logger = logging.getLogger(__name__)

DUPLICATE_EMAIL_MESSAGE = "A student with this email already exists."


class StudentRepository(BaseRepository):
    not_found_message = "Student not found"

    @property
    def collection(self):
        return self.database.students

    def list_all(self) -> List[Dict[str, Any]]:
        """All students, newest first."""
        return list(self.collection.find().sort("createdAt", DESCENDING))

    def get(self, student_id: str) -> Dict[str, Any]:
        document = self.collection.find_one({"_id": self._object_id(student_id)})
        if document is None:
            raise NotFoundError(self.not_found_message)
        return document

    def create(self, payload: Any) -> Dict[str, Any]:
        cleaned, errors = validate_student_payload(payload, require_all=True)
        self._raise_if_invalid(errors)

        now = self.clock()
        document = dict(cleaned, createdAt=now, updatedAt=now)
        try:
            result = self.collection.insert_one(document)
        except DuplicateKeyError:
            logger.info("Rejected student with duplicate email %s", cleaned.get("email"))
            raise ValidationError(
                DUPLICATE_EMAIL_MESSAGE, {"email": "Email already in use."}
            ) from None

        document["_id"] = result.inserted_id
        return document

    def update(self, student_id: str, payload: Any) -> Dict[str, Any]:
        object_id = self._object_id(student_id)
        cleaned, errors = validate_student_payload(payload, require_all=False)
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
                DUPLICATE_EMAIL_MESSAGE, {"email": "Email already in use."}
            ) from None

        if document is None:
            raise NotFoundError(self.not_found_message)
        return document

    def delete(self, student_id: str) -> Dict[str, Any]:
        document = self.collection.find_one_and_delete({"_id": self._object_id(student_id)})
        if document is None:
            raise NotFoundError(self.not_found_message)
        return document

    def search(self, term: str | None) -> List[Dict[str, Any]]:
        """Students whose name, course or email contains ``term``, ignoring case.

        An empty term matches every student.
        """

        pattern = re.escape((term or "").strip())
        filters = {
            "$or": [
                {field: {"$regex": pattern, "$options": "i"}}
                for field in ("name", "course", "email")
            ]
        }
        return list(self.collection.find(filters))

    def count_enrolled(self, references: Iterable[str]) -> int:
        """Number of students whose ``course`` equals any of ``references``."""
        return self.collection.count_documents({"course": {"$in": list(references)}})


__all__ = ["StudentRepository", "DUPLICATE_EMAIL_MESSAGE"]
