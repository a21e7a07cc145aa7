"""Shared plumbing for the collection repositories."""

from __future__ import annotations

from typing import Any, Callable, Dict

from bson import ObjectId
from bson.errors import InvalidId

from ..db import Database
from ..errors import NotFoundError, ValidationError
from ..models import utcnow

Clock = Callable[[], Any]


class BaseRepository:
    not_found_message = "Record not found"

    def __init__(self, database: Database, clock: Clock | None = None):
        self.database = database
        self.clock = clock or utcnow

    def _object_id(self, record_id: Any) -> ObjectId:
        # Malformed ids can never match a document.
        try:
            return ObjectId(str(record_id))
        except (InvalidId, TypeError):
            raise NotFoundError(self.not_found_message) from None

    @staticmethod
    def _raise_if_invalid(errors: Dict[str, str]) -> None:
        if errors:
            details = {k: v for k, v in errors.items() if k != "_global"}
            message = errors.get("_global", "Validation failed.")
            raise ValidationError(message, details)


__all__ = ["BaseRepository", "Clock"]
