"""MongoDB connection handle shared by the application."""

from __future__ import annotations

import logging

from pymongo import ASCENDING, DESCENDING, MongoClient
from pymongo.collection import Collection

from .config import get_db_name, get_mongo_uri

logger = logging.getLogger(__name__)

STUDENTS_COLLECTION = "students"
COURSES_COLLECTION = "courses"


class Database:
    """Process-scoped MongoDB resource: one client, lazily indexed collections.

    Pass ``client`` to reuse an existing client (tests hand in a mongomock
    client); otherwise ``connect`` builds a ``MongoClient`` from ``uri``.
    """

    def __init__(self, uri: str | None = None, db_name: str | None = None, client=None):
        self.uri = uri or get_mongo_uri()
        self.db_name = db_name or get_db_name(self.uri)
        self._client = client
        self._students_indexes_created = False
        self._courses_indexes_created = False

    def connect(self) -> "Database":
        """Create the client if needed. Does not block on server selection."""

        if self._client is None:
            self._client = MongoClient(self.uri, serverSelectionTimeoutMS=5000)
            logger.info("MongoDB client created for database '%s'", self.db_name)
        return self

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
            self._students_indexes_created = False
            self._courses_indexes_created = False
            logger.info("MongoDB client closed")

    @property
    def is_connected(self) -> bool:
        """Whether the client currently knows of a readable server.

        Reads the client's topology state only; no command is sent.
        """

        if self._client is None:
            return False
        return self._client.topology_description.has_readable_server()

    @property
    def db(self):
        return self.connect()._client[self.db_name]

    def _ensure_students_indexes(self, collection: Collection) -> None:
        if self._students_indexes_created:
            return

        collection.create_index("email", unique=True, name="unique_email")
        collection.create_index([("createdAt", DESCENDING)], name="created_at_desc")
        collection.create_index([("course", ASCENDING)], name="course_idx")
        self._students_indexes_created = True

    def _ensure_courses_indexes(self, collection: Collection) -> None:
        if self._courses_indexes_created:
            return

        collection.create_index("name", unique=True, name="unique_name")
        self._courses_indexes_created = True

    @property
    def students(self) -> Collection:
        """Return the collection that stores student documents."""

        collection = self.db[STUDENTS_COLLECTION]
        self._ensure_students_indexes(collection)
        return collection

    @property
    def courses(self) -> Collection:
        """Return the courses collection and ensure its unique name index."""

        collection = self.db[COURSES_COLLECTION]
        self._ensure_courses_indexes(collection)
        return collection


__all__ = ["Database", "STUDENTS_COLLECTION", "COURSES_COLLECTION"]
