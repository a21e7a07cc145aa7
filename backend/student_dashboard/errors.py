"""Domain errors raised by repositories and translated to HTTP by the views."""

from __future__ import annotations

from typing import Dict


class ServiceError(Exception):
    """Base class for errors that map onto a client-facing HTTP status."""

    status_code = 500

    def __init__(self, message: str, details: Dict[str, str] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or None


class ValidationError(ServiceError):
    """Missing or malformed fields, or a uniqueness violation."""

    status_code = 400


class ConflictError(ServiceError):
    """The operation is blocked by the referential-integrity rule."""

    status_code = 400


class NotFoundError(ServiceError):
    status_code = 404


__all__ = ["ServiceError", "ValidationError", "ConflictError", "NotFoundError"]
