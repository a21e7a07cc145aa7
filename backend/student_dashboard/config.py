"""Application configuration helpers."""

import os

from dotenv import load_dotenv

_BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
_DOTENV_PATH = os.path.join(_BASE_DIR, ".env")

if os.path.exists(_DOTENV_PATH):
    load_dotenv(_DOTENV_PATH)

DEFAULT_MONGO_URI = "mongodb://localhost:27017/student-dashboard"
DEFAULT_DB_NAME = "student-dashboard"
DEFAULT_ENVIRONMENT = "development"
DEFAULT_PORT = 5000


class ConfigError(RuntimeError):
    """Raised when configuration values are missing or invalid."""


def get_mongo_uri():
    """Return the MongoDB connection string, falling back to a local server."""

    return os.getenv("MONGODB_URI") or DEFAULT_MONGO_URI


def get_db_name(uri=None):
    """Return the database name from MONGODB_DB or the path of the URI."""

    db_name = os.getenv("MONGODB_DB")
    if db_name:
        return db_name

    main = (uri or get_mongo_uri()).split("?", 1)[0].rstrip("/")
    if "://" in main:
        main = main.split("://", 1)[1]

    if "/" not in main:
        return DEFAULT_DB_NAME

    candidate = main.split("/", 1)[1]
    return candidate or DEFAULT_DB_NAME


def get_environment():
    """Return the environment name reported by the health endpoints."""

    return os.getenv("APP_ENV") or DEFAULT_ENVIRONMENT


def get_log_level():
    return (os.getenv("LOG_LEVEL") or "INFO").upper()


def get_log_dir():
    """Directory for log files, or None when file logging is disabled."""

    return os.getenv("LOG_DIR") or None


def get_host():
    return os.getenv("HOST") or "0.0.0.0"


def get_port():
    raw = os.getenv("PORT")
    if not raw:
        return DEFAULT_PORT
    try:
        port = int(raw)
    except ValueError:
        raise ConfigError(f"PORT must be an integer, got {raw!r}.") from None
    if not 0 < port < 65536:
        raise ConfigError(f"PORT must be between 1 and 65535, got {port}.")
    return port


__all__ = [
    "ConfigError",
    "get_mongo_uri",
    "get_db_name",
    "get_environment",
    "get_log_level",
    "get_log_dir",
    "get_host",
    "get_port",
]
