"""Dashboard statistics and reports endpoints."""

from __future__ import annotations

import logging

from flask import Blueprint, jsonify
from pymongo.errors import PyMongoError

from ..reporting import build_report, dashboard_stats
from .common import get_services, handle_db_error

reports_bp = Blueprint("reports", __name__)

logger = logging.getLogger(__name__)


@reports_bp.get("/api/dashboard/stats")
def stats():
    try:
        return jsonify(dashboard_stats(get_services().database))
    except PyMongoError:
        return handle_db_error("Failed to load dashboard stats")


@reports_bp.get("/api/reports")
def reports():
    try:
        return jsonify(build_report(get_services().database))
    except PyMongoError:
        logger.exception("Failed to generate reports due to MongoDB error")
        return jsonify({"error": "Error generating reports"}), 500


__all__ = ["reports_bp"]
