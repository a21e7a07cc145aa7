"""Liveness endpoints. Always 200 while the process is serving requests."""

from __future__ import annotations

import time

from flask import Blueprint, jsonify

from ..models import format_datetime, utcnow
from .common import get_services

health_bp = Blueprint("health", __name__, url_prefix="/health")


def _liveness():
    services = get_services()
    return {
        "status": "UP",
        "timestamp": format_datetime(utcnow()),
        "uptime": round(time.monotonic() - services.started_at, 3),
        "environment": services.environment,
    }


@health_bp.get("")
def health():
    return jsonify(_liveness())


@health_bp.get("/detailed")
def health_detailed():
    payload = _liveness()
    connected = get_services().database.is_connected
    payload["database"] = {
        "status": "Connected" if connected else "Disconnected",
        "name": "MongoDB",
    }
    return jsonify(payload)


__all__ = ["health_bp"]
