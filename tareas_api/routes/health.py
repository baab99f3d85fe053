"""Health check endpoint."""

import logging
from typing import Any

from flask import Blueprint, current_app, jsonify

from tareas_api.services import get_store
from tareas_api.telemetry import HEALTH_BLUEPRINT


logger = logging.getLogger(__name__)

health_bp = Blueprint(HEALTH_BLUEPRINT, __name__)


@health_bp.route("/health", methods=["GET"])
def health_check():
    """Health check endpoint for monitoring.

    Returns:
        JSON response with health status of the task store.
    """
    health_status: dict[str, Any] = {
        "status": "healthy",
        "components": {
            "store": "healthy",
        },
        "service": {
            "name": current_app.config.get("SERVICE_NAME", "tareas-api"),
            "version": current_app.config.get("SERVICE_VERSION", "1.0.0"),
        },
    }

    try:
        health_status["tasks"] = get_store().count()
    except Exception:
        logger.exception("Task store health check failed")
        health_status["status"] = "unhealthy"
        health_status["components"]["store"] = "unhealthy"

    status_code = 200 if health_status["status"] == "healthy" else 503
    return jsonify(health_status), status_code
