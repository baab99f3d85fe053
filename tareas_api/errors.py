"""Error responses and handlers with OpenTelemetry trace context."""

import logging
from collections.abc import Mapping

from flask import Flask, jsonify
from opentelemetry import trace
from werkzeug.exceptions import HTTPException


logger = logging.getLogger(__name__)

TASK_NOT_FOUND = "Tarea no encontrada"
INVALID_STATUS_FILTER = "Estado no válido. Use 'pendiente' o 'completada'."
INVALID_STATUS = "El estado debe ser 'pendiente' o 'completada'."
MISSING_TITLE_OR_DESCRIPTION = "El título y la descripción son obligatorios."
INVALID_STEPS = "Los pasos deben ser una lista de textos."
INVALID_BODY = "El cuerpo de la petición debe ser un objeto JSON."

_DEFAULT_MESSAGES = {
    400: "Petición no válida",
    404: "Recurso no encontrado",
    405: "Método no permitido",
    415: "Tipo de contenido no soportado",
    500: "Error interno del servidor",
}


def error_response(message: str, status_code: int) -> tuple:
    """Create error response with trace context.

    Use this function in routes instead of returning jsonify directly.

    Args:
        message: Error message.
        status_code: HTTP status code.

    Returns:
        Tuple of (response, status_code).
    """
    response = {"message": message}

    span = trace.get_current_span()
    span_context = span.get_span_context()
    if span_context.is_valid:
        response["trace_id"] = format(span_context.trace_id, "032x")

    return jsonify(response), status_code


def first_error_message(messages, default: str = "Petición no válida") -> str:
    """Return the first message of a (possibly nested) marshmallow error dict.

    Args:
        messages: ``ValidationError.messages``.
        default: Message used when nothing can be extracted.

    Returns:
        A single human-readable message.
    """
    if isinstance(messages, str):
        return messages
    if isinstance(messages, Mapping):
        values = messages.values()
    elif isinstance(messages, (list, tuple)):
        values = messages
    else:
        return default

    for value in values:
        message = first_error_message(value, default="")
        if message:
            return message
    return default


def register_error_handlers(app: Flask) -> None:
    """Register error handlers on Flask app.

    Args:
        app: Flask application instance.
    """

    @app.errorhandler(HTTPException)
    def http_error(error: HTTPException):
        status_code = error.code or 500
        message = _DEFAULT_MESSAGES.get(status_code, error.name)
        return error_response(message, status_code)

    @app.errorhandler(Exception)
    def unhandled_error(error: Exception):
        logger.exception("Unhandled error: %s", error)
        return error_response(_DEFAULT_MESSAGES[500], 500)
