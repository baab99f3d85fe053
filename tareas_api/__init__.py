"""Flask application factory with OpenTelemetry instrumentation."""

import logging
import os

from flask import Flask

from tareas_api.extensions import ma


def create_app(config_class: type | None = None) -> Flask:
    """Create and configure the Flask application.

    Each call builds its own task store, seeded with the default tasks.

    Args:
        config_class: Configuration class to use. Defaults to Config.

    Returns:
        Configured Flask application instance.
    """
    if config_class is None:
        from tareas_api.config import Config

        config_class = Config

    # Initialize telemetry BEFORE creating Flask app
    if not os.getenv("OTEL_SDK_DISABLED"):
        from tareas_api.telemetry import (
            get_otel_log_handler,
            instrument_flask_app,
            setup_telemetry,
        )

        setup_telemetry(config_class)

    app = Flask(__name__)

    # Load configuration
    app.config.from_object(config_class)

    # Tasks serialize in field order, not alphabetically
    app.json.sort_keys = False

    # Initialize extensions
    ma.init_app(app)

    from tareas_api.services import init_store

    init_store(app)

    # Register blueprints
    from tareas_api.routes.health import health_bp
    from tareas_api.routes.tasks import tasks_bp

    app.register_blueprint(health_bp)
    app.register_blueprint(tasks_bp)

    # Instrument after blueprints so health routes can be excluded
    # (needed for Gunicorn worker forks)
    if not os.getenv("OTEL_SDK_DISABLED"):
        instrument_flask_app(app)

    # Register error handlers
    from tareas_api.errors import register_error_handlers

    register_error_handlers(app)

    # Register metrics middleware
    if not os.getenv("OTEL_SDK_DISABLED"):
        from tareas_api.middleware.metrics import register_metrics_middleware

        register_metrics_middleware(app)

    # Attach OTel log handler after app setup
    if not os.getenv("OTEL_SDK_DISABLED"):
        handler = get_otel_log_handler()
        if handler:
            root_logger = logging.getLogger()
            if handler not in root_logger.handlers:
                root_logger.addHandler(handler)

    _configure_logging()

    return app


def _configure_logging() -> None:
    """Configure logging for the application."""
    # App loggers propagate to root, where the OTel handler is
    logging.getLogger("tareas_api").setLevel(logging.DEBUG)
    logging.getLogger("tareas_api").propagate = True

    # Reduce noise from framework loggers
    logging.getLogger("werkzeug").setLevel(logging.WARNING)
