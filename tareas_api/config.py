"""Application configuration classes."""

import os

from dotenv import load_dotenv


load_dotenv()


class Config:
    """Base configuration."""

    # Flask
    DEBUG = os.getenv("DEBUG", "false").lower() == "true"

    # Server
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "3000"))

    # Service identity, shared with telemetry
    SERVICE_NAME = os.getenv("OTEL_SERVICE_NAME", "tareas-api")
    SERVICE_VERSION = os.getenv("OTEL_SERVICE_VERSION", "1.0.0")
    OTLP_ENDPOINT = os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT", "http://localhost:4318")

    # Store
    SEED_TASKS = os.getenv("SEED_TASKS", "true").lower() == "true"


class TestConfig(Config):
    """Test configuration."""

    TESTING = True
    DEBUG = True
    SEED_TASKS = True
