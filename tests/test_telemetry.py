"""Tests for OpenTelemetry setup."""

from unittest.mock import MagicMock, patch

import pytest

import tareas_api.telemetry as telemetry_mod
from tareas_api.config import TestConfig


_SDK_PATCHES = (
    "tareas_api.telemetry.TracerProvider",
    "tareas_api.telemetry.MeterProvider",
    "tareas_api.telemetry.LoggerProvider",
    "tareas_api.telemetry.BatchSpanProcessor",
    "tareas_api.telemetry.BatchLogRecordProcessor",
    "tareas_api.telemetry.PeriodicExportingMetricReader",
    "tareas_api.telemetry.OTLPSpanExporter",
    "tareas_api.telemetry.OTLPMetricExporter",
    "tareas_api.telemetry.OTLPLogExporter",
    "tareas_api.telemetry.LoggingHandler",
    "tareas_api.telemetry.LoggingInstrumentor",
    "tareas_api.telemetry.Resource",
    "tareas_api.telemetry.get_aggregated_resources",
    "tareas_api.telemetry.trace",
    "tareas_api.telemetry.metrics",
    "tareas_api.telemetry._logs",
)


@pytest.fixture
def sdk_mocks():
    mocks: dict[str, MagicMock] = {}
    for target in _SDK_PATCHES:
        mocks[target.rsplit(".", 1)[-1]] = patch(target).start()
    telemetry_mod._initialized = False
    yield mocks
    patch.stopall()
    telemetry_mod._initialized = False
    telemetry_mod._otel_log_handler = None


class CollectorConfig(TestConfig):
    SERVICE_NAME = "tareas-staging"
    SERVICE_VERSION = "2.1.0"
    OTLP_ENDPOINT = "http://collector:4318"


def test_resource_uses_config_identity(sdk_mocks):
    telemetry_mod.setup_telemetry(CollectorConfig)

    attributes = sdk_mocks["Resource"].create.call_args.args[0]
    assert attributes["service.name"] == "tareas-staging"
    assert attributes["service.version"] == "2.1.0"
    assert attributes["tareas.seeded"] is True


def test_exporters_use_config_endpoint(sdk_mocks):
    telemetry_mod.setup_telemetry(CollectorConfig)

    sdk_mocks["OTLPSpanExporter"].assert_called_once_with(
        endpoint="http://collector:4318/v1/traces"
    )
    sdk_mocks["OTLPMetricExporter"].assert_called_once_with(
        endpoint="http://collector:4318/v1/metrics"
    )
    sdk_mocks["OTLPLogExporter"].assert_called_once_with(endpoint="http://collector:4318/v1/logs")


def test_setup_runs_once(sdk_mocks):
    telemetry_mod.setup_telemetry(CollectorConfig)
    telemetry_mod.setup_telemetry(CollectorConfig)

    sdk_mocks["TracerProvider"].assert_called_once()


def test_health_paths_follow_health_blueprint(app):
    assert telemetry_mod.health_paths(app) == ["/health"]


def test_instrumentation_excludes_health_routes(app):
    with patch.object(telemetry_mod, "FlaskInstrumentor") as instrumentor:
        telemetry_mod.instrument_flask_app(app)

    instrumentor.return_value.instrument_app.assert_called_once_with(
        app, excluded_urls="/health"
    )
