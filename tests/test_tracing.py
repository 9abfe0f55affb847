"""
Tests for OpenTelemetry configuration.
"""

from unittest.mock import MagicMock, patch

from fastapi import FastAPI

from employee_directory.tracing import configure_opentelemetry, instrument_fastapi


def test_configure_opentelemetry_uses_env_endpoint(monkeypatch) -> None:
    monkeypatch.setenv("OTEL_EXPORTER_OTLP_ENDPOINT", "collector:4317")

    with patch("employee_directory.tracing.OTLPSpanExporter") as exporter_cls, patch(
        "employee_directory.tracing.BatchSpanProcessor"
    ), patch("employee_directory.tracing.trace.set_tracer_provider") as set_provider:
        provider = configure_opentelemetry(
            service_name="employee-directory",
            service_version="1.0.0",
            environment="staging",
        )

    exporter_cls.assert_called_once_with(endpoint="collector:4317", insecure=True)
    set_provider.assert_called_once_with(provider)
    attributes = provider.resource.attributes
    assert attributes["service.name"] == "employee-directory"
    assert attributes["deployment.environment"] == "staging"


def test_configure_opentelemetry_explicit_endpoint() -> None:
    with patch("employee_directory.tracing.OTLPSpanExporter") as exporter_cls, patch(
        "employee_directory.tracing.BatchSpanProcessor"
    ), patch("employee_directory.tracing.trace.set_tracer_provider"):
        configure_opentelemetry(
            service_name="employee-directory",
            service_version="1.0.0",
            environment="production",
            otlp_endpoint="otel:4317",
        )

    exporter_cls.assert_called_once_with(endpoint="otel:4317", insecure=True)


def test_instrument_fastapi_default_exclusions() -> None:
    test_app = FastAPI()

    with patch("employee_directory.tracing.FastAPIInstrumentor") as instrumentor:
        instrumentor.instrument_app = MagicMock()
        instrument_fastapi(test_app)

    _, kwargs = instrumentor.instrument_app.call_args
    assert kwargs["excluded_urls"] == "/health,/metrics,/static"
