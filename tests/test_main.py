"""Tests for the application factory and the console entry point."""

import socket
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from rollout_target.main import create_app, run, serve
from rollout_target.models.identity import BehaviorMode
from rollout_target.monitoring.prometheus import MetricsRecorder
from rollout_target.services.behavior import BehaviorEngine
from rollout_target.services.response_builder import ResponseBuilder
from rollout_target.utils.exceptions import ServerStartupError


@pytest.mark.unit
class TestCreateApp:
    """Wiring of the application factory."""

    def test_components_share_one_identity(self, make_settings):
        app = create_app(make_settings("chaotic"))

        identity = app.state.identity
        assert identity.behavior is BehaviorMode.CHAOTIC
        assert isinstance(app.state.behavior_engine, BehaviorEngine)
        assert app.state.behavior_engine.mode is identity.behavior
        assert isinstance(app.state.response_builder, ResponseBuilder)
        assert app.state.response_builder.identity is identity
        assert isinstance(app.state.metrics, MetricsRecorder)
        assert app.state.metrics.identity is identity

    def test_reads_environment_when_no_settings_given(self, monkeypatch):
        monkeypatch.setenv("BEHAVIOR", "slow")
        monkeypatch.setenv("VERSION", "9.9")
        monkeypatch.setenv("HOSTNAME", "env-pod")

        app = create_app()

        assert app.state.identity.behavior is BehaviorMode.SLOW
        assert app.state.identity.version == "9.9"
        assert app.state.identity.hostname == "env-pod"

    def test_seed_makes_runs_reproducible(self, make_settings):
        def statuses():
            app = create_app(make_settings("error-prone", behavior_seed=8))
            client = TestClient(app)
            return [client.get("/").status_code for _ in range(50)]

        assert statuses() == statuses()

    def test_generated_correlation_id(self, client):
        first = client.get("/health").headers["X-Correlation-ID"]
        second = client.get("/health").headers["X-Correlation-ID"]

        assert first and second and first != second

    def test_unexpected_errors_are_rendered_and_counted(self, make_client):
        client = make_client("normal")
        client = TestClient(client.app, raise_server_exceptions=False)

        with patch.object(
            client.app.state.response_builder, "data", side_effect=RuntimeError("boom")
        ):
            response = client.get("/api/data")

        assert response.status_code == 500
        assert response.json()["error_code"] == "E4001"
        assert client.app.state.metrics.registry.get_sample_value(
            "http_requests_total", {"method": "GET", "endpoint": "/api/data", "status": "500"}
        ) == 1.0


@pytest.mark.unit
class TestRun:
    """Exit codes of the console entry point."""

    def test_invalid_configuration_exits_with_one(self, monkeypatch):
        monkeypatch.setenv("PORT", "not-a-port")

        with pytest.raises(SystemExit) as exc_info:
            run()

        assert exc_info.value.code == 1

    def test_bind_failure_exits_with_one(self, monkeypatch):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as occupied:
            occupied.bind(("127.0.0.1", 0))
            occupied.listen(1)
            monkeypatch.setenv("HOST", "127.0.0.1")
            monkeypatch.setenv("PORT", str(occupied.getsockname()[1]))

            with pytest.raises(SystemExit) as exc_info:
                run()

        assert exc_info.value.code == 1

    def test_bind_failure_raises_startup_error(self, make_settings):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as occupied:
            occupied.bind(("127.0.0.1", 0))
            occupied.listen(1)
            port = occupied.getsockname()[1]

            with pytest.raises(ServerStartupError) as exc_info:
                serve(make_settings("normal", host="127.0.0.1", port=port))

        assert exc_info.value.code == "E5002"
        assert exc_info.value.context == {"host": "127.0.0.1", "port": port}

    def test_serves_with_configured_port_and_read_timeout(self, monkeypatch):
        monkeypatch.setenv("PORT", "8282")
        monkeypatch.setenv("HOST", "127.0.0.1")

        with patch("uvicorn.Server.run") as server_run, patch("uvicorn.Config") as config:
            run()

        server_run.assert_called_once()
        kwargs = config.call_args.kwargs
        assert kwargs["port"] == 8282
        assert kwargs["host"] == "127.0.0.1"
        assert kwargs["timeout_keep_alive"] == 5
