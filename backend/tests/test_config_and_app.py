import pytest
from pydantic import ValidationError

from medrecords import config


def test_settings_defaults_and_cache():
    settings = config.get_settings()
    second = config.get_settings()

    assert settings is second
    assert settings.app_name == "MedRecords API"
    assert settings.query_service_endpoint == "http://localhost:8001/query"
    assert settings.query_service_timeout_seconds > 0


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("PORT", "9090")
    monkeypatch.setenv("QUERY_SERVICE_URL", "http://query-service:8001/")
    monkeypatch.setenv("RETURN_RECORD_ID", "true")

    settings = config.Settings()

    assert settings.port == 9090
    assert settings.return_record_id is True
    assert settings.query_service_endpoint == "http://query-service:8001/query"


def test_settings_default_port(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)

    assert config.Settings().port == 8081


def test_settings_reject_non_positive_timeout(monkeypatch):
    monkeypatch.setenv("QUERY_SERVICE_TIMEOUT_SECONDS", "0")

    with pytest.raises(ValidationError):
        config.Settings()


def test_main_app_metadata():
    from medrecords.main import app

    assert app.title == config.settings.app_name
    assert app.version == config.settings.app_version
    assert app.docs_url == "/docs"
    paths = {route.path for route in app.routes}
    assert {"/create", "/health", "/"} <= paths


def test_run_starts_uvicorn_on_configured_port(monkeypatch):
    from medrecords import main

    started = {}

    def _fake_run(app, **kwargs):
        started["app"] = app
        started.update(kwargs)

    monkeypatch.setattr(main.uvicorn, "run", _fake_run)
    monkeypatch.setattr(main.settings, "port", 9191)

    main.run()

    assert started["app"] is main.app
    assert started["port"] == 9191
    assert started["host"] == main.settings.host
