import importlib
import logging

import pytest
from fastapi.testclient import TestClient
from pydantic import ValidationError

import hello_service.main
from hello_service.main import create_app
from hello_service.routes import RouteNotFound, UnknownVariant


def test_default_variant_follows_app_env(monkeypatch):
    monkeypatch.setenv("APP_ENV", "production")
    app = create_app()
    assert app.state.variant == "production"
    assert app.version == "2.0"
    client = TestClient(app)
    assert client.get("/health").text == "Production server is healthy! Version 2.0"
    assert client.get("/status").status_code == 404


def test_default_variant_is_dev(monkeypatch):
    monkeypatch.delenv("APP_ENV", raising=False)
    assert create_app().state.variant == "dev"


def test_invalid_app_env_rejected(monkeypatch):
    monkeypatch.setenv("APP_ENV", "qa")
    with pytest.raises(ValidationError):
        create_app()


def test_unknown_variant_rejected():
    with pytest.raises(UnknownVariant):
        create_app("qa")


def test_create_app_logs_variant(caplog):
    with caplog.at_level(logging.INFO, logger="hello_service.main"):
        create_app("staging")
    assert "staging" in caplog.text
    assert "/status" in caplog.text


def test_not_found_is_plain_text(dev_client):
    for resp in (dev_client.get("/health"), dev_client.post("/hello")):
        assert resp.status_code == 404
        assert resp.text == "Not Found"
        assert resp.headers["content-type"].startswith("text/plain")


def test_route_not_found_raised_in_handler():
    app = create_app("dev")

    @app.get("/missing")
    def missing():
        raise RouteNotFound("GET", "/missing")

    resp = TestClient(app).get("/missing")
    assert resp.status_code == 404
    assert resp.text == "Not Found"
    assert resp.headers["content-type"].startswith("text/plain")


def test_import_does_not_read_app_env(monkeypatch):
    monkeypatch.setenv("APP_ENV", "qa")
    importlib.reload(hello_service.main)
    assert not hasattr(hello_service.main, "app")
