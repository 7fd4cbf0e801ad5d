"""
Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

try:
    from ._env import ensure_test_env
except ImportError:
    from tests._env import ensure_test_env
ensure_test_env()

import json

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from models.sensugo.config import SensuGoConfig
from routers.sensugo import router as router_module
from services.sensugo.errors import InvalidBackendURLError
from services.sensugo.routes import RouteRegistry
from services.sensugo.service import SensuGoService


class Backend:
    def __init__(self):
        self.status_code = 200
        self.exc = None
        self.requests = []

    def __call__(self, request):
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        return httpx.Response(self.status_code)


class RecordingDiagnostic:
    def __init__(self):
        self.errors = []

    def with_context(self, **context):
        return self

    def error(self, msg, exc=None, **context):
        self.errors.append((msg, exc, context))


@pytest.fixture
def backend():
    return Backend()


@pytest.fixture
def client(monkeypatch, backend):
    cfg = SensuGoConfig(
        enabled=True,
        url="https://sensu.example.com/events",
        token="Key abc",
        namespace="default",
        handlers=["slack"],
    )
    service = SensuGoService(cfg, http_transport=httpx.MockTransport(backend))
    monkeypatch.setattr(router_module, "sensugo_service", service)
    monkeypatch.setattr(router_module, "route_registry", RouteRegistry(service))

    app = FastAPI()
    app.include_router(router_module.router, prefix="/internal/v1")
    with TestClient(app) as test_client:
        yield test_client


def test_get_config_redacts_token(client):
    resp = client.get("/internal/v1/sensugo/config")
    assert resp.status_code == 200
    assert resp.json() == {
        "enabled": True,
        "url": "https://sensu.example.com/events",
        "token": "********",
        "namespace": "default",
        "handlers": ["slack"],
    }


def test_put_config_swaps_snapshot(client):
    resp = client.put(
        "/internal/v1/sensugo/config",
        json={"enabled": True, "url": "https://other.example.com/events", "namespace": "ops", "handlers": []},
    )
    assert resp.status_code == 200
    assert resp.json()["namespace"] == "ops"
    assert router_module.sensugo_service.config().url == "https://other.example.com/events"
    assert router_module.sensugo_service.config().token == ""


def test_put_config_rejects_enabled_without_url(client):
    resp = client.put("/internal/v1/sensugo/config", json={"enabled": True, "url": ""})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "must specify backend URL"
    assert router_module.sensugo_service.config().url == "https://sensu.example.com/events"


def test_put_config_rejects_unknown_fields(client):
    resp = client.put("/internal/v1/sensugo/config", json={"enabled": False, "endpoint": "x"})
    assert resp.status_code == 422


def test_get_test_options(client):
    resp = client.get("/internal/v1/sensugo/test-options")
    assert resp.status_code == 200
    body = resp.json()
    assert body["check"] == "testName"
    assert body["entity"] == "testEntity"
    assert body["entity-tag"] == "testEntityTag"
    assert body["level"] == "CRITICAL"


def test_run_self_test_with_defaults(client, backend):
    resp = client.post("/internal/v1/sensugo/test")
    assert resp.status_code == 200
    assert resp.json() == {"status": "sent"}

    body = json.loads(backend.requests[0].content)
    assert body["check"]["status"] == 2
    assert body["entity"]["metadata"]["name"] == "testEntity"
    assert body["check"]["output"] == "testMessage"


def test_run_self_test_when_disabled(client, backend):
    router_module.sensugo_service.update([SensuGoConfig(enabled=False)])
    resp = client.post("/internal/v1/sensugo/test")
    assert resp.status_code == 400
    assert resp.json()["detail"] == "service is not enabled"
    assert backend.requests == []


def test_run_self_test_transport_failure(client, backend):
    backend.exc = httpx.ConnectError("connection refused")
    resp = client.post("/internal/v1/sensugo/test", json={"message": "custom", "level": "WARNING"})
    assert resp.status_code == 502


def test_route_lifecycle_and_alert_delivery(client, backend):
    resp = client.put(
        "/internal/v1/sensugo/routes/db",
        json={"entity-tag": "host", "namespace": "storage", "labels": {"team": "dba"}},
    )
    assert resp.status_code == 200
    assert resp.json()["entity-tag"] == "host"

    assert list(client.get("/internal/v1/sensugo/routes").json()) == ["db"]

    resp = client.post(
        "/internal/v1/sensugo/routes/db/alerts",
        json={
            "state": {"id": "disk_usage", "message": "disk full", "level": "CRITICAL"},
            "data": {"tags": {"host": "db1"}},
        },
    )
    assert resp.status_code == 202
    assert resp.json() == {"status": "accepted", "route": "db"}

    body = json.loads(backend.requests[0].content)
    assert body["entity"]["metadata"]["name"] == "db1"
    assert body["entity"]["metadata"]["namespace"] == "storage"
    assert body["check"]["metadata"]["name"] == "disk_usage"

    assert client.delete("/internal/v1/sensugo/routes/db").status_code == 204
    assert client.delete("/internal/v1/sensugo/routes/db").status_code == 404


def test_route_alert_backend_rejection_still_accepted(client, backend):
    backend.status_code = 500
    client.put("/internal/v1/sensugo/routes/web", json={"entity": "lb"})
    resp = client.post("/internal/v1/sensugo/routes/web/alerts", json={"state": {"id": "latency"}})
    assert resp.status_code == 202
    assert len(backend.requests) == 1


def test_route_alert_unknown_route(client):
    resp = client.post("/internal/v1/sensugo/routes/missing/alerts", json={"state": {"id": "x"}})
    assert resp.status_code == 404


def test_run_self_test_with_malformed_backend_url(monkeypatch, backend):
    diag = RecordingDiagnostic()
    service = SensuGoService(
        SensuGoConfig(enabled=True, url="http://[::1"),
        diag=diag,
        http_transport=httpx.MockTransport(backend),
    )
    monkeypatch.setattr(router_module, "sensugo_service", service)

    app = FastAPI()
    app.include_router(router_module.router, prefix="/internal/v1")
    with TestClient(app) as test_client:
        resp = test_client.post("/internal/v1/sensugo/test")

    assert resp.status_code == 400
    assert resp.json()["detail"].startswith("failed to create POST request")
    assert backend.requests == []
    assert len(diag.errors) == 1
    assert diag.errors[0][0] == "Failed to POST to Sensu Go"
    assert isinstance(diag.errors[0][1], InvalidBackendURLError)
