"""Testes das rotas HTTP do conector Talenta."""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

import api.routes.talenta.router as talenta_router_module
from api.connectors.talenta.credentials import TalentaCredentials
from api.routes.router import create_api_router
from app.use_cases.talenta import ExecuteTalentaActionUseCase
from tests.fakes.fake_talenta_transport import FakeTalentaTransport


@pytest.fixture
def client() -> TestClient:
    app = FastAPI()
    app.include_router(create_api_router())
    return TestClient(app)


@pytest.fixture
def transport(
    monkeypatch: pytest.MonkeyPatch,
    credentials: TalentaCredentials,
) -> FakeTalentaTransport:
    fake = FakeTalentaTransport(lambda request: {"data": {"employees": [{"id": 1}]}})
    monkeypatch.setattr(
        talenta_router_module,
        "_execute_use_case",
        ExecuteTalentaActionUseCase(fake, credentials),
    )
    return fake


def test_list_actions(client: TestClient) -> None:
    response = client.get("/talenta/actions")

    assert response.status_code == 200
    actions = response.json()["actions"]
    assert [a["value"] for a in actions] == [
        "getAllEmployees",
        "getEmployeeById",
        "getOvertimeRequestList",
        "getOvertimeRequestDetailById",
    ]
    assert actions[0]["supports_pagination"] is True
    assert [f["name"] for f in actions[1]["fields"]] == ["id"]


def test_execute_items(client: TestClient, transport: FakeTalentaTransport) -> None:
    response = client.post(
        "/talenta/execute",
        json={
            "items": [
                {"action": "getAllEmployees", "parameters": {"limit": 10}},
                {"action": "unknown"},
            ]
        },
        headers={"x-correlation-id": "corr-1"},
    )

    assert response.status_code == 200
    results = response.json()["results"]
    assert results[0]["success"] is True
    assert results[0]["rows"] == [{"id": 1}]
    assert results[1]["success"] is False
    assert results[1]["error"]["code"] == "UNKNOWN_ACTION"
    assert len(transport.requests) == 1


def test_execute_accepts_return_all_alias(
    client: TestClient, transport: FakeTalentaTransport
) -> None:
    response = client.post(
        "/talenta/execute",
        json={"items": [{"action": "getAllEmployees", "returnAll": True, "parameters": {"limit": 5}}]},
    )

    assert response.status_code == 200
    assert response.json()["results"][0]["pages_fetched"] == 1


def test_execute_invalid_credentials(
    client: TestClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    fake = FakeTalentaTransport()
    monkeypatch.setattr(
        talenta_router_module,
        "_execute_use_case",
        ExecuteTalentaActionUseCase(
            fake, TalentaCredentials(client_id="", client_secret="", base_url="")
        ),
    )

    response = client.post("/talenta/execute", json={"items": [{"action": "getAllEmployees"}]})

    assert response.status_code == 503
    assert response.json()["error"]["code"] == "INVALID_CREDENTIALS"
    assert fake.requests == []


def test_execute_requires_items(client: TestClient) -> None:
    response = client.post("/talenta/execute", json={"items": []})

    assert response.status_code == 422
