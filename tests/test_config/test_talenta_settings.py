"""Testes das settings do conector Talenta."""

from __future__ import annotations

import pytest

from config.settings import BaseSettings, TalentaSettings
from config.settings.talenta import _load_from_env


def test_base_url_derived_from_environment() -> None:
    assert (
        TalentaSettings(environment="sandbox").resolved_base_url
        == "https://sandbox-api.mekari.com/v2/talenta/v2/"
    )
    assert (
        TalentaSettings().resolved_base_url
        == "https://api.mekari.com/v2/talenta/v2/"
    )


def test_base_url_override() -> None:
    settings = TalentaSettings(base_url="http://localhost:8080/v2/talenta/v2/")

    assert settings.resolved_base_url == "http://localhost:8080/v2/talenta/v2/"


def test_to_credentials() -> None:
    credentials = TalentaSettings(
        client_id="cid", client_secret="shh", environment="sandbox"
    ).to_credentials()

    assert credentials.client_id == "cid"
    assert credentials.client_secret == "shh"
    assert credentials.base_path == "/v2/talenta/v2"


def test_repr_hides_secret() -> None:
    assert "shh" not in repr(TalentaSettings(client_secret="shh"))


def test_validate_reports_missing_credentials() -> None:
    errors = TalentaSettings(environment="staging", max_pages=0).validate()

    assert "TALENTA_CLIENT_ID não configurado" in errors
    assert "TALENTA_CLIENT_SECRET não configurado" in errors
    assert any("TALENTA_ENVIRONMENT" in e for e in errors)
    assert any("TALENTA_MAX_PAGES" in e for e in errors)


def test_validate_ok() -> None:
    assert TalentaSettings(client_id="cid", client_secret="shh").validate() == []


def test_load_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TALENTA_CLIENT_ID", "cid")
    monkeypatch.setenv("TALENTA_CLIENT_SECRET", "shh")
    monkeypatch.setenv("TALENTA_ENVIRONMENT", "SANDBOX")
    monkeypatch.setenv("TALENTA_DEFAULT_LIMIT", "25")
    monkeypatch.setenv("TALENTA_MAX_PAGES", "7")
    monkeypatch.setenv("TALENTA_VERIFY_SSL", "false")

    settings = _load_from_env()

    assert settings.environment == "sandbox"
    assert settings.default_limit == 25
    assert settings.max_pages == 7
    assert settings.verify_ssl is False
    assert settings.request_timeout_seconds == 30.0


def test_base_settings_strictness() -> None:
    assert BaseSettings().is_strict is False
    assert BaseSettings(environment="staging").is_strict is True
    assert BaseSettings(service_name="").validate() == ["SERVICE_NAME não pode ser vazio"]
