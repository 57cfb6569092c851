"""Testes da assinatura HMAC-SHA256."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

from api.connectors.talenta.signing import (
    build_authorization_header,
    build_request_line,
    build_signing_string,
    compute_signature,
    format_http_date,
)

SIGNING_STRING = "date: Mon, 01 Jan 2024 00:00:00 GMT\nGET /employee HTTP/1.1"


def test_known_vector() -> None:
    signature = compute_signature(SIGNING_STRING, "abc")

    assert signature == "hmCKhHb0dVgWR8upzKVuBySpzVAV4C2G9MNTlk+hR1w="
    assert len(signature) == 44


def test_signature_is_deterministic() -> None:
    assert compute_signature(SIGNING_STRING, "abc") == compute_signature(SIGNING_STRING, "abc")


def test_signature_changes_with_each_input() -> None:
    date = "Mon, 01 Jan 2024 00:00:00 GMT"
    base = compute_signature(
        build_signing_string(date, build_request_line("GET", "/employee")), "abc"
    )

    variants = [
        build_signing_string(date, build_request_line("POST", "/employee")),
        build_signing_string(date, build_request_line("GET", "/employee/1")),
        build_signing_string(
            "Tue, 02 Jan 2024 00:00:00 GMT", build_request_line("GET", "/employee")
        ),
    ]

    for signing_string in variants:
        assert compute_signature(signing_string, "abc") != base
    assert compute_signature(SIGNING_STRING, "abd") != base


def test_signing_string_layout() -> None:
    signing_string = build_signing_string(
        "Mon, 01 Jan 2024 00:00:00 GMT",
        build_request_line("get", "/employee"),
    )

    assert signing_string == SIGNING_STRING


def test_format_http_date_uses_gmt() -> None:
    moment = datetime(2024, 1, 1, tzinfo=UTC)

    assert format_http_date(moment) == "Mon, 01 Jan 2024 00:00:00 GMT"


def test_format_http_date_converts_to_utc() -> None:
    moment = datetime(2024, 1, 1, 7, 0, tzinfo=timezone(timedelta(hours=7)))

    assert format_http_date(moment) == "Mon, 01 Jan 2024 00:00:00 GMT"


def test_authorization_header_format() -> None:
    header = build_authorization_header("client-id", "c2lnbmF0dXJl")

    assert header == (
        'hmac username="client-id", algorithm="hmac-sha256", '
        'headers="date request-line", signature="c2lnbmF0dXJl"'
    )
