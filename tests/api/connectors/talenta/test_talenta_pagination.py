"""Testes do driver de paginação."""

from __future__ import annotations

import asyncio
from typing import Any

import pytest

from api.connectors.talenta.catalog import get_action
from api.connectors.talenta.credentials import TalentaCredentials
from api.connectors.talenta.errors import OperationCancelledError
from api.connectors.talenta.pagination import paginate
from api.connectors.talenta.parameters import ActionParameters
from api.connectors.talenta.request_builder import SignedRequest
from tests.fakes.fake_talenta_transport import FakeTalentaTransport, query_of


def _employees(page: int, count: int) -> list[dict[str, Any]]:
    return [{"id": f"{page}-{i}"} for i in range(count)]


def _paged_server(sizes: list[int], with_metadata: bool = True):
    def respond(request: SignedRequest) -> dict[str, Any]:
        page = int(query_of(request)["page"])
        count = sizes[page - 1] if page <= len(sizes) else 0
        data: dict[str, Any] = {"employees": _employees(page, count)}
        if with_metadata:
            data["pagination"] = {"current_page": page, "last_page": len(sizes)}
        return {"message": "success", "data": data}

    return respond


@pytest.mark.asyncio
async def test_three_pages_with_metadata(credentials: TalentaCredentials) -> None:
    transport = FakeTalentaTransport(_paged_server([50, 50, 20]))

    result = await paginate(
        get_action("getAllEmployees"),
        credentials,
        ActionParameters(query_values={"status": "active"}),
        transport,
        limit=50,
    )

    assert len(result.items) == 120
    assert result.pages_fetched == 3
    assert result.truncated is False
    assert len(transport.requests) == 3
    assert [query_of(r)["page"] for r in transport.requests] == ["1", "2", "3"]
    assert all(query_of(r)["limit"] == "50" for r in transport.requests)
    assert all(query_of(r)["status"] == "active" for r in transport.requests)


@pytest.mark.asyncio
async def test_each_page_is_signed_independently(credentials: TalentaCredentials) -> None:
    transport = FakeTalentaTransport(_paged_server([2, 2, 1]))

    await paginate(
        get_action("getAllEmployees"), credentials, ActionParameters(), transport, limit=2
    )

    signatures = {r.signature for r in transport.requests}
    assert len(signatures) == 3


@pytest.mark.asyncio
async def test_metadata_stops_even_on_full_last_page(
    credentials: TalentaCredentials,
) -> None:
    transport = FakeTalentaTransport(_paged_server([10, 10]))

    result = await paginate(
        get_action("getAllEmployees"), credentials, ActionParameters(), transport, limit=10
    )

    assert len(result.items) == 20
    assert len(transport.requests) == 2


@pytest.mark.asyncio
async def test_short_page_without_metadata_stops(credentials: TalentaCredentials) -> None:
    transport = FakeTalentaTransport(_paged_server([50, 50, 7], with_metadata=False))

    result = await paginate(
        get_action("getAllEmployees"), credentials, ActionParameters(), transport, limit=50
    )

    assert len(result.items) == 107
    assert len(transport.requests) == 3


@pytest.mark.asyncio
async def test_empty_page_stops(credentials: TalentaCredentials) -> None:
    transport = FakeTalentaTransport(_paged_server([50, 50], with_metadata=False))

    result = await paginate(
        get_action("getAllEmployees"), credentials, ActionParameters(), transport, limit=50
    )

    assert len(result.items) == 100
    assert len(transport.requests) == 3


@pytest.mark.asyncio
async def test_endless_full_pages_hit_the_cap(credentials: TalentaCredentials) -> None:
    def respond(request: SignedRequest) -> dict[str, Any]:
        page = int(query_of(request)["page"])
        return {"data": {"employees": _employees(page, 50)}}

    transport = FakeTalentaTransport(respond)

    result = await paginate(
        get_action("getAllEmployees"),
        credentials,
        ActionParameters(),
        transport,
        limit=50,
        max_pages=5,
    )

    assert len(transport.requests) == 5
    assert result.pages_fetched == 5
    assert result.truncated is True
    assert len(result.items) == 250


@pytest.mark.asyncio
async def test_cancel_before_first_request(credentials: TalentaCredentials) -> None:
    transport = FakeTalentaTransport(_paged_server([50]))
    cancel_event = asyncio.Event()
    cancel_event.set()

    with pytest.raises(OperationCancelledError):
        await paginate(
            get_action("getAllEmployees"),
            credentials,
            ActionParameters(),
            transport,
            limit=50,
            cancel_event=cancel_event,
        )

    assert transport.requests == []


@pytest.mark.asyncio
async def test_cancel_between_pages(credentials: TalentaCredentials) -> None:
    cancel_event = asyncio.Event()
    server = _paged_server([50, 50, 50])

    def respond(request: SignedRequest) -> dict[str, Any]:
        cancel_event.set()
        return server(request)

    transport = FakeTalentaTransport(respond)

    with pytest.raises(OperationCancelledError):
        await paginate(
            get_action("getAllEmployees"),
            credentials,
            ActionParameters(),
            transport,
            limit=50,
            cancel_event=cancel_event,
        )

    assert len(transport.requests) == 1


@pytest.mark.asyncio
async def test_action_without_pagination_is_rejected(
    credentials: TalentaCredentials,
) -> None:
    with pytest.raises(ValueError):
        await paginate(
            get_action("getEmployeeById"),
            credentials,
            ActionParameters(),
            FakeTalentaTransport(),
            limit=50,
        )


@pytest.mark.asyncio
async def test_root_level_sibling_array_does_not_hide_items(
    credentials: TalentaCredentials,
) -> None:
    def respond(request: SignedRequest) -> dict[str, Any]:
        page = int(query_of(request)["page"])
        return {
            "errors": [],
            "data": {
                "employees": _employees(page, 50 if page == 1 else 10),
                "pagination": {"current_page": page, "last_page": 2},
            },
        }

    transport = FakeTalentaTransport(respond)

    result = await paginate(
        get_action("getAllEmployees"), credentials, ActionParameters(), transport, limit=50
    )

    assert len(result.items) == 60
    assert result.pages_fetched == 2
