"""Driver de paginação ("return all") para ações com limit/page.

Regras de parada, avaliadas por página:
1. página sem itens → para
2. metadados current_page/last_page presentes e current >= last → anexa e para
3. sem metadados e itens < limit → anexa e para
4. caso contrário, próxima página

Um teto de páginas (max_pages) protege contra APIs que sempre devolvem
página cheia sem metadados.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from api.connectors.talenta.errors import OperationCancelledError
from api.connectors.talenta.request_builder import build_signed_request
from api.normalizers.talenta import extract_page_items, extract_pagination_metadata

if TYPE_CHECKING:
    import asyncio

    from api.connectors.talenta.catalog import ActionDescriptor
    from api.connectors.talenta.credentials import TalentaCredentials
    from api.connectors.talenta.parameters import ActionParameters
    from app.protocols.http_client import TalentaTransportProtocol

logger = logging.getLogger(__name__)

DEFAULT_MAX_PAGES = 100


@dataclass
class PaginationResult:
    """Itens acumulados de todas as páginas buscadas."""

    items: list[Any] = field(default_factory=list)
    pages_fetched: int = 0
    truncated: bool = False


def ensure_not_cancelled(cancel_event: asyncio.Event | None) -> None:
    """Levanta OperationCancelledError se o chamador pediu cancelamento."""
    if cancel_event is not None and cancel_event.is_set():
        raise OperationCancelledError("execução cancelada pelo chamador")


def _is_last_page(
    items: list[Any],
    metadata: tuple[int, int] | None,
    limit: int,
) -> bool:
    if metadata is not None:
        current_page, last_page = metadata
        return current_page >= last_page
    return len(items) < limit


async def paginate(
    descriptor: ActionDescriptor,
    credentials: TalentaCredentials,
    params: ActionParameters,
    transport: TalentaTransportProtocol,
    *,
    limit: int,
    max_pages: int = DEFAULT_MAX_PAGES,
    cancel_event: asyncio.Event | None = None,
) -> PaginationResult:
    """Busca páginas sequencialmente até esgotar o resultado.

    Cada página gera um request novo (data e assinatura frescas).

    Raises:
        ValueError: Se a ação não suporta paginação ou limit/max_pages < 1
        OperationCancelledError: Se cancel_event for sinalizado
        TransportFailureError: Propagado do transporte
    """
    if not descriptor.supports_pagination:
        raise ValueError(f"Ação {descriptor.value} não suporta paginação")
    if limit < 1 or max_pages < 1:
        raise ValueError("limit e max_pages devem ser >= 1")

    result = PaginationResult()
    page = 1

    while True:
        if result.pages_fetched >= max_pages:
            result.truncated = True
            logger.warning(
                "talenta_pagination_cap_reached",
                extra={
                    "action": descriptor.value,
                    "max_pages": max_pages,
                    "items": len(result.items),
                },
            )
            break

        ensure_not_cancelled(cancel_event)
        request = build_signed_request(
            descriptor,
            credentials,
            params.path_values,
            params.with_query(limit=limit, page=page).query_values,
            params.body_values,
        )
        body = await transport.send(request)
        result.pages_fetched += 1

        items = extract_page_items(body)
        metadata = extract_pagination_metadata(body)
        logger.debug(
            "talenta_page_fetched",
            extra={
                "action": descriptor.value,
                "page": page,
                "items": len(items),
                "has_metadata": metadata is not None,
            },
        )

        if not items:
            break

        result.items.extend(items)
        if _is_last_page(items, metadata, limit):
            break
        page += 1

    return result
