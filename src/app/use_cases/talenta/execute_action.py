"""Use case para execução de ações Talenta por item de entrada."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from api.connectors.talenta.catalog import get_action
from api.connectors.talenta.credentials import validate_credentials
from api.connectors.talenta.errors import (
    OperationCancelledError,
    TransportFailureError,
    UnknownActionError,
)
from api.connectors.talenta.pagination import (
    DEFAULT_MAX_PAGES,
    ensure_not_cancelled,
    paginate,
)
from api.connectors.talenta.parameters import MappingParameterSource, resolve_parameters
from api.connectors.talenta.request_builder import build_signed_request
from api.normalizers.talenta import normalize_response
from app.observability import record_item_outcome, record_latency
from app.use_cases.talenta.models import ActionItem, ItemError, ItemResult

if TYPE_CHECKING:
    import asyncio
    from collections.abc import Sequence

    from api.connectors.talenta.credentials import TalentaCredentials
    from app.protocols.http_client import TalentaTransportProtocol

logger = logging.getLogger(__name__)


class ExecuteTalentaActionUseCase:
    """Orquestra catálogo, assinatura, paginação e normalização por item.

    Itens são processados em sequência; a falha de um item fica anexada
    ao seu índice e não interrompe os demais.
    """

    def __init__(
        self,
        transport: TalentaTransportProtocol,
        credentials: TalentaCredentials,
        *,
        default_limit: int = 50,
        max_pages: int = DEFAULT_MAX_PAGES,
    ) -> None:
        self._transport = transport
        self._credentials = credentials
        self._default_limit = default_limit
        self._max_pages = max_pages

    async def execute(
        self,
        items: Sequence[ActionItem],
        cancel_event: asyncio.Event | None = None,
    ) -> list[ItemResult]:
        """Executa todos os itens.

        Raises:
            InvalidCredentialsError: Antes de qualquer request, se as
                credenciais não permitem assinar
        """
        validate_credentials(self._credentials)

        results: list[ItemResult] = []
        for index, item in enumerate(items):
            started_at = time.perf_counter()
            try:
                ensure_not_cancelled(cancel_event)
                result = await self._execute_item(index, item, cancel_event)
            except OperationCancelledError as exc:
                results.append(self._failed(index, item, exc.code, str(exc)))
                logger.info(
                    "talenta_batch_cancelled",
                    extra={"item_index": index, "processed": len(results)},
                )
                break
            except UnknownActionError as exc:
                result = self._failed(index, item, exc.code, str(exc))
            except TransportFailureError as exc:
                result = self._failed(
                    index,
                    item,
                    exc.code,
                    str(exc),
                    status_code=exc.status_code,
                    debug=exc.debug_info,
                )
            results.append(result)
            record_latency("talenta", item.action, (time.perf_counter() - started_at) * 1000)
            record_item_outcome(
                item.action,
                result.success,
                error_code=result.error.code if result.error else None,
                pages_fetched=result.pages_fetched,
                rows=len(result.rows),
            )

        return results

    async def _execute_item(
        self,
        index: int,
        item: ActionItem,
        cancel_event: asyncio.Event | None,
    ) -> ItemResult:
        descriptor = get_action(item.action)
        params = resolve_parameters(descriptor, MappingParameterSource(item.parameters))

        if item.return_all and descriptor.supports_pagination:
            page_result = await paginate(
                descriptor,
                self._credentials,
                params,
                self._transport,
                limit=self._resolve_limit(item),
                max_pages=self._max_pages,
                cancel_event=cancel_event,
            )
            return ItemResult(
                item_index=index,
                action=descriptor.value,
                rows=normalize_response(page_result.items),
                pages_fetched=page_result.pages_fetched,
                truncated=page_result.truncated,
            )

        ensure_not_cancelled(cancel_event)
        request = build_signed_request(
            descriptor,
            self._credentials,
            params.path_values,
            params.query_values,
            params.body_values,
        )
        body = await self._transport.send(request)
        return ItemResult(
            item_index=index,
            action=descriptor.value,
            rows=normalize_response(body),
            pages_fetched=1,
        )

    def _resolve_limit(self, item: ActionItem) -> int:
        raw = item.parameters.get("limit")
        try:
            limit = int(raw) if raw not in (None, "") else self._default_limit
        except (TypeError, ValueError):
            limit = self._default_limit
        return max(limit, 1)

    @staticmethod
    def _failed(
        index: int,
        item: ActionItem,
        code: str,
        message: str,
        *,
        status_code: int | None = None,
        debug: dict | None = None,
    ) -> ItemResult:
        logger.warning(
            "talenta_item_failed",
            extra={"item_index": index, "action": item.action, "error_code": code},
        )
        return ItemResult(
            item_index=index,
            action=item.action,
            error=ItemError(
                code=code,
                message=message,
                status_code=status_code,
                debug=debug,
            ),
        )
