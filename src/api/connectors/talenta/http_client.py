"""Cliente HTTP da API Talenta.

Executa requests já assinados pelo request_builder:
- Uma única tentativa por request (sem retry)
- Falhas de rede/HTTP viram TransportFailureError com diagnóstico completo
- Body não-JSON degrada para texto (o normalizer embrulha strings)
- Logging estruturado sem client secret
"""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import httpx

from api.connectors.talenta.errors import MalformedResponseError, TransportFailureError
from api.connectors.talenta.talenta_logging import (
    log_request_sent,
    log_success,
    log_transport_failure,
)
from config.logging import log_fallback

if TYPE_CHECKING:
    from api.connectors.talenta.request_builder import SignedRequest
    from config.settings import TalentaSettings

logger: logging.Logger = logging.getLogger(__name__)

_ERROR_BODY_PREVIEW = 500


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


def decode_body(response: httpx.Response) -> Any:
    """Decodifica o body como JSON.

    Returns:
        Objeto JSON, ou "" para body vazio

    Raises:
        MalformedResponseError: Se o body não é JSON válido
    """
    if not response.content:
        return ""
    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise MalformedResponseError("talenta_response_not_json") from exc


class TalentaHttpClient:
    """Transporte HTTP assíncrono para a API Talenta.

    Implementa TalentaTransportProtocol. Aceita um httpx.AsyncClient
    externo (ex: com MockTransport em testes); caso contrário cria um
    cliente por request.
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._http_client = http_client

    async def send(self, request: SignedRequest) -> Any:
        """Envia o request assinado e retorna o body decodificado.

        Raises:
            TransportFailureError: Falha de rede, URL inválida ou status HTTP >= 400
        """
        log_request_sent(request)
        started_at = time.perf_counter()
        try:
            response = await self._execute(request)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise self._failure(request, str(exc) or type(exc).__name__) from exc

        if response.is_error:
            preview = response.text[:_ERROR_BODY_PREVIEW]
            raise self._failure(
                request,
                f"HTTP {response.status_code}: {preview}",
                status_code=response.status_code,
            )

        log_success(request, response.status_code, (time.perf_counter() - started_at) * 1000)
        return self._decode(response)

    async def _execute(self, request: SignedRequest) -> httpx.Response:
        headers = {**self._config.default_headers, **request.headers}
        if self._http_client is not None:
            return await self._http_client.request(
                request.method,
                request.url,
                headers=headers,
                content=request.content,
                timeout=self._config.timeout_seconds,
            )
        async with httpx.AsyncClient(verify=self._config.verify_ssl) as client:
            return await client.request(
                request.method,
                request.url,
                headers=headers,
                content=request.content,
                timeout=self._config.timeout_seconds,
            )

    def _failure(
        self,
        request: SignedRequest,
        message: str,
        status_code: int | None = None,
    ) -> TransportFailureError:
        error = TransportFailureError(
            message,
            status_code=status_code,
            debug_info=request.debug_info(),
        )
        log_transport_failure(request, error)
        return error

    def _decode(self, response: httpx.Response) -> Any:
        try:
            return decode_body(response)
        except MalformedResponseError:
            log_fallback(logger, "talenta_response_decode", reason="invalid_json")
            return response.text


def create_talenta_http_client(
    settings: TalentaSettings | None = None,
) -> TalentaHttpClient:
    """Factory para criar cliente Talenta com config padrão.

    Args:
        settings: TalentaSettings opcional. Se None, carrega do ambiente.
    """
    from config.settings import get_talenta_settings

    talenta = settings or get_talenta_settings()
    config = HttpClientConfig(
        timeout_seconds=talenta.request_timeout_seconds,
        verify_ssl=talenta.verify_ssl,
    )
    return TalentaHttpClient(config=config)
