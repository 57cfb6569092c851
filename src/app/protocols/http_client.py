"""Protocolos HTTP usados pelo app.

Evita dependência direta da camada api.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from api.connectors.talenta.request_builder import SignedRequest


class TalentaTransportProtocol(Protocol):
    """Contrato mínimo para executar um request assinado do Talenta.

    Retorna o body decodificado (JSON ou texto). Falhas de rede/HTTP
    levantam TransportFailureError.
    """

    async def send(self, request: SignedRequest) -> Any: ...
