"""Erros do conector Talenta.

Nenhum erro carrega o client secret: apenas client ID e assinatura derivada
aparecem no payload de diagnóstico.
"""

from __future__ import annotations

from typing import Any


class TalentaError(Exception):
    """Erro base do conector Talenta."""

    code = "TALENTA_ERROR"


class UnknownActionError(TalentaError, LookupError):
    """Chave de ação não existe no catálogo."""

    code = "UNKNOWN_ACTION"

    def __init__(self, action: str) -> None:
        super().__init__(f"Ação Talenta desconhecida: {action!r}")
        self.action = action


class InvalidCredentialsError(TalentaError, ValueError):
    """Credenciais ausentes ou malformadas (falha antes de qualquer request)."""

    code = "INVALID_CREDENTIALS"


class TransportFailureError(TalentaError):
    """Falha de rede ou HTTP na chamada remota.

    Attributes:
        status_code: Status HTTP (None para falhas de rede)
        debug_info: request line, date, assinatura, headers, URL e body
    """

    code = "TRANSPORT_FAILURE"

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        debug_info: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.debug_info = debug_info or {}


class MalformedResponseError(TalentaError):
    """Resposta não decodificável como JSON."""

    code = "MALFORMED_RESPONSE"


class OperationCancelledError(TalentaError):
    """Execução cancelada pelo chamador entre páginas ou antes de um request."""

    code = "CANCELLED"
