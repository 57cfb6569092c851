"""Helpers de logging para a API Talenta (sem segredos).

Nunca logar client secret nem o header Authorization completo.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .errors import TransportFailureError
    from .request_builder import SignedRequest

logger = logging.getLogger(__name__)


def log_request_sent(request: SignedRequest) -> None:
    logger.debug(
        "talenta_request_sent",
        extra={
            "action": request.action,
            "method": request.method,
            "signature_path": request.signature_path,
            "has_body": request.body is not None,
        },
    )


def log_success(request: SignedRequest, status_code: int, elapsed_ms: float) -> None:
    """Loga sucesso sem expor dados sensíveis."""
    logger.debug(
        "talenta_request_succeeded",
        extra={
            "action": request.action,
            "method": request.method,
            "signature_path": request.signature_path,
            "status_code": status_code,
            "elapsed_ms": round(elapsed_ms, 2),
        },
    )


def log_transport_failure(request: SignedRequest, error: TransportFailureError) -> None:
    """Loga falha de transporte com contexto mínimo de diagnóstico."""
    logger.warning(
        "talenta_request_failed",
        extra={
            "action": request.action,
            "method": request.method,
            "signature_path": request.signature_path,
            "date_string": request.date_string,
            "status_code": error.status_code,
            "error": str(error),
        },
    )
