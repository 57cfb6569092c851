"""Factory de wiring para o conector Talenta (bootstrap)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.connectors.talenta.http_client import create_talenta_http_client
from app.use_cases.talenta.execute_action import ExecuteTalentaActionUseCase
from config.settings import get_talenta_settings

if TYPE_CHECKING:
    from app.protocols.http_client import TalentaTransportProtocol
    from config.settings import TalentaSettings


def create_talenta_execute_use_case(
    settings: TalentaSettings | None = None,
    transport: TalentaTransportProtocol | None = None,
) -> ExecuteTalentaActionUseCase:
    """Cria use case de execução com credenciais e transporte injetados.

    Args:
        settings: TalentaSettings opcional. Se None, carrega do ambiente.
        transport: Transporte opcional (default: TalentaHttpClient).
    """
    talenta = settings or get_talenta_settings()
    return ExecuteTalentaActionUseCase(
        transport=transport or create_talenta_http_client(talenta),
        credentials=talenta.to_credentials(),
        default_limit=talenta.default_limit,
        max_pages=talenta.max_pages,
    )
