"""Settings específicas do conector Talenta (Mekari).

Credenciais HMAC e parâmetros de execução do conector.
Cada integração deve ter seu próprio arquivo de settings para isolamento.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import TYPE_CHECKING

from app.constants.talenta import TALENTA_BASE_URLS, TalentaEnvironment

if TYPE_CHECKING:
    from api.connectors.talenta.credentials import TalentaCredentials


@dataclass(frozen=True)
class TalentaSettings:
    """Configurações do conector Talenta.

    Attributes:
        client_id: Client ID da aplicação HMAC no Mekari Developer
        client_secret: Client secret usado como chave do HMAC
        environment: Ambiente da API (production|sandbox)
        base_url: Override da URL base (vazio = derivado do ambiente)
        request_timeout_seconds: Timeout para requisições HTTP
        default_limit: Tamanho de página usado no modo "return all"
        max_pages: Limite de páginas por item (proteção contra loop infinito)
        verify_ssl: Valida certificado TLS
    """

    # Credenciais (carregadas de env ou Secret Manager)
    client_id: str = ""
    client_secret: str = field(default="", repr=False)
    environment: str = TalentaEnvironment.PRODUCTION

    # API
    base_url: str = ""

    # Execução
    request_timeout_seconds: float = 30.0
    default_limit: int = 50
    max_pages: int = 100
    verify_ssl: bool = True

    @property
    def resolved_base_url(self) -> str:
        """URL base efetiva (override ou derivada do ambiente)."""
        if self.base_url:
            return self.base_url
        return TALENTA_BASE_URLS.get(self.environment, "")

    def to_credentials(self) -> TalentaCredentials:
        """Converte settings para o objeto de credenciais do conector."""
        from api.connectors.talenta.credentials import TalentaCredentials

        return TalentaCredentials(
            client_id=self.client_id,
            client_secret=self.client_secret,
            base_url=self.resolved_base_url,
            environment=self.environment,
        )

    def validate(self) -> list[str]:
        """Valida configurações mínimas do conector.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.client_id:
            errors.append("TALENTA_CLIENT_ID não configurado")

        if not self.client_secret:
            errors.append("TALENTA_CLIENT_SECRET não configurado")

        if self.environment not in TALENTA_BASE_URLS:
            errors.append("TALENTA_ENVIRONMENT deve ser 'production' ou 'sandbox'")

        if self.request_timeout_seconds <= 0:
            errors.append("TALENTA_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.default_limit < 1:
            errors.append("TALENTA_DEFAULT_LIMIT deve ser >= 1")

        if self.max_pages < 1:
            errors.append("TALENTA_MAX_PAGES deve ser >= 1")

        return errors


def _load_from_env() -> TalentaSettings:
    """Carrega TalentaSettings a partir de variáveis de ambiente."""
    return TalentaSettings(
        client_id=os.getenv("TALENTA_CLIENT_ID", ""),
        client_secret=os.getenv("TALENTA_CLIENT_SECRET", ""),
        environment=os.getenv(
            "TALENTA_ENVIRONMENT", TalentaEnvironment.PRODUCTION
        ).lower(),
        base_url=os.getenv("TALENTA_BASE_URL", ""),
        request_timeout_seconds=float(
            os.getenv("TALENTA_REQUEST_TIMEOUT_SECONDS", "30")
        ),
        default_limit=int(os.getenv("TALENTA_DEFAULT_LIMIT", "50")),
        max_pages=int(os.getenv("TALENTA_MAX_PAGES", "100")),
        verify_ssl=os.getenv("TALENTA_VERIFY_SSL", "true").lower() in ("true", "1", "yes"),
    )


@lru_cache(maxsize=1)
def get_talenta_settings() -> TalentaSettings:
    """Retorna instância cacheada de TalentaSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
