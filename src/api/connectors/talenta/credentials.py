"""Credenciais HMAC do Talenta e validação prévia ao envio."""

from __future__ import annotations

from dataclasses import dataclass, field
from urllib.parse import urlsplit

from api.connectors.talenta.errors import InvalidCredentialsError
from app.constants.talenta import TALENTA_BASE_URLS, TalentaEnvironment


@dataclass(frozen=True, slots=True)
class TalentaCredentials:
    """Credenciais somente-leitura fornecidas pelo credential store."""

    client_id: str
    client_secret: str = field(repr=False)
    base_url: str
    environment: str = TalentaEnvironment.PRODUCTION

    @classmethod
    def for_environment(
        cls,
        client_id: str,
        client_secret: str,
        environment: str = TalentaEnvironment.PRODUCTION,
    ) -> TalentaCredentials:
        """Cria credenciais com a URL base derivada do ambiente.

        Raises:
            InvalidCredentialsError: Se o ambiente não é production/sandbox
        """
        base_url = TALENTA_BASE_URLS.get(environment)
        if base_url is None:
            raise InvalidCredentialsError(f"Ambiente Talenta inválido: {environment!r}")
        return cls(
            client_id=client_id,
            client_secret=client_secret,
            base_url=base_url,
            environment=environment,
        )

    @property
    def normalized_base_url(self) -> str:
        """URL base sem barras finais."""
        return self.base_url.rstrip("/")

    @property
    def base_path(self) -> str:
        """Prefixo de path da URL base (ex: /v2/talenta/v2)."""
        return urlsplit(self.normalized_base_url).path


def validate_credentials(credentials: TalentaCredentials) -> None:
    """Garante que URL base e secret permitem assinar um request.

    Raises:
        InvalidCredentialsError: Se base_url ou client_secret ausente/malformado
    """
    if not credentials.client_secret or not str(credentials.client_secret).strip():
        raise InvalidCredentialsError("client_secret é obrigatório para assinar requests")

    base_url = str(credentials.base_url or "").strip()
    if not base_url:
        raise InvalidCredentialsError("base_url é obrigatória")

    parts = urlsplit(base_url)
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise InvalidCredentialsError(f"base_url malformada: {base_url!r}")
