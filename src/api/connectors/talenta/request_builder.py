"""Construção de requests assinados a partir do catálogo.

Resolve path e query string, gera a data HTTP, assina com HMAC-SHA256 e
monta os headers. Cada build é independente: nenhuma data ou assinatura
é reaproveitada entre chamadas ou páginas.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from api.connectors.talenta.credentials import validate_credentials
from api.connectors.talenta.signing import (
    build_authorization_header,
    build_request_line,
    build_signing_string,
    compute_signature,
    format_http_date,
)

if TYPE_CHECKING:
    from collections.abc import Mapping
    from datetime import datetime

    from api.connectors.talenta.catalog import ActionDescriptor
    from api.connectors.talenta.credentials import TalentaCredentials

# Caracteres não escapados por encodeURIComponent
_URI_COMPONENT_SAFE = "-_.!~*'()"


@dataclass(frozen=True)
class SignedRequest:
    """Contexto efêmero de um request assinado."""

    action: str
    method: str
    url: str
    path: str
    query_string: str
    signature_path: str
    request_line: str
    date_string: str
    signature: str
    authorization: str
    headers: dict[str, str]
    body: dict[str, Any] | None = None
    content: str | None = field(default=None, repr=False)

    def debug_info(self) -> dict[str, Any]:
        """Payload de diagnóstico anexado a falhas (sem o client secret)."""
        return {
            "requestLine": self.request_line,
            "dateString": self.date_string,
            "signature": self.signature,
            "hmacHeader": self.authorization,
            "headers": dict(self.headers),
            "url": self.url,
            "body": self.body,
        }


def _is_empty(value: Any) -> bool:
    return value is None or value == ""


def stringify_value(value: Any) -> str:
    """Converte valor do host para texto como o JavaScript faria."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def encode_uri_component(value: Any) -> str:
    return quote(stringify_value(value), safe=_URI_COMPONENT_SAFE)


def resolve_path(descriptor: ActionDescriptor, path_values: Mapping[str, Any]) -> str:
    """Substitui cada `{var}` pelo valor informado ou string vazia."""
    path = descriptor.path_template
    for name in descriptor.path_variables:
        value = path_values.get(name)
        path = path.replace(f"{{{name}}}", "" if value is None else stringify_value(value))
    return path


def build_query_string(
    descriptor: ActionDescriptor,
    query_values: Mapping[str, Any],
) -> str:
    """Query string na ordem declarada, omitindo valores vazios.

    Returns:
        "?k=v&..." ou "" quando nenhum valor foi informado
    """
    pairs = [
        f"{encode_uri_component(name)}={encode_uri_component(query_values[name])}"
        for name in descriptor.query_params
        if not _is_empty(query_values.get(name))
    ]
    return f"?{'&'.join(pairs)}" if pairs else ""


def build_body(
    descriptor: ActionDescriptor,
    body_values: Mapping[str, Any],
) -> dict[str, Any] | None:
    """Body apenas para ações com body_params; ignora valores vazios."""
    if not descriptor.body_params:
        return None
    return {
        name: body_values[name]
        for name in descriptor.body_params
        if not _is_empty(body_values.get(name))
    }


def build_signed_request(
    descriptor: ActionDescriptor,
    credentials: TalentaCredentials,
    path_values: Mapping[str, Any] | None = None,
    query_values: Mapping[str, Any] | None = None,
    body_values: Mapping[str, Any] | None = None,
    *,
    now: datetime | None = None,
) -> SignedRequest:
    """Monta URL, headers e body de um request assinado.

    Args:
        descriptor: Ação do catálogo
        credentials: Credenciais HMAC
        path_values: Valores das variáveis de path
        query_values: Valores de query (filtrados pela allow-list)
        body_values: Valores de body (filtrados pela allow-list)
        now: Instante usado no header Date (default: agora)

    Raises:
        InvalidCredentialsError: Se base_url ou client_secret inválidos
    """
    validate_credentials(credentials)

    path = resolve_path(descriptor, path_values or {})
    query_string = build_query_string(descriptor, query_values or {})
    url = credentials.normalized_base_url + path + query_string

    # Gateway reconstrói o path completo, incluindo o prefixo da URL base
    signature_path = credentials.base_path + path + query_string
    request_line = build_request_line(descriptor.method, signature_path)
    date_string = format_http_date(now)
    signature = compute_signature(
        build_signing_string(date_string, request_line),
        credentials.client_secret,
    )
    authorization = build_authorization_header(credentials.client_id, signature)

    body = build_body(descriptor, body_values or {})

    return SignedRequest(
        action=descriptor.value,
        method=descriptor.method,
        url=url,
        path=path,
        query_string=query_string,
        signature_path=signature_path,
        request_line=request_line,
        date_string=date_string,
        signature=signature,
        authorization=authorization,
        headers={
            "Authorization": authorization,
            "Date": date_string,
            "Content-Type": "application/json",
        },
        body=body,
        content=json.dumps(body) if body is not None else None,
    )
