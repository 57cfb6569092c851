"""Assinatura HMAC-SHA256 dos requests Talenta (Mekari API Gateway).

Formato exigido pelo gateway:
- signing string: "date: {HTTP-date}\\n{METHOD} {path+query} HTTP/1.1"
- assinatura: Base64(HMAC-SHA256(signing string, client_secret))
- Authorization: hmac username="...", algorithm="hmac-sha256",
  headers="date request-line", signature="..."
"""

from __future__ import annotations

import base64
import hashlib
import hmac
from datetime import UTC, datetime
from email.utils import format_datetime

HMAC_ALGORITHM = "hmac-sha256"
SIGNED_HEADERS = "date request-line"


def format_http_date(now: datetime | None = None) -> str:
    """Formata o instante como HTTP-date (RFC 7231), sempre em GMT.

    Args:
        now: Instante a formatar (default: agora, UTC)
    """
    moment = (now or datetime.now(UTC)).astimezone(UTC)
    return format_datetime(moment, usegmt=True)


def build_request_line(method: str, signature_path: str) -> str:
    return f"{method.upper()} {signature_path} HTTP/1.1"


def build_signing_string(date_string: str, request_line: str) -> str:
    return "\n".join((f"date: {date_string}", request_line))


def compute_signature(signing_string: str, client_secret: str) -> str:
    """Calcula Base64(HMAC-SHA256) da signing string."""
    digest = hmac.new(
        client_secret.encode("utf-8"),
        signing_string.encode("utf-8"),
        hashlib.sha256,
    ).digest()
    return base64.b64encode(digest).decode("ascii")


def build_authorization_header(client_id: str, signature: str) -> str:
    return (
        f'hmac username="{client_id}", algorithm="{HMAC_ALGORITHM}", '
        f'headers="{SIGNED_HEADERS}", signature="{signature}"'
    )
