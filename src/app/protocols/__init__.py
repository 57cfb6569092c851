"""Protocolos e contratos do core da aplicação."""

from .http_client import TalentaTransportProtocol
from .parameter_source import ParameterSource

__all__ = [
    "ParameterSource",
    "TalentaTransportProtocol",
]
