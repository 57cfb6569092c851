"""Normalizers: conversão de respostas externas para linhas internas.

Estrutura:
- talenta/: normalizer da API Talenta (Mekari)
"""

from .talenta import normalize_response

__all__ = [
    "normalize_response",
]
