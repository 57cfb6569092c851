"""Connectors: adapters de borda para APIs externas.

Estrutura:
- talenta/: Talenta (Mekari) HRIS API com HMAC-SHA256
"""

__all__: list[str] = []
