"""Protocolo de leitura de parâmetros fornecidos pelo host."""

from __future__ import annotations

from typing import Any, Protocol


class ParameterSource(Protocol):
    """Contrato mínimo para obter valores de parâmetro por nome.

    O core nunca depende do mecanismo de resolução do host; recebe apenas
    esta capacidade.
    """

    def get(self, name: str, default: Any = None) -> Any: ...
