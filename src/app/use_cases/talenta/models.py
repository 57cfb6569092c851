"""Modelos de entrada/saída do use case de execução Talenta."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ActionItem:
    """Um item de entrada do host: ação escolhida + valores de parâmetro."""

    action: str
    parameters: Mapping[str, Any] = field(default_factory=dict)
    return_all: bool = False


@dataclass(frozen=True)
class ItemError:
    """Falha atribuída a um item de entrada."""

    code: str
    message: str
    status_code: int | None = None
    debug: dict[str, Any] | None = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "status_code": self.status_code,
            "debug": self.debug,
        }


@dataclass
class ItemResult:
    """Resultado de um item: linhas normalizadas ou erro."""

    item_index: int
    action: str
    rows: list[dict[str, Any]] = field(default_factory=list)
    error: ItemError | None = None
    pages_fetched: int = 0
    truncated: bool = False

    @property
    def success(self) -> bool:
        return self.error is None
