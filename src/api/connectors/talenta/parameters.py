"""Parâmetros das ações Talenta.

Define os metadados de cada campo (rótulo, tipo, default) e resolve um
bundle explícito de valores a partir de um ParameterSource do host.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any, Literal

from api.connectors.talenta.catalog import TALENTA_ACTIONS, get_action

if TYPE_CHECKING:
    from api.connectors.talenta.catalog import ActionDescriptor
    from app.protocols.parameter_source import ParameterSource

FieldType = Literal["string", "number"]


@dataclass(frozen=True, slots=True)
class ParameterField:
    """Metadados de um parâmetro exposto ao host."""

    name: str
    display_name: str
    type: FieldType = "string"
    default: Any = ""
    description: str = ""
    min_value: int | None = None

    def actions(self) -> tuple[str, ...]:
        """Ações do catálogo que exibem este campo."""
        return tuple(a.value for a in TALENTA_ACTIONS if self.name in a.parameter_names)

    def as_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "display_name": self.display_name,
            "type": self.type,
            "default": self.default,
            "description": self.description,
            "min_value": self.min_value,
            "actions": list(self.actions()),
        }


PARAMETER_FIELDS: tuple[ParameterField, ...] = (
    # Variáveis de path
    ParameterField(name="id", display_name="ID"),
    ParameterField(name="userId", display_name="User ID"),
    # Query params
    ParameterField(
        name="limit",
        display_name="Limit",
        type="number",
        default=50,
        description="Max number of results to return",
        min_value=1,
    ),
    ParameterField(name="page", display_name="Page", type="number", default=1),
    ParameterField(name="status", display_name="Status"),
    ParameterField(name="year", display_name="Year", type="number", default=None),
    ParameterField(name="month", display_name="Month", type="number", default=None),
    ParameterField(name="requestId", display_name="Request ID"),
)

_FIELDS_BY_NAME: dict[str, ParameterField] = {f.name: f for f in PARAMETER_FIELDS}


def get_field(name: str) -> ParameterField | None:
    """Retorna metadados do campo ou None se desconhecido."""
    return _FIELDS_BY_NAME.get(name)


def fields_for_action(key: str) -> tuple[ParameterField, ...]:
    """Campos exibidos para a ação, na ordem declarada do descriptor.

    Raises:
        UnknownActionError: Se a ação não existe
    """
    action = get_action(key)
    return tuple(
        get_field(name) or ParameterField(name=name, display_name=name)
        for name in action.parameter_names
    )


class MappingParameterSource:
    """Adapta um dict de valores ao protocolo ParameterSource."""

    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        self._values = dict(values or {})

    def get(self, name: str, default: Any = None) -> Any:
        return self._values.get(name, default)


@dataclass(frozen=True)
class ActionParameters:
    """Bundle tipado de valores concretos para um request."""

    path_values: dict[str, Any] = field(default_factory=dict)
    query_values: dict[str, Any] = field(default_factory=dict)
    body_values: dict[str, Any] = field(default_factory=dict)

    def with_query(self, **overrides: Any) -> ActionParameters:
        """Cópia com valores de query sobrescritos (ex: page, limit)."""
        return replace(self, query_values={**self.query_values, **overrides})


def _read(source: ParameterSource, name: str) -> Any:
    parameter_field = get_field(name)
    default = parameter_field.default if parameter_field is not None else None
    return source.get(name, default)


def resolve_parameters(
    descriptor: ActionDescriptor,
    source: ParameterSource,
) -> ActionParameters:
    """Lê do host os valores declarados pelo descriptor.

    Campos ausentes recebem o default do campo; valores vazios são
    descartados mais tarde pelo builder.
    """
    return ActionParameters(
        path_values={name: _read(source, name) for name in descriptor.path_variables},
        query_values={name: _read(source, name) for name in descriptor.query_params},
        body_values={name: _read(source, name) for name in descriptor.body_params},
    )
