"""Catálogo declarativo de ações da API Talenta.

Cada ação descreve método HTTP, template de path, variáveis de path e
parâmetros permitidos de query/body. O catálogo é imutável e validado
na importação.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from api.connectors.talenta.errors import UnknownActionError
from app.constants.talenta import PAGINATION_QUERY_PARAMS, TalentaAction

_PLACEHOLDER_RE = re.compile(r"\{([^{}]+)\}")


@dataclass(frozen=True, slots=True)
class ActionDescriptor:
    """Descrição de uma operação remota do catálogo."""

    name: str
    value: str
    method: str
    path_template: str
    path_variables: tuple[str, ...] = ()
    query_params: tuple[str, ...] = ()
    body_params: tuple[str, ...] = ()

    @property
    def supports_pagination(self) -> bool:
        """True se a ação aceita `limit` e `page` na query."""
        return all(param in self.query_params for param in PAGINATION_QUERY_PARAMS)

    @property
    def parameter_names(self) -> tuple[str, ...]:
        """Todos os nomes de parâmetro aceitos, em ordem declarada."""
        return self.path_variables + self.query_params + self.body_params

    def validate(self) -> list[str]:
        """Valida invariantes do descriptor.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []
        placeholders = _PLACEHOLDER_RE.findall(self.path_template)

        for var in self.path_variables:
            if var not in placeholders:
                errors.append(f"{self.value}: '{{{var}}}' ausente em {self.path_template}")

        for placeholder in placeholders:
            if placeholder not in self.path_variables:
                errors.append(f"{self.value}: placeholder '{placeholder}' não declarado")

        if self.query_params and self.body_params:
            errors.append(f"{self.value}: ação usa query e body ao mesmo tempo")

        return errors


TALENTA_ACTIONS: tuple[ActionDescriptor, ...] = (
    ActionDescriptor(
        name="Get All Employees",
        value=TalentaAction.GET_ALL_EMPLOYEES,
        method="GET",
        path_template="/employee",
        query_params=("limit", "page", "status"),
    ),
    ActionDescriptor(
        name="Get Employee by ID",
        value=TalentaAction.GET_EMPLOYEE_BY_ID,
        method="GET",
        path_template="/employee/{id}",
        path_variables=("id",),
    ),
    ActionDescriptor(
        name="Get Overtime Request List",
        value=TalentaAction.GET_OVERTIME_REQUEST_LIST,
        method="GET",
        path_template="/overtime/{userId}/requests",
        path_variables=("userId",),
        query_params=("limit", "page", "status", "year", "month"),
    ),
    ActionDescriptor(
        name="Get Overtime Request Detail by ID",
        value=TalentaAction.GET_OVERTIME_REQUEST_DETAIL_BY_ID,
        method="GET",
        path_template="/overtime/{userId}/request-detail",
        path_variables=("userId",),
        query_params=("requestId",),
    ),
)

_ACTIONS_BY_KEY: dict[str, ActionDescriptor] = {
    action.value: action for action in TALENTA_ACTIONS
}


def _check_catalog() -> None:
    errors = [error for action in TALENTA_ACTIONS for error in action.validate()]
    if len(_ACTIONS_BY_KEY) != len(TALENTA_ACTIONS):
        errors.append("chaves de ação duplicadas no catálogo")
    if errors:
        raise RuntimeError("Catálogo Talenta inválido: " + "; ".join(errors))


_check_catalog()


def get_action(key: str) -> ActionDescriptor:
    """Retorna o descriptor da ação.

    Raises:
        UnknownActionError: Se a chave não existe no catálogo
    """
    action = _ACTIONS_BY_KEY.get(key)
    if action is None:
        raise UnknownActionError(key)
    return action


def list_actions() -> tuple[ActionDescriptor, ...]:
    """Retorna o catálogo na ordem declarada."""
    return TALENTA_ACTIONS
