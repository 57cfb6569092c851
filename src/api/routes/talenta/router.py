"""Endpoints do conector Talenta.

Endpoints:
- GET /talenta/actions: catálogo de ações com metadados de campos
- POST /talenta/execute: executa itens (ação + parâmetros) em sequência

Credenciais vêm de TalentaSettings (credential store); nunca do body.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from api.connectors.talenta.catalog import list_actions
from api.connectors.talenta.errors import InvalidCredentialsError
from api.connectors.talenta.parameters import fields_for_action
from app.constants.talenta import TALENTA_DOCUMENTATION_URL
from app.observability import reset_correlation_id, set_correlation_id
from app.use_cases.talenta.models import ActionItem, ItemResult

logger = logging.getLogger(__name__)

router = APIRouter()

# Lazy-loaded use case (inicializado na primeira requisição)
_execute_use_case = None


class ExecuteItemModel(BaseModel):
    """Item de entrada do host."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    action: str
    parameters: dict[str, str | int | float | bool | None] = Field(default_factory=dict)
    return_all: bool = Field(default=False, alias="returnAll")


class ExecuteRequestModel(BaseModel):
    """Lote de itens a executar."""

    items: list[ExecuteItemModel] = Field(min_length=1)


class ItemResultModel(BaseModel):
    """Resultado de um item (linhas ou erro)."""

    item_index: int
    action: str
    success: bool
    rows: list[dict[str, Any]] = Field(default_factory=list)
    error: dict[str, Any] | None = None
    pages_fetched: int = 0
    truncated: bool = False

    @classmethod
    def from_result(cls, result: ItemResult) -> ItemResultModel:
        return cls(
            item_index=result.item_index,
            action=result.action,
            success=result.success,
            rows=result.rows,
            error=result.error.as_dict() if result.error else None,
            pages_fetched=result.pages_fetched,
            truncated=result.truncated,
        )


class ExecuteResponseModel(BaseModel):
    results: list[ItemResultModel]


def _get_execute_use_case():
    """Obtém o use case de execução (lazy-loading)."""
    global _execute_use_case
    if _execute_use_case is None:
        from app.bootstrap.talenta_factory import create_talenta_execute_use_case

        _execute_use_case = create_talenta_execute_use_case()
    return _execute_use_case


@router.get("/actions")
async def list_talenta_actions() -> dict[str, Any]:
    """Catálogo de ações e campos exibidos por ação."""
    return {
        "documentation_url": TALENTA_DOCUMENTATION_URL,
        "actions": [
            {
                "name": action.name,
                "value": action.value,
                "method": action.method,
                "path": action.path_template,
                "supports_pagination": action.supports_pagination,
                "fields": [f.as_dict() for f in fields_for_action(action.value)],
            }
            for action in list_actions()
        ]
    }


@router.post("/execute", response_model=ExecuteResponseModel)
async def execute_talenta_actions(
    payload: ExecuteRequestModel,
    request: Request,
) -> ExecuteResponseModel | JSONResponse:
    """Executa os itens em sequência; falhas ficam anexadas a cada item."""
    token = set_correlation_id(request.headers.get("x-correlation-id"))
    try:
        items = [
            ActionItem(
                action=item.action,
                parameters=item.parameters,
                return_all=item.return_all,
            )
            for item in payload.items
        ]
        try:
            results = await _get_execute_use_case().execute(items)
        except InvalidCredentialsError as exc:
            logger.error("talenta_invalid_credentials", extra={"error": str(exc)})
            return JSONResponse(
                status_code=503,
                content={"error": {"code": exc.code, "message": str(exc)}},
            )

        return ExecuteResponseModel(
            results=[ItemResultModel.from_result(result) for result in results]
        )
    finally:
        reset_correlation_id(token)
