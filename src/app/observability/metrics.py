"""Registro de métricas via structured logging.

As métricas são registradas como logs estruturados e podem ser agregadas
posteriormente (BigQuery, CloudWatch Insights, etc.).

Métricas suportadas:
- Latência: tempo de execução por ação/item
- Resultado de item: sucesso/falha com código de erro, páginas e linhas

Uso:
    from app.observability.metrics import record_latency, record_item_outcome

    start = time.perf_counter()
    # ... operação ...
    record_latency("talenta", "getAllEmployees", (time.perf_counter() - start) * 1000)
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "talenta")
        operation: Nome da operação (ex: chave da ação)
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação para rastreamento
    """
    extra: dict[str, object] = {
        "metric_type": "latency",
        "component": component,
        "operation": operation,
        "latency_ms": round(latency_ms, 2),
    }
    if correlation_id:
        extra["correlation_id"] = correlation_id
    logger.info("metric_latency", extra=extra)


def record_item_outcome(
    action: str,
    success: bool,
    *,
    error_code: str | None = None,
    pages_fetched: int = 0,
    rows: int = 0,
) -> None:
    """Registra o resultado de um item processado (counter por ação/código)."""
    logger.info(
        "metric_item_outcome",
        extra={
            "metric_type": "counter",
            "action": action,
            "success": success,
            "error_code": error_code,
            "pages_fetched": pages_fetched,
            "rows": rows,
        },
    )
