"""Registro de métricas via structured logging.

As métricas são registradas como logs estruturados e podem ser agregadas
posteriormente (BigQuery, CloudWatch Insights, etc.).

Métricas suportadas:
- Latência: tempo de execução por componente/operação
- Guardrail: bloqueios por documento esperado sem texto OCR
- Fallback: respostas do modelo substituídas por texto determinístico
- Scope: recusas do scope gate

Uso:
    from app.observability.metrics import record_latency, record_guardrail_block

    start = time.perf_counter()
    # ... operação ...
    latency_ms = (time.perf_counter() - start) * 1000
    record_latency("document_chat", "handle", latency_ms, correlation_id)
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
        component: Nome do componente (ex: "document_chat", "openai_client")
        operation: Nome da operação (ex: "handle", "complete")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação para rastreamento
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "correlation_id": correlation_id,
        },
    )


def record_guardrail_block(
    reason: str,
    correlation_id: str | None = None,
    metadata: dict[str, str | int | None] | None = None,
) -> None:
    """Registra bloqueio do guardrail de documento.

    Args:
        reason: Código do bloqueio (ex: "DOCUMENT_TEXT_MISSING")
        correlation_id: ID de correlação para rastreamento
        metadata: ids do caso/documento (sem texto do usuário)
    """
    extra: dict[str, str | int | None] = {
        "metric_type": "guardrail_block",
        "component": "document_guardrail",
        "reason": reason,
        "correlation_id": correlation_id,
    }
    if metadata:
        extra.update(metadata)

    logger.info("metric_guardrail_block", extra=extra)


def record_fallback(
    component: str,
    reason: str,
    correlation_id: str | None = None,
) -> None:
    """Registra substituição da resposta do modelo por fallback.

    Args:
        component: Componente que aplicou o fallback (ex: "output_validator")
        reason: Motivo (ex: "forbidden_phrase", "placeholder_block")
        correlation_id: ID de correlação para rastreamento
    """
    logger.info(
        "metric_fallback",
        extra={
            "metric_type": "fallback",
            "component": component,
            "reason": reason,
            "correlation_id": correlation_id,
        },
    )


def record_scope_refusal(
    reason: str,
    confidence: str,
    correlation_id: str | None = None,
) -> None:
    """Registra recusa do scope gate."""
    logger.info(
        "metric_scope_refusal",
        extra={
            "metric_type": "scope_refusal",
            "component": "scope_gate",
            "reason": reason,
            "confidence": confidence,
            "correlation_id": correlation_id,
        },
    )
