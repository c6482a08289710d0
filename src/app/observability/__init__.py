"""Observabilidade: logs estruturados, correlation_id, métricas.

Re-exporta funções de correlation_id e métricas para uso em toda a aplicação.

Uso:
    from app.observability import get_correlation_id, set_correlation_id
    from app.observability import record_latency, record_fallback
"""

from app.observability.correlation import (
    CORRELATION_ID_HEADER,
    generate_correlation_id,
    get_correlation_id,
    reset_correlation_id,
    resolve_correlation_id,
    set_correlation_id,
)
from app.observability.metrics import (
    record_fallback,
    record_guardrail_block,
    record_latency,
    record_scope_refusal,
)

__all__ = [
    "CORRELATION_ID_HEADER",
    "generate_correlation_id",
    "get_correlation_id",
    "record_fallback",
    "record_guardrail_block",
    "record_latency",
    "record_scope_refusal",
    "reset_correlation_id",
    "resolve_correlation_id",
    "set_correlation_id",
]
