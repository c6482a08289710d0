"""Configuração centralizada de logging.

Um único handler JSON no root logger, com correlation_id por request,
limite de tamanho dos campos extras e registro padronizado de fallbacks
(saída do modelo substituída por texto determinístico).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import (
    DEFAULT_MAX_FIELD_CHARS,
    CorrelationIdFilter,
    FieldLengthFilter,
)
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "lexora_chat"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
    *,
    max_field_chars: int = DEFAULT_MAX_FIELD_CHARS,
) -> None:
    """Instala o handler JSON no root logger (chamada única no bootstrap).

    Args:
        level: Nível de log (case-insensitive)
        service_name: Valor do campo `service` em todo log
        correlation_id_getter: Retorna o correlation_id do contexto atual
        max_field_chars: Tamanho máximo de campos string do `extra`

    Raises:
        ValueError: Nível de log fora de VALID_LOG_LEVELS.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter(service_name))
    handler.addFilter(CorrelationIdFilter(correlation_id_getter))
    handler.addFilter(FieldLengthFilter(max_field_chars))

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Reconfigurar nunca duplica a saída
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def log_fallback(
    logger: logging.Logger,
    component: str,
    reason: str | None = None,
    endpoint: str | None = None,
    elapsed_ms: float | None = None,
) -> None:
    """Registra que a resposta do modelo foi trocada por um fallback.

    Exemplo:
        log_fallback(logger, "output_validator", reason="forbidden_phrase")
    """
    extra: dict[str, object] = {
        "component": component,
        "action": "fallback",
        "result": "applied",
        "fallback_used": True,
    }
    if reason:
        extra["reason"] = reason
    if endpoint:
        extra["endpoint"] = endpoint
    if elapsed_ms is not None:
        extra["elapsed_ms"] = elapsed_ms

    logger.info("fallback_applied", extra=extra)
