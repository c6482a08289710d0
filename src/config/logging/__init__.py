"""Logging estruturado (JSON) do serviço de chat.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização (bootstrap)
    configure_logging(level="INFO", service_name="lexora_chat")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("document_chat_reply", extra={"component": "document_chat"})

Todo log traz asctime, level, logger, message, correlation_id e service.
Logs nunca carregam o texto OCR completo nem PII do usuário.
"""

from config.logging.config import configure_logging, get_logger, log_fallback
from config.logging.filters import CorrelationIdFilter, FieldLengthFilter
from config.logging.formatters import FIELD_RENAME_MAP, LOG_FIELDS, create_json_formatter

__all__ = [
    "FIELD_RENAME_MAP",
    "LOG_FIELDS",
    "CorrelationIdFilter",
    "FieldLengthFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "log_fallback",
]
