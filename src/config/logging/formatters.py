"""Formatter JSON dos logs do chat Lexora.

Uma linha JSON por evento. Textos em alemão/italiano/árabe saem sem
escape (ensure_ascii=False).
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Campos base, na ordem de emissão
LOG_FIELDS: tuple[str, ...] = ("asctime", "levelname", "name", "message", "correlation_id")

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter(service_name: str) -> JsonFormatter:
    """Cria o formatter JSON; `service` entra como campo estático.

    Exemplo de output:
        {"asctime": "...", "level": "ERROR",
         "logger": "ai.rules.document_guardrails",
         "message": "forbidden_phrase_in_output",
         "correlation_id": "abc-123", "service": "lexora_chat"}
    """
    return JsonFormatter(
        " ".join(f"%({field})s" for field in LOG_FIELDS),
        rename_fields=FIELD_RENAME_MAP,
        static_fields={"service": service_name},
        json_ensure_ascii=False,
    )
