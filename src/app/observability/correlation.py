"""correlation_id por request (ContextVar, seguro em async).

O valor vem do header X-Correlation-ID do frontend quando é um token
seguro para log; qualquer outra coisa é trocada por um UUID novo.

Uso:
    token = set_correlation_id(request.headers.get(CORRELATION_ID_HEADER))
    try:
        ...
    finally:
        reset_correlation_id(token)
"""

from __future__ import annotations

import re
import uuid
from contextvars import ContextVar, Token

CORRELATION_ID_HEADER = "X-Correlation-ID"

# Letras, dígitos, '-', '_', '.', ':' (sem quebras de linha nem JSON)
_SAFE_ID_RE = re.compile(r"^[A-Za-z0-9._:\-]{1,128}$")

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def generate_correlation_id() -> str:
    return str(uuid.uuid4())


def resolve_correlation_id(candidate: str | None) -> str:
    """Valor do header quando seguro; senão, um UUID novo."""
    value = (candidate or "").strip()
    if value and _SAFE_ID_RE.match(value):
        return value
    return generate_correlation_id()


def get_correlation_id() -> str:
    """correlation_id do contexto atual ("" fora de um request)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id (resolvido) e retorna o token para reset."""
    return _correlation_id.set(resolve_correlation_id(correlation_id))


def reset_correlation_id(token: Token[str]) -> None:
    _correlation_id.reset(token)
