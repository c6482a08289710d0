"""Filters de logging do chat Lexora.

- CorrelationIdFilter: injeta o correlation_id do request atual
- FieldLengthFilter: corta campos string longos vindos de `extra`
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

DEFAULT_MAX_FIELD_CHARS = 500
TRUNCATED_SUFFIX = "...[truncated]"

_STANDARD_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
) | {"message", "asctime"}


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id em cada record.

    Valor explícito passado via `extra` tem precedência sobre o getter.
    """

    def __init__(self, correlation_id_getter: Callable[[], str] | None = None) -> None:
        super().__init__()
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "correlation_id", None):
            record.correlation_id = self._get_correlation_id()
        return True


class FieldLengthFilter(logging.Filter):
    """Limita campos string do `extra` a `max_chars`.

    O texto OCR e as respostas do modelo nunca chegam inteiros ao log,
    mesmo quando um chamador passa o texto bruto por engano.
    """

    def __init__(self, max_chars: int = DEFAULT_MAX_FIELD_CHARS) -> None:
        super().__init__()
        self._max_chars = max_chars

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in list(vars(record).items()):
            if key in _STANDARD_RECORD_ATTRS:
                continue
            if isinstance(value, str) and len(value) > self._max_chars:
                setattr(record, key, value[: self._max_chars] + TRUNCATED_SUFFIX)
        return True
