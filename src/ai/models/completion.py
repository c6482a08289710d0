"""Resultado da chamada ao provedor de chat completion."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ChatCompletionResult(BaseModel):
    """Retorno do wrapper HTTP (nunca lança)."""

    model_config = ConfigDict(frozen=True)

    ok: bool
    content: str | None = None
    error: str | None = None
    status: int | None = None
