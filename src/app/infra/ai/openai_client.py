"""Cliente OpenAI real para produção.

Implementa ChatCompletionClientProtocol com uma chamada de chat completion.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

import httpx

from app.infra.ai._openai_http import build_payload, call_chat_completion

if TYPE_CHECKING:
    from ai.models.chat import PromptMessage
    from ai.models.completion import ChatCompletionResult
    from config.settings.ai.openai import OpenAISettings

logger = logging.getLogger(__name__)


class OpenAIChatClient:
    """Cliente OpenAI do chat de documentos.

    Usa httpx para requests async. Não faz retries e não lança:
    falhas viram ChatCompletionResult(ok=False, ...).
    """

    __slots__ = ("_http_client", "_owns_http_client", "_settings")

    def __init__(
        self,
        settings: OpenAISettings,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings
        self._http_client = http_client
        self._owns_http_client = http_client is None

    async def _get_http_client(self) -> httpx.AsyncClient:
        """Obtém ou cria cliente HTTP."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=self._settings.timeout_seconds)
        return self._http_client

    async def complete(self, messages: Sequence[PromptMessage]) -> ChatCompletionResult:
        payload = build_payload(
            model=self._settings.model,
            messages=messages,
            temperature=self._settings.temperature,
            max_tokens=self._settings.max_tokens,
        )
        client = await self._get_http_client()
        return await call_chat_completion(
            http_client=client,
            api_key=self._settings.api_key,
            payload=payload,
            timeout_seconds=self._settings.timeout_seconds,
        )

    async def aclose(self) -> None:
        """Fecha o cliente HTTP quando foi criado aqui."""
        if self._owns_http_client and self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None
