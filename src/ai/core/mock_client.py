"""Cliente mock de chat completion para testes e desenvolvimento.

Devolve respostas roteirizadas sem chamar LLM real e registra as
mensagens recebidas para inspeção.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence

from ai.models.chat import PromptMessage
from ai.models.completion import ChatCompletionResult

DEFAULT_MOCK_REPLY = "Hello, I am LEXORA, your AI assistant. How may I help you?"


class MockChatClient:
    """Cliente mock: respostas em fila, depois `default_reply`.

    Itens da fila podem ser texto (sucesso) ou ChatCompletionResult
    (para simular erro do provedor).
    """

    def __init__(
        self,
        replies: Iterable[str | ChatCompletionResult] = (),
        *,
        default_reply: str = DEFAULT_MOCK_REPLY,
    ) -> None:
        self._replies: deque[str | ChatCompletionResult] = deque(replies)
        self._default_reply = default_reply
        self.calls: list[tuple[PromptMessage, ...]] = []

    async def complete(self, messages: Sequence[PromptMessage]) -> ChatCompletionResult:
        self.calls.append(tuple(messages))
        reply = self._replies.popleft() if self._replies else self._default_reply
        if isinstance(reply, ChatCompletionResult):
            return reply
        return ChatCompletionResult(ok=True, content=reply)

    @property
    def last_messages(self) -> tuple[PromptMessage, ...]:
        return self.calls[-1] if self.calls else ()
