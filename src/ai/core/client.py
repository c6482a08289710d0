"""Protocolo para clientes de chat completion.

Define o contrato ChatCompletionClientProtocol para implementações concretas.
ai/ não faz IO direto: o HTTP vive em app/infra/ai/ e entra via protocol.
"""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ai.models.chat import PromptMessage
    from ai.models.completion import ChatCompletionResult


class ChatCompletionClientProtocol(Protocol):
    """Protocolo para clientes de chat completion.

    Define contrato para implementações concretas (OpenAI, mock, etc.).
    Permite injeção de dependência e testabilidade.
    """

    @abstractmethod
    async def complete(self, messages: Sequence[PromptMessage]) -> ChatCompletionResult:
        """Executa uma chamada de chat completion.

        Args:
            messages: Lista estrita já montada (ver build_strict_messages)

        Returns:
            Resultado tipado; falhas de rede/provedor viram ok=False
            (nunca lança)
        """
        ...
