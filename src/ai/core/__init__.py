"""Core do módulo AI.

Exporta protocols e clients para uso externo.
A implementação OpenAIChatClient está em app/infra/ai/ (IO).
"""

from ai.core.client import ChatCompletionClientProtocol
from ai.core.mock_client import MockChatClient

__all__ = [
    "ChatCompletionClientProtocol",
    "MockChatClient",
]
