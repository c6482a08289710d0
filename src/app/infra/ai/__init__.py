"""Implementações concretas de IO para IA.

app/infra concentra o IO; ai/ recebe o cliente por injeção.
"""

from app.infra.ai.openai_client import OpenAIChatClient

__all__ = [
    "OpenAIChatClient",
]
