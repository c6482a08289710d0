"""Serviços do módulo AI.

Exporta o serviço do chat de documentos.
"""

from ai.services.document_chat import DocumentChatService

__all__ = [
    "DocumentChatService",
]
