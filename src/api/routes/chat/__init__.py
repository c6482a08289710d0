"""Rotas do chat de documentos."""

from api.routes.chat.router import router

__all__ = ["router"]
