"""Rotas HTTP da API: adapters de entrada.

Responsabilidades:
- Definir endpoints HTTP (chat, health)
- Validação do body via modelos pydantic do núcleo
- Delegação para o DocumentChatService
- Respostas HTTP apropriadas

Estrutura:
- routes/chat/: chat de documentos
- routes/health/: health checks e readiness

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
