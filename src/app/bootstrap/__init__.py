"""Bootstrap da aplicação: inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings e
conecta o cliente OpenAI concreto ao DocumentChatService.

Uso:
    from app.bootstrap import initialize_app, create_document_chat_service

    # Na inicialização do serviço
    initialize_app()

    # Serviço do chat de documentos
    service = create_document_chat_service()
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ai.config.settings import get_ai_settings
from ai.services.document_chat import DocumentChatService
from app.infra.ai.openai_client import OpenAIChatClient
from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_base_settings, get_openai_settings
from utils.errors import ConfigurationError

if TYPE_CHECKING:
    import httpx

    from ai.core.client import ChatCompletionClientProtocol

# Nome do serviço para logs e métricas
SERVICE_NAME = "lexora_chat"

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa a aplicação (logging JSON com correlation_id).

    Deve ser chamada uma vez no início do serviço. Nível via LOG_LEVEL.
    """
    base = get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.

    Raises:
        ConfigurationError: Settings inválidas em ambiente estrito.
    """
    base = get_base_settings()
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"openai: {error}" for error in get_openai_settings().validate())
    errors.extend(f"limits: {error}" for error in get_ai_settings().limits.validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.is_strict:
        raise ConfigurationError(base.environment, errors)


def create_chat_client(http_client: httpx.AsyncClient | None = None) -> OpenAIChatClient:
    """Cria o cliente de chat completion a partir das settings OpenAI."""
    return OpenAIChatClient(get_openai_settings(), http_client=http_client)


def create_document_chat_service(
    client: ChatCompletionClientProtocol | None = None,
) -> DocumentChatService:
    """Monta o DocumentChatService (cliente real quando não injetado)."""
    return DocumentChatService(client or create_chat_client(), get_ai_settings())


__all__ = [
    "SERVICE_NAME",
    "create_chat_client",
    "create_document_chat_service",
    "initialize_app",
    "validate_runtime_settings",
]
