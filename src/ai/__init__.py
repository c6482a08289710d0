"""Módulo AI do Lexora.

Núcleo do chat de documentos, sem IO:
1. Guardrail de documento (texto OCR esperado mas ausente)
2. Scope gate (apenas temas burocráticos/jurídicos)
3. Montagem estrita das mensagens (regras → documento → histórico → usuário)
4. Gate de confirmação antes de gerar o documento
5. Validador de frases proibidas na saída do modelo

O cliente HTTP do provedor fica em app/infra/ai/ e é injetado via protocol.
"""

# Config
from ai.config import AISettings, ChatLimitSettings, get_ai_settings

# Core
from ai.core import ChatCompletionClientProtocol, MockChatClient

# Models
from ai.models import (
    ChatTurn,
    DocumentChatOutcome,
    DocumentChatRequest,
    DocumentContext,
    GuardrailFailure,
    PromptMessage,
    ScopeVerdict,
)

# Rules
from ai.rules import (
    check_scope,
    expect_document_guardrail,
    is_generation_allowed,
    normalize_language,
    validate_output_forbidden_phrases,
)

# Services
from ai.services import DocumentChatService

# Utils
from ai.utils import contains_pii, sanitize_pii

__all__ = [
    "AISettings",
    "ChatCompletionClientProtocol",
    "ChatLimitSettings",
    "ChatTurn",
    "DocumentChatOutcome",
    "DocumentChatRequest",
    "DocumentChatService",
    "DocumentContext",
    "GuardrailFailure",
    "MockChatClient",
    "PromptMessage",
    "ScopeVerdict",
    "check_scope",
    "contains_pii",
    "expect_document_guardrail",
    "get_ai_settings",
    "is_generation_allowed",
    "normalize_language",
    "sanitize_pii",
    "validate_output_forbidden_phrases",
]
