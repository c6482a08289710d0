"""Modelos/DTOs do chat de documentos.

Re-exporta contratos de request, resultados tipados e dados de documento.
"""

from ai.models.chat import (
    ChatMode,
    ChatRole,
    ChatTurn,
    ConversationStatus,
    DocumentChatRequest,
    PromptMessage,
    PromptRole,
    SupportedLanguage,
)
from ai.models.completion import ChatCompletionResult
from ai.models.document import CaseContext, DocumentSummary, DraftExtraction, SenderProfile
from ai.models.guardrail import (
    DocumentContext,
    GuardrailFailure,
    GuardrailPassed,
    GuardrailResult,
    OutputValidationResult,
)
from ai.models.outcome import DocumentChatOutcome, OutcomeKind
from ai.models.scope import ScopeConfidence, ScopeVerdict

__all__ = [
    "CaseContext",
    "ChatCompletionResult",
    "ChatMode",
    "ChatRole",
    "ChatTurn",
    "ConversationStatus",
    "DocumentChatOutcome",
    "DocumentChatRequest",
    "DocumentContext",
    "DocumentSummary",
    "DraftExtraction",
    "GuardrailFailure",
    "GuardrailPassed",
    "GuardrailResult",
    "OutcomeKind",
    "OutputValidationResult",
    "PromptMessage",
    "PromptRole",
    "ScopeConfidence",
    "ScopeVerdict",
    "SenderProfile",
    "SupportedLanguage",
]
