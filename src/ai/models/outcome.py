"""Resultado do pipeline do chat de documentos (um por request)."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

from ai.models.chat import SupportedLanguage
from ai.models.guardrail import GuardrailFailure

OutcomeKind = Literal[
    "reply",
    "out_of_scope",
    "already_generated",
    "guardrail_failed",
    "provider_error",
]


class DocumentChatOutcome(BaseModel):
    """Saída tipada do DocumentChatService.

    Atributos:
        kind: Ramo do pipeline que produziu a resposta
        response: Texto exibido ao usuário (None em guardrail/provider error)
        draft_ready: Rascunho formal limpo disponível
        draft: Corpo da carta extraído (apenas com draft_ready)
        title: Assunto extraído para título do caso
        document_generated: Saída parece carta concluída
        fallback_used: Resposta substituída por fallback seguro
        guardrail: Falha do guardrail (kind="guardrail_failed")
        provider_status: Status HTTP do provedor (kind="provider_error")
    """

    model_config = ConfigDict(frozen=True)

    kind: OutcomeKind
    language: SupportedLanguage = "EN"
    response: str | None = None
    draft_ready: bool = False
    draft: str | None = None
    title: str | None = None
    document_generated: bool = False
    fallback_used: bool = False
    guardrail: GuardrailFailure | None = None
    provider_status: int | None = None
    provider_error: str | None = None
