"""Contratos do chat de documentos (turnos, mensagens de prompt, request).

O request é validado na borda (api/) e o núcleo assume campos já tipados.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ai.models.document import CaseContext, SenderProfile

SupportedLanguage = Literal["DE", "EN", "IT", "FR", "ES", "TR", "RO", "PL", "AR", "RU", "UK"]

ChatRole = Literal["user", "assistant"]
PromptRole = Literal["system", "user", "assistant"]

# demo/dashboard: chat livre; document: chat dentro do caso; edit: modificar texto
ChatMode = Literal["demo", "dashboard", "document", "edit"]

ConversationStatus = Literal["collecting", "confirmed", "document_generated"]


class ChatTurn(BaseModel):
    """Turno do histórico (ordem = ordem de inserção)."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    role: ChatRole
    content: str = ""

    @field_validator("content", mode="before")
    @classmethod
    def _coerce_content(cls, value: Any) -> str:
        if value is None:
            return ""
        return str(value)


class PromptMessage(BaseModel):
    """Mensagem enviada ao provedor de chat completion."""

    model_config = ConfigDict(frozen=True)

    role: PromptRole
    content: str

    def as_payload(self) -> dict[str, str]:
        return {"role": self.role, "content": self.content}


class DocumentChatRequest(BaseModel):
    """Request do chat de documentos.

    Aceita as chaves camelCase enviadas pelo frontend (userMessage,
    documentText, caseId, ...) e também os nomes snake_case.
    Turnos com role diferente de user/assistant são descartados.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    user_message: str = Field(alias="userMessage", min_length=1)
    document_text: str | None = Field(default=None, alias="documentText")
    case_id: str | None = Field(default=None, alias="caseId")
    document_id: str | None = Field(default=None, alias="documentId")
    pratica_id: str | None = Field(default=None, alias="praticaId")
    chat_history: list[ChatTurn] = Field(default_factory=list, alias="chatHistory")
    user_language: str | None = Field(default=None, alias="userLanguage")
    conversation_status: ConversationStatus | None = Field(
        default=None, alias="conversationStatus"
    )
    is_upload_without_text: bool = Field(default=False, alias="isUploadWithoutText")
    skip_scope_check: bool = Field(default=False, alias="skipScopeCheck")
    user_profile: SenderProfile | None = Field(default=None, alias="userProfile")
    case_context: CaseContext | None = Field(default=None, alias="caseContext")
    mode: ChatMode = "dashboard"

    @field_validator("chat_history", mode="before")
    @classmethod
    def _drop_unknown_roles(cls, value: Any) -> Any:
        if value is None:
            return []
        if not isinstance(value, list):
            return value
        return [
            item
            for item in value
            if not isinstance(item, dict) or item.get("role") in ("user", "assistant")
        ]
