"""Resultados tipados do guardrail de documento e do validador de saída."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from pydantic import BaseModel, ConfigDict


@dataclass(frozen=True, slots=True)
class DocumentContext:
    """Contexto de documento disponível para um turno de chat.

    Invariante: se algum id estiver presente e `document_text` estiver vazio
    ou só com espaços, o documento é "esperado mas ausente" (falha dura).
    """

    document_text: str | None = None
    case_id: str | None = None
    document_id: str | None = None
    pratica_id: str | None = None
    is_upload_without_text: bool = False

    @property
    def has_identifier(self) -> bool:
        return bool(self.case_id or self.document_id or self.pratica_id)

    @property
    def stripped_text(self) -> str:
        return (self.document_text or "").strip()

    @property
    def has_text(self) -> bool:
        return len(self.stripped_text) > 0


class GuardrailPassed(BaseModel):
    """Documento disponível (ou não esperado)."""

    model_config = ConfigDict(frozen=True)

    ok: Literal[True] = True


class GuardrailFailure(BaseModel):
    """Documento esperado mas sem texto OCR utilizável.

    O handler HTTP mapeia para 400 e registra o bug de pipeline.
    """

    model_config = ConfigDict(frozen=True)

    ok: Literal[False] = False
    error: Literal["DOCUMENT_TEXT_MISSING"] = "DOCUMENT_TEXT_MISSING"
    hint: str
    case_id: str | None = None
    document_id: str | None = None
    pratica_id: str | None = None
    document_text_length: int = 0


GuardrailResult = GuardrailPassed | GuardrailFailure


class OutputValidationResult(BaseModel):
    """Resultado do validador de frases proibidas na saída do modelo.

    ok=False significa que `response` já é o fallback seguro.
    """

    model_config = ConfigDict(frozen=True)

    ok: bool
    response: str
    logged: bool = False
