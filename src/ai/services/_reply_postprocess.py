"""Pós-processamento da resposta do modelo (rascunho, placeholders, cópia).

Separado do DocumentChatService para manter o pipeline legível.
"""

from __future__ import annotations

from dataclasses import dataclass

from ai.models.document import DraftExtraction
from ai.rules.fallbacks import normalize_assistant_copy
from ai.rules.letter_detection import extract_strict_draft, looks_like_formal_letter
from ai.rules.placeholders import (
    build_placeholder_question,
    contains_bracket_placeholders,
    replace_signature_placeholders,
)


@dataclass(slots=True)
class ReplyDraft:
    """Estado mutável da resposta durante o pós-processamento."""

    message: str
    extraction: DraftExtraction
    placeholder_blocked: bool = False

    def drop_draft(self) -> None:
        self.extraction = DraftExtraction()


def extract_clean_draft(raw: str) -> DraftExtraction:
    """Rascunho formal limpo, com assinatura trocada por linha."""
    extraction = extract_strict_draft(raw)
    if not extraction.draft_ready or extraction.draft is None:
        return extraction

    draft = replace_signature_placeholders(extraction.draft)
    # Resumos/recaps não liberam o rascunho
    if not looks_like_formal_letter(draft.strip()):
        return DraftExtraction()
    return DraftExtraction(draft_ready=True, draft=draft, title=extraction.title)


def prepare_reply(raw: str, language: object) -> ReplyDraft:
    """Aplica extração de rascunho e hard-stop de placeholders.

    Placeholder em qualquer lugar (resposta bruta ou rascunho) descarta o
    rascunho e troca a mensagem pela pergunta dos dados faltantes.
    """
    reply = ReplyDraft(
        message=normalize_assistant_copy(language, replace_signature_placeholders(raw)),
        extraction=extract_clean_draft(raw),
    )
    if contains_bracket_placeholders(raw) or contains_bracket_placeholders(
        reply.extraction.draft
    ):
        reply.drop_draft()
        reply.message = build_placeholder_question(language, raw)
        reply.placeholder_blocked = True
    return reply
