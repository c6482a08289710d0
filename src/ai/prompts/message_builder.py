"""Montagem estrita das mensagens enviadas ao modelo.

Ordem fixa (contrato do guardrail e do validador de saída):
  a) system: regras de comportamento
  b) system: "DOCUMENT_TEXT (authoritative): <OCR>" quando há texto
  c) histórico (user/assistant), na ordem recebida
  d) user: mensagem atual (a menos que já esteja no histórico)

O documento fica em mensagem system própria para não ser tratado como
conteúdo negociável da conversa.
"""

from __future__ import annotations

from collections.abc import Iterable

from ai.models.chat import ChatTurn, PromptMessage
from ai.rules.document_guardrails import DOCUMENT_TEXT_SYSTEM_LABEL

TRUNCATION_MARKER = "\n...[truncated]"

DEFAULT_DOCUMENT_TEXT_MAX_CHARS = 12000
DEFAULT_HISTORY_TURN_MAX_CHARS = 4000
DEFAULT_USER_MESSAGE_MAX_CHARS = 4000


def truncate_document_text(text: str, max_chars: int) -> str:
    """Corta o texto em `max_chars` e anexa o marcador quando cortou."""
    if len(text) <= max_chars:
        return text
    return text[:max_chars] + TRUNCATION_MARKER


def build_document_block(document_text: str | None, max_chars: int) -> str | None:
    """Conteúdo da mensagem system do documento (None sem texto)."""
    doc_text = (document_text or "").strip()
    if not doc_text:
        return None
    return f"{DOCUMENT_TEXT_SYSTEM_LABEL}\n\n{truncate_document_text(doc_text, max_chars)}"


def build_strict_messages(
    system_rules: str,
    document_text: str | None,
    history: Iterable[ChatTurn],
    user_message: str,
    *,
    document_text_max_chars: int = DEFAULT_DOCUMENT_TEXT_MAX_CHARS,
    history_turn_max_chars: int = DEFAULT_HISTORY_TURN_MAX_CHARS,
    user_message_max_chars: int = DEFAULT_USER_MESSAGE_MAX_CHARS,
    user_message_in_history: bool = False,
) -> tuple[PromptMessage, ...]:
    """Monta a lista imutável de mensagens para uma chamada ao modelo.

    Os cortes por turno são teto de segurança em caracteres (não contam
    tokens).

    Args:
        system_rules: Regras completas do comportamento (texto opaco)
        document_text: Texto OCR; vazio/None = sem documento
        history: Turnos anteriores (user/assistant)
        user_message: Mensagem atual do usuário
        document_text_max_chars: Limite do bloco de documento
        history_turn_max_chars: Limite por turno do histórico
        user_message_max_chars: Limite da mensagem atual
        user_message_in_history: Mensagem atual já incluída no histórico

    Returns:
        Tupla de PromptMessage na ordem fixa.
    """
    messages: list[PromptMessage] = [PromptMessage(role="system", content=system_rules)]

    document_block = build_document_block(document_text, document_text_max_chars)
    if document_block is not None:
        messages.append(PromptMessage(role="system", content=document_block))

    for turn in history:
        if turn.role not in ("user", "assistant"):
            continue
        messages.append(
            PromptMessage(role=turn.role, content=turn.content[:history_turn_max_chars])
        )

    current = (user_message or "").strip()
    if not user_message_in_history and current:
        messages.append(PromptMessage(role="user", content=current[:user_message_max_chars]))

    return tuple(messages)
