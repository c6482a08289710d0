"""Montagem do bloco de regras (primeira mensagem system)."""

from __future__ import annotations

from ai.models.chat import ChatMode
from ai.prompts.chat_policy import (
    get_chat_policy,
    get_document_in_context_override,
    get_document_type_detection,
    get_intake_rules,
    get_language_instruction,
)
from ai.prompts.gate_instructions import build_first_message_rule, build_gate_instruction
from ai.rules.language import LANGUAGE_NAMES, lookup


def build_system_rules(
    mode: ChatMode,
    language: object,
    *,
    has_document: bool,
    first_message: bool,
    allow_generation: bool | None = None,
) -> str:
    """Compõe o texto de regras do sistema para um turno.

    Ordem: política do modo → intake → override de documento (se houver
    OCR) → detecção de tipo → idioma → regra do primeiro turno → gate.
    O gate só é anexado quando `allow_generation` é informado.
    """
    parts = [get_chat_policy(mode), get_intake_rules(language)]
    if has_document:
        parts.append(get_document_in_context_override())
    parts.append(get_document_type_detection())
    parts.append(get_language_instruction(lookup(LANGUAGE_NAMES, language)))

    rules = "\n".join(part.strip("\n") for part in parts)
    if first_message:
        rules += build_first_message_rule(language).rstrip("\n")
    if allow_generation is not None:
        rules += build_gate_instruction(allow_generation, language).rstrip("\n")
    return rules
