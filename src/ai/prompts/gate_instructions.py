"""Sufixos do system prompt: gate de geração e regra do primeiro turno."""

from __future__ import annotations

from collections.abc import Mapping

from ai.config.prompt_assets_loader import load_prompt_mapping, load_prompt_text
from ai.rules.fallbacks import get_first_greeting
from ai.rules.language import DEFAULT_LANGUAGE, normalize_language

_GATE_YAML = "gate_instructions.yaml"


def get_create_document_phrases() -> Mapping[str, str]:
    """Pergunta "criar o documento ou adicionar algo?" por idioma."""
    return load_prompt_mapping(_GATE_YAML, "create_document_or_add_more")


def get_create_document_phrase(language: object) -> str:
    phrases = get_create_document_phrases()
    return phrases.get(normalize_language(language)) or phrases[DEFAULT_LANGUAGE]


def build_gate_instruction(allow_generation: bool, language: object) -> str:
    """Instrução anexada ao system prompt conforme o estado do gate.

    Sem confirmação: resumo primeiro, uma única pergunta localizada, esperar.
    Com confirmação: gerar [LETTER]...[/LETTER] imediatamente, sem perguntas.
    """
    if allow_generation:
        return load_prompt_text(_GATE_YAML, "confirmation_received")
    template = load_prompt_text(_GATE_YAML, "generation_gate")
    return template.format(create_doc_phrase=get_create_document_phrase(language))


def build_first_message_rule(language: object) -> str:
    template = load_prompt_text(_GATE_YAML, "first_message_rule")
    return template.format(greeting=get_first_greeting(language))
