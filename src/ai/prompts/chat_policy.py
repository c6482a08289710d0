"""Política de comportamento do chat e regras de intake.

Regras:
  - Nenhum texto de prompt vive em `.py`; tudo é carregado de YAML.
  - Política = princípios globais + assinatura + documento + pós-confirmação
    + bloco do modo + regra absoluta.
"""

from __future__ import annotations

from functools import lru_cache

from ai.config.prompt_assets_loader import load_prompt_mapping, load_prompt_text
from ai.models.chat import ChatMode
from ai.rules.language import DEFAULT_LANGUAGE, normalize_language

_POLICY_YAML = "chat_policy.yaml"
_INTAKE_YAML = "intake_rules.yaml"

_POLICY_SECTIONS = (
    "global_principles",
    "no_signature_rule",
    "document_letter_rule",
    "after_confirmation_rule",
)


@lru_cache(maxsize=8)
def get_chat_policy(mode: ChatMode) -> str:
    """Política combinada para o modo de chat."""
    modes = load_prompt_mapping(_POLICY_YAML, "modes")
    mode_block = modes.get(mode) or modes["dashboard"]
    parts = [load_prompt_text(_POLICY_YAML, section) for section in _POLICY_SECTIONS]
    parts.append(mode_block)
    parts.append(load_prompt_text(_POLICY_YAML, "absolute_rule"))
    return "".join(parts)


def get_intake_rules(language: object) -> str:
    """Regras de intake no idioma pedido (EN quando não houver bloco)."""
    rules = load_prompt_mapping(_INTAKE_YAML, "rules")
    return rules.get(normalize_language(language)) or rules[DEFAULT_LANGUAGE]


def get_document_in_context_override() -> str:
    return load_prompt_text(_INTAKE_YAML, "document_in_context_override")


def get_document_type_detection() -> str:
    return load_prompt_text(_INTAKE_YAML, "document_type_detection")


def get_language_instruction(language_name: str) -> str:
    template = load_prompt_text(_POLICY_YAML, "language_instruction")
    return template.format(language_name=language_name)
