"""Regras determinísticas do chat de documentos.

Re-exporta guardrails, detectores e normalizadores.
"""

from ai.rules.confirmation import (
    has_user_confirmed,
    is_generation_allowed,
    was_previous_message_summary,
)
from ai.rules.document_guardrails import (
    DOCUMENT_TEXT_SYSTEM_LABEL,
    SAFE_FALLBACK_MESSAGE,
    expect_document_guardrail,
    validate_output_forbidden_phrases,
)
from ai.rules.language import (
    DEFAULT_LANGUAGE,
    LOCALE_MAP,
    SUPPORTED_LANGUAGES,
    get_locale,
    lookup,
    normalize_language,
)
from ai.rules.letter_detection import (
    extract_strict_draft,
    looks_like_formal_letter,
    looks_like_generated_document,
)
from ai.rules.placeholders import (
    build_placeholder_question,
    contains_bracket_placeholders,
    extract_bracket_placeholders,
    replace_signature_placeholders,
)
from ai.rules.scope_gate import check_scope, get_refusal_message, run_scope_self_test

__all__ = [
    "DEFAULT_LANGUAGE",
    "DOCUMENT_TEXT_SYSTEM_LABEL",
    "LOCALE_MAP",
    "SAFE_FALLBACK_MESSAGE",
    "SUPPORTED_LANGUAGES",
    "build_placeholder_question",
    "check_scope",
    "contains_bracket_placeholders",
    "expect_document_guardrail",
    "extract_bracket_placeholders",
    "extract_strict_draft",
    "get_locale",
    "get_refusal_message",
    "has_user_confirmed",
    "is_generation_allowed",
    "looks_like_formal_letter",
    "looks_like_generated_document",
    "lookup",
    "normalize_language",
    "replace_signature_placeholders",
    "run_scope_self_test",
    "validate_output_forbidden_phrases",
    "was_previous_message_summary",
]
