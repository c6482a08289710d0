"""Utilitários de IA.

Re-exporta sanitizadores de PII usados em logs.
"""

from ai.utils.sanitizer import contains_pii, log_snippet, sanitize_pii

__all__ = [
    "contains_pii",
    "log_snippet",
    "sanitize_pii",
]
