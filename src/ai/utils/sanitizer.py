"""Sanitização de PII antes de registrar trechos de texto em logs.

Responsabilidade:
- Mascarar e-mails, IBAN, Steuer-ID/codice fiscale e telefones
- Garantir determinismo (mesma entrada = mesma saída)

Trechos da saída do modelo vão para o log quando o validador dispara;
eles podem conter dados copiados da carta do usuário.
"""

from __future__ import annotations

import re
from re import Pattern
from typing import Final

# Ordem importa: padrões específicos antes do telefone genérico
_PATTERNS: Final[dict[str, Pattern[str]]] = {
    "email": re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b"),
    # IBAN: DE89 3704 0044 0532 0130 00 / IT60X0542811101000000123456
    "iban": re.compile(r"\b[A-Z]{2}\d{2}(?:\s?[A-Z0-9]{4}){3,7}(?:\s?[A-Z0-9]{1,3})?\b"),
    # Codice fiscale italiano
    "tax_id_it": re.compile(r"\b[A-Z]{6}\d{2}[A-Z]\d{2}[A-Z]\d{3}[A-Z]\b"),
    # Steuerliche Identifikationsnummer (11 dígitos, com ou sem espaços)
    "tax_id_de": re.compile(r"\b\d{2}\s?\d{3}\s?\d{3}\s?\d{3}\b"),
    "phone": re.compile(r"(?<!\w)\+?\d[\d\s/().-]{7,}\d\b"),
}

_MASKS: Final[dict[str, str]] = {
    "email": "[EMAIL]",
    "iban": "[IBAN]",
    "tax_id_it": "[TAX_ID]",
    "tax_id_de": "[TAX_ID]",
    "phone": "[PHONE]",
}


def sanitize_pii(text: str) -> str:
    """Mascara PII em texto.

    Exemplos:
        >>> sanitize_pii("Kontakt: max@example.de")
        'Kontakt: [EMAIL]'
    """
    if not text:
        return text

    result = text
    for pii_type, pattern in _PATTERNS.items():
        result = pattern.sub(_MASKS[pii_type], result)
    return result


def log_snippet(text: str, max_chars: int = 200) -> str:
    """Trecho inicial mascarado, seguro para logs."""
    if not text:
        return ""
    return sanitize_pii(text[:max_chars])


def contains_pii(text: str) -> bool:
    """Verifica se texto contém PII detectável."""
    if not text:
        return False
    return any(pattern.search(text) for pattern in _PATTERNS.values())
