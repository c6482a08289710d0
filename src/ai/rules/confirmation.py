"""Gate de confirmação antes de gerar o documento final.

Matching propositalmente generoso: um "ok" fora de contexto conta como
confirmação. Falso positivo é aceito para não bloquear usuários legítimos
nos 11 idiomas sem estado por idioma.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Final

from ai.models.chat import ChatTurn, ConversationStatus

# Comparação case-insensitive: tudo em minúsculas
CONFIRMATION_KEYWORDS: Final[tuple[str, ...]] = (
    # IT
    "confermo",
    "conferma",
    "sì procedi",
    "si procedi",
    "vai avanti",
    "genera",
    "crea il documento",
    "procedi",
    # DE
    "bestätigen",
    "bestätige",
    "ja weiter",
    "erstellen",
    "dokument erstellen",
    "weiter",
    "mach weiter",
    # EN
    "confirm",
    "confirmed",
    "yes proceed",
    "go ahead",
    "generate",
    "create the document",
    "proceed",
    "yes please",
    "please proceed",
    # FR
    "confirmer",
    "confirme",
    "oui continuer",
    "créer le document",
    "continuer",
    # ES
    "confirmo",
    "confirmar",
    "sí continuar",
    "crear el documento",
    "continuar",
    # demais idiomas: afirmativos básicos
    "ok",
    "okay",
    "yes",
    "ja",
    "oui",
    "sí",
    "si",
    "да",
    "tak",
    "evet",
    "da",
    "sim",
)

_SHORT_AFFIRMATIVE_RE: Final[re.Pattern[str]] = re.compile(
    r"^(ok|okay|yes|ja|oui|sì|si|да|tak|sim|evet|da|y|yep|yup|sure|alright|fine|agreed"
    r"|perfetto|perfect|gut|bien|bene|genau|esatto|exactly|d'accordo|einverstanden)"
    r"[\s.,!?]*$",
    re.IGNORECASE,
)

# Confirmações curtas que dispensam o scope gate (mensagem inteira)
_SHORT_CONFIRMATION_RE: Final[re.Pattern[str]] = re.compile(
    r"^(ok|okay|sì|si|yes|ja|oui|d'accordo|einverstanden|procedi|proceed|fallo|mach das"
    r"|do it|genera|generate|scrivi|schreibe|write)[\s.,!?]*$",
    re.IGNORECASE,
)

# Marcadores do bloco de resumo (cabeçalho 📋 e CTA ✅)
_SUMMARY_HEADER_RE: Final[re.Pattern[str]] = re.compile(r"📋\s*\*\*")
_SUMMARY_CTA_RE: Final[re.Pattern[str]] = re.compile(r"✅\s*\*\*")

_CONFIRMED_STATUSES: Final[frozenset[str]] = frozenset({"confirmed", "document_generated"})


def has_user_confirmed(message: object) -> bool:
    """Detecta se a mensagem autoriza a geração do documento.

    1. qualquer palavra-chave contida na mensagem → True
    2. mensagem inteira é um afirmativo curto ("ok!", "ja.") → True
    3. caso contrário → False
    """
    if not isinstance(message, str):
        return False
    lower = message.lower().strip()
    if not lower:
        return False

    if any(keyword in lower for keyword in CONFIRMATION_KEYWORDS):
        return True

    return bool(_SHORT_AFFIRMATIVE_RE.match(lower))


def is_short_confirmation(message: str) -> bool:
    """Mensagem é só um "ok/procedi/do it" (pula o scope gate)."""
    return bool(_SHORT_CONFIRMATION_RE.match(message.strip()))


def was_previous_message_summary(history: Sequence[ChatTurn]) -> bool:
    """Última mensagem do assistente foi um bloco de resumo?"""
    for turn in reversed(history):
        if turn.role == "assistant":
            return bool(
                _SUMMARY_HEADER_RE.search(turn.content) and _SUMMARY_CTA_RE.search(turn.content)
            )
    return False


def is_generation_allowed(
    history: Sequence[ChatTurn],
    message: str,
    status: ConversationStatus | None = None,
) -> bool:
    """Geração liberada por status salvo ou por resumo + confirmação."""
    if status in _CONFIRMED_STATUSES:
        return True
    return was_previous_message_summary(history) and has_user_confirmed(message)
