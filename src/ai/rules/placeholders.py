"""Hard-stop de placeholders entre colchetes ([Luogo], [CAP, Città]).

Rascunho com placeholder nunca é tratado como pronto para impressão:
o usuário recebe uma pergunta pedindo os dados faltantes. Assinatura
nunca é pedida (o cliente assina o papel impresso).
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Final

from ai.models.chat import SupportedLanguage
from ai.rules.language import lookup

_SYSTEM_MARKERS: Final[frozenset[str]] = frozenset(
    {
        "[LETTER]",
        "[/LETTER]",
        "[BRIEF]",
        "[/BRIEF]",
        "[LETTRE]",
        "[/LETTRE]",
        "[CARTA]",
        "[/CARTA]",
        "[SIGNATURE]",
        "[FIRMA]",
        "[UNTERSCHRIFT]",
        "[FIRMA DEL MITTENTE]",
        "[SIGNATURE DU DESTINATAIRE]",
    }
)

_BRACKET_RE: Final[re.Pattern[str]] = re.compile(r"\[[^\]]+\]")
_SIGNATURE_TOKEN_RE: Final[re.Pattern[str]] = re.compile(
    r"^\[(SIGNATURE|FIRMA|UNTERSCHRIFT|SIGNATURA|PARAFA)\s*\]$"
)
_SIGNATURE_ANY_RE: Final[re.Pattern[str]] = re.compile(r"^\[.*(FIRMA|SIGNATURE|UNTERSCHRIFT).*\]$")

SIGNATURE_LINE: Final[str] = "\n________________\n"

_SIGNATURE_PLACEHOLDER_RES: Final[tuple[re.Pattern[str], ...]] = (
    re.compile(r"\s*\[Signature\]\s*", re.IGNORECASE),
    re.compile(r"\s*\[Firma\]\s*", re.IGNORECASE),
    re.compile(r"\s*\[Unterschrift\]\s*", re.IGNORECASE),
    re.compile(r"\s*\[Firma del mittente\]\s*", re.IGNORECASE),
    re.compile(r"\s*\[[^\]]*?(?:signature|firma|unterschrift)[^\]]*?\]\s*", re.IGNORECASE),
)

PLACEHOLDER_BLOCK_MESSAGE: Final[Mapping[SupportedLanguage, str]] = {
    "IT": (
        "Mi mancano alcuni dati per creare una bozza pronta da stampare. Indicami (o dimmi "
        "che vuoi ometterli se non disponibili):"
    ),
    "DE": (
        "Mir fehlen noch einige Angaben, um einen druckfertigen Entwurf zu erstellen. Bitte "
        "nenne (oder sag, dass wir sie weglassen sollen):"
    ),
    "EN": (
        "I'm missing some details to produce a print-ready draft. Please provide (or tell me "
        "to omit if not available):"
    ),
    "FR": (
        "Il me manque certaines informations pour générer un brouillon prêt à imprimer. "
        "Merci de préciser (ou me dire de les omettre):"
    ),
    "ES": (
        "Me faltan algunos datos para crear un borrador listo para imprimir. Indícame (o "
        "dime que lo omita si no está disponible):"
    ),
    "PL": (
        "Brakuje mi kilku danych, aby przygotować wersję gotową do wydruku. Podaj (albo "
        "powiedz, że mamy pominąć):"
    ),
    "RO": (
        "Îmi lipsesc câteva date pentru a genera o ciornă gata de tipărit. Te rog să le "
        "indici (sau să spui că le omitem):"
    ),
    "TR": (
        "Baskıya hazır bir taslak oluşturmak için bazı bilgiler eksik. Lütfen belirtin "
        "(yoksa çıkarabileceğimi söyleyin):"
    ),
    "AR": "تنقصني بعض البيانات لإعداد مسودة جاهزة للطباعة. يرجى تزويدي بها (أو أخبرني إن كنت تريد حذفها):",
    "UK": (
        "Мені бракує деяких даних, щоб створити чернетку, готову до друку. Будь ласка, "
        "надайте (або скажіть, що пропустити):"
    ),
    "RU": (
        "Мне не хватает некоторых данных, чтобы создать черновик, готовый к печати. "
        "Пожалуйста, укажите (или скажите, что можно опустить):"
    ),
}

_QUESTION_BULLETS: Final[int] = 3


def _is_excluded_placeholder(token: str) -> bool:
    upper = token.upper().strip()
    if upper in _SYSTEM_MARKERS:
        return True
    return bool(_SIGNATURE_TOKEN_RE.match(upper) or _SIGNATURE_ANY_RE.match(upper))


def extract_bracket_placeholders(text: str | None, max_items: int = 6) -> list[str]:
    """Placeholders reais, sem duplicatas, na ordem em que aparecem."""
    if not text:
        return []
    found: list[str] = []
    for token in _BRACKET_RE.findall(text):
        if _is_excluded_placeholder(token):
            continue
        normalized = token.strip()
        if normalized not in found:
            found.append(normalized)
        if len(found) >= max_items:
            break
    return found


def contains_bracket_placeholders(text: str | None) -> bool:
    return bool(extract_bracket_placeholders(text, max_items=1))


def replace_signature_placeholders(text: str) -> str:
    """[Signature]/[Firma]/[Unterschrift] → linha para assinar à mão."""
    if not text:
        return text
    out = text
    for pattern in _SIGNATURE_PLACEHOLDER_RES:
        out = pattern.sub(SIGNATURE_LINE, out)
    return out


def build_placeholder_question(language: object, raw_assistant: str) -> str:
    """Pergunta localizada listando até 3 dados faltantes."""
    intro = lookup(PLACEHOLDER_BLOCK_MESSAGE, language)
    placeholders = extract_bracket_placeholders(raw_assistant, 6)
    if not placeholders:
        return intro
    bullets = "\n".join(f"• {item}" for item in placeholders[:_QUESTION_BULLETS])
    return f"{intro}\n{bullets}"
