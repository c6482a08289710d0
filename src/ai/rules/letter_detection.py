"""Detecção de carta formal na saída do modelo.

Heurísticas estruturais (assunto, saudação, fecho), não um parser: estilos
incomuns de carta podem gerar falso positivo/negativo. As listas de
marcadores são ajustáveis.
"""

from __future__ import annotations

import re
from typing import Final

from ai.config.settings import get_ai_settings
from ai.models.document import DraftExtraction

_LETTER_TAG_RE: Final[re.Pattern[str]] = re.compile(r"\[LETTER\]", re.IGNORECASE)

# Marcadores frouxos (usados no detector de prontidão)
_SUBJECT_MARKER_RE: Final[re.Pattern[str]] = re.compile(
    r"\b(betreff|oggetto|subject|objet|asunto)\s*:", re.IGNORECASE
)
_SALUTATION_MARKER_RE: Final[re.Pattern[str]] = re.compile(
    r"\b(sehr\s+geehrte|gentile|dear|cher|estimado)", re.IGNORECASE
)
_CLOSING_MARKER_RE: Final[re.Pattern[str]] = re.compile(
    r"\b(mit\s+freundlichen\s+grüßen|cordiali\s+saluti|sincerely|cordialement|atentamente)",
    re.IGNORECASE,
)

# Marcadores estritos (usados na extração do rascunho)
SUBJECT_RE: Final[re.Pattern[str]] = re.compile(
    r"^\s*(betreff|oggetto|subject|objet|asunto)\s*:\s*.+$", re.IGNORECASE | re.MULTILINE
)
OPENING_RE: Final[re.Pattern[str]] = re.compile(
    r"^\s*(egregio|gentile|spett\.?\s*le|spett\.?\s*li|spett\.?\s*mo"
    r"|alla\s+cortese\s+attenzione|sehr\s+geehrte[rn]?|geehrte\s+damen?"
    r"|dear\s+(sir|madam|mr|ms|mrs)|to\s+whom\s+it\s+may\s+concern|an\s*:|to\s*:|a\s*:)\b",
    re.IGNORECASE | re.MULTILINE,
)
CLOSING_RE: Final[re.Pattern[str]] = re.compile(
    r"(mit\s+freundlichen\s+grüßen|hochachtungsvoll|cordiali\s+saluti|distinti\s+saluti"
    r"|con\s+osservanza|sincerely|best\s+regards|kind\s+regards|cordialement|salutations"
    r"|atentamente)\b",
    re.IGNORECASE,
)
_SIGNATURE_RE: Final[re.Pattern[str]] = re.compile(
    r"^\s*(firma|unterschrift|signature)\b", re.IGNORECASE | re.MULTILINE
)

# Frases de "ainda analisando": resposta de chat, não carta
_CHAT_JUNK_RE: Final[re.Pattern[str]] = re.compile(
    r"\b(per\s+ora\s+sto\s+analizzando|quando\s+avrò\s+il\s+testo\s+completo"
    r"|apri\s+un\s+fascicolo|usa\s+il\s+pulsante|i'm\s+still\s+analyzing"
    r"|once\s+the\s+full\s+letter\s+is\s+ready)\b",
    re.IGNORECASE,
)

_LEADING_SUBJECT_RE: Final[re.Pattern[str]] = re.compile(
    r"^\s*(betreff|oggetto|subject|objet|asunto)\s*:\s*.*\n+", re.IGNORECASE
)
_SUBJECT_VALUE_RE: Final[re.Pattern[str]] = re.compile(
    r"^\s*(betreff|oggetto|subject|objet|asunto)\s*:\s*(.+)$", re.IGNORECASE | re.MULTILINE
)

_NEXT_STEPS_WORDS: Final[str] = (
    r"(prossimi\s+passi|next\s+steps|nächste\s+schritte|etapes\s+suivantes"
    r"|étapes\s+suivantes|pasos\s+siguientes|sonraki\s+adımlar|nastupni\s+kroky"
    r"|наступні\s+кроки|следующие\s+шаги|الخطوات\s+التالي(?:ة|ه))"
)
_CUT_PATTERNS: Final[tuple[re.Pattern[str], ...]] = (
    re.compile(
        r"^\s*#{1,6}\s*" + _NEXT_STEPS_WORDS + r"\b[\s\S]*$", re.IGNORECASE | re.MULTILINE
    ),
    re.compile(r"^\s*\*{0,2}" + _NEXT_STEPS_WORDS + r"\b.*$", re.IGNORECASE | re.MULTILINE),
    re.compile(r"^\s*---\s*$", re.MULTILINE),
)
_CODE_FENCE_RE: Final[re.Pattern[str]] = re.compile(r"```[\s\S]*?```")
_CTA_LINE_RE: Final[re.Pattern[str]] = re.compile(r"^\s*(✅|➕|\+)\s*.*$", re.MULTILINE)
_APP_LINE_RE: Final[re.Pattern[str]] = re.compile(
    r"^\s*.*\b(lexora|pulsante|sotto la chat|below the chat|unter dem chat)\b.*$",
    re.IGNORECASE | re.MULTILINE,
)
_TRAILING_SECTION_RES: Final[tuple[re.Pattern[str], ...]] = (
    re.compile(r"\n\s*#{2,6}\s+"),
    re.compile(r"\n\s*Note\s*[:\-]", re.IGNORECASE),
    re.compile(r"\n\s*###\s*"),
)

_LINES_KEPT_AFTER_CLOSING: Final[int] = 8
_TITLE_MAX_CHARS: Final[int] = 80


def looks_like_generated_document(candidate_text: object, *, min_chars: int | None = None) -> bool:
    """Classifica a saída do modelo como carta formal concluída.

    - tag explícita [LETTER] → True
    - senão: >= 2 de (assunto, saudação, fecho) e tamanho > min_chars
    """
    if not isinstance(candidate_text, str) or not candidate_text:
        return False

    if _LETTER_TAG_RE.search(candidate_text):
        return True

    threshold = min_chars
    if threshold is None:
        threshold = get_ai_settings().limits.readiness_min_chars

    markers = (_SUBJECT_MARKER_RE, _SALUTATION_MARKER_RE, _CLOSING_MARKER_RE)
    marker_count = sum(1 for marker in markers if marker.search(candidate_text))
    return marker_count >= 2 and len(candidate_text) > threshold


def looks_like_formal_letter(text: str, *, min_chars: int | None = None) -> bool:
    """Estrutura formal mínima (evita que resumos liberem o rascunho)."""
    threshold = min_chars
    if threshold is None:
        threshold = get_ai_settings().limits.strict_draft_min_chars
    if not text or len(text) < threshold:
        return False

    has_opening = re.search(
        r"\b(egregio|gentile|spett\.?\s*(le|li|mo)|sehr\s+geehrte|dear\s+(sir|madam|mr|ms)"
        r"|to\s+whom|alla\s+cortese|geehrte\s+damen)",
        text,
        re.IGNORECASE,
    )
    has_closing = re.search(
        r"\b(cordiali\s+saluti|distinti\s+saluti|mit\s+freundlichen\s+grüßen|sincerely"
        r"|best\s+regards|kind\s+regards|hochachtungsvoll|con\s+osservanza)",
        text,
        re.IGNORECASE,
    )
    has_subject = _SUBJECT_MARKER_RE.search(text)
    return sum(1 for found in (has_opening, has_closing, has_subject) if found) >= 2


def extract_subject_title(text: str) -> str | None:
    """Valor da linha de assunto (para título automático do caso)."""
    match = _SUBJECT_VALUE_RE.search(text)
    if not match:
        return None
    subject = re.sub(r"[\n\r]+", " ", match.group(2).strip())[:_TITLE_MAX_CHARS]
    return subject or None


def extract_strict_draft(content: str | None, *, min_chars: int | None = None) -> DraftExtraction:
    """Extrai apenas o corpo da carta formal da resposta do modelo.

    Exige >= 2 marcadores (assunto, abertura, fecho/assinatura), começa na
    abertura, remove seções anexas e rejeita texto de chat ou curto demais.
    """
    threshold = min_chars
    if threshold is None:
        threshold = get_ai_settings().limits.strict_draft_min_chars

    text = (content or "").replace("\r\n", "\n").strip()
    normalized = _strip_leading_subject(text)

    has_subject = bool(SUBJECT_RE.search(text))
    has_opening = bool(OPENING_RE.search(normalized))
    has_closing = bool(CLOSING_RE.search(normalized) or _SIGNATURE_RE.search(normalized))
    if sum((has_subject, has_opening, has_closing)) < 2:
        return DraftExtraction()

    draft = normalized
    opening = OPENING_RE.search(normalized)
    if opening:
        draft = normalized[opening.start() :].strip()

    draft = _sanitize_extracted_draft(draft)
    draft = _cut_after_closing(draft)

    if _CHAT_JUNK_RE.search(draft):
        return DraftExtraction()
    if not draft or len(draft) < threshold:
        return DraftExtraction()

    return DraftExtraction(draft_ready=True, draft=draft, title=extract_subject_title(text))


def _strip_leading_subject(raw: str) -> str:
    out = raw.lstrip()
    for _ in range(3):
        stripped = _LEADING_SUBJECT_RE.sub("", out, count=1).lstrip()
        if stripped == out:
            break
        out = stripped
    return out


def _sanitize_extracted_draft(raw: str) -> str:
    text = raw.strip()
    if not text:
        return text

    text = _CODE_FENCE_RE.sub("", text).strip()

    cut_positions = [match.start() for p in _CUT_PATTERNS if (match := p.search(text))]
    if cut_positions:
        text = text[: min(cut_positions)].strip()

    text = _CTA_LINE_RE.sub("", text)
    text = _APP_LINE_RE.sub("", text)
    return text.strip()


def _cut_after_closing(text: str) -> str:
    out = text
    closing = CLOSING_RE.search(out)
    if closing:
        end = closing.end()
        after = "\n".join(out[end:].split("\n")[:_LINES_KEPT_AFTER_CLOSING])
        out = (out[:end] + after).strip()

    for pattern in _TRAILING_SECTION_RES:
        out = pattern.split(out, maxsplit=1)[0]
    return out.strip()
