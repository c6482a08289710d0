"""Scope gate: restringe o assistente a assuntos burocráticos/jurídicos.

Heurística determinística (sem LLM) com duas listas disjuntas de padrões.
As listas são ponto de partida ajustável, não contrato exaustivo.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Final

from ai.config.settings import get_ai_settings
from ai.models.chat import SupportedLanguage
from ai.models.scope import ScopeVerdict
from ai.rules.language import lookup

_IN_SCOPE_PATTERNS: Final[tuple[re.Pattern[str], ...]] = (
    # DE: instituições e tipos de documento
    re.compile(
        r"\b(finanzamt|jobcenter|arbeitsagentur|ausländerbehörde|bürgeramt|zulassungsstelle"
        r"|familienkasse|zoll|gericht|amtsgericht|anwalt|bescheid|widerspruch|einspruch"
        r"|frist|formular|antrag|kündigung|mahnung|vollstreckung|schufa|rechnung|vertrag"
        r"|behörde|amt)\b",
        re.IGNORECASE,
    ),
    # IT
    re.compile(
        r"\b(lettera|ufficio|scadenza|modulo|istanza|ricorso|diffida|raccomandata|pec|inps"
        r"|agenzia\s+delle\s+entrate)\b",
        re.IGNORECASE,
    ),
    # EN
    re.compile(
        r"\b(office|deadline|form|appeal|notice|letter|administration|authority)\b",
        re.IGNORECASE,
    ),
)

_OUT_OF_SCOPE_PATTERNS: Final[tuple[re.Pattern[str], ...]] = (
    # receitas/comida (inclui compostos alemães)
    re.compile(
        r"\b(ricetta|cucin|patate|kartoffel|kartoffelsalat|pizza|pasta|torta|dolce"
        r"|ingredienti|rezept|kochen|backen)\b",
        re.IGNORECASE,
    ),
    # entretenimento
    re.compile(
        r"\b(film|movie|serie|netflix|music|song|tiktok|capcut|youtube|spotify|kino)\b",
        re.IGNORECASE,
    ),
    # games/fitness
    re.compile(
        r"\b(videogioco|gaming|ps5|xbox|workout|gym|dieta|calorie|fitness)\b",
        re.IGNORECASE,
    ),
)

SCOPE_REFUSAL_MESSAGES: Final[Mapping[SupportedLanguage, str]] = {
    "IT": (
        "Mi dispiace, posso aiutarti solo con questioni legali e amministrative. Posso "
        "assisterti con contratti, lettere formali, consulenza legale o pratiche burocratiche. "
        "Hai bisogno di aiuto con uno di questi argomenti?"
    ),
    "DE": (
        "Es tut mir leid, ich kann nur bei rechtlichen und administrativen Angelegenheiten "
        "helfen. Ich kann Sie bei Verträgen, formellen Schreiben, Rechtsberatung oder "
        "bürokratischen Verfahren unterstützen. Benötigen Sie Hilfe zu einem dieser Themen?"
    ),
    "EN": (
        "I'm sorry, I can only assist with legal and administrative matters. I can help with "
        "contracts, formal letters, legal advice or bureaucratic procedures. Do you need help "
        "with any of these?"
    ),
    "FR": (
        "Je suis désolé, je ne peux vous aider qu'en matière juridique et administrative. Je "
        "peux vous assister pour les contrats, lettres formelles, conseil juridique ou "
        "démarches administratives. Avez-vous besoin d'aide sur l'un de ces sujets ?"
    ),
    "ES": (
        "Lo siento, solo puedo ayudarte con asuntos legales y administrativos. Puedo asistirte "
        "con contratos, cartas formales, asesoramiento legal o trámites burocráticos. "
        "¿Necesitas ayuda con alguno de estos temas?"
    ),
    "PL": (
        "Przepraszam, mogę pomagać tylko w sprawach prawnych i administracyjnych. Mogę pomóc "
        "w zakresie umów, pism formalnych, porad prawnych lub procedur urzędowych. Czy "
        "potrzebujesz pomocy w którymś z tych obszarów?"
    ),
    "RO": (
        "Îmi pare rău, vă pot ajuta doar în materie juridică și administrativă. Vă pot asista "
        "la contracte, scrisori formale, consultanță juridică sau proceduri birocratice. "
        "Aveți nevoie de ajutor pentru unul dintre aceste subiecte?"
    ),
    "TR": (
        "Üzgünüm, yalnızca hukuki ve idari konularda yardımcı olabilirim. Sözleşmeler, resmi "
        "yazılar, hukuki danışmanlık veya bürokratik işlemler konusunda size yardımcı "
        "olabilirim. Bu konulardan biriyle ilgili yardıma ihtiyacınız var mı?"
    ),
    "AR": (
        "أعتذر، يمكنني المساعدة فقط في المسائل القانونية والإدارية. يمكنني مساعدتك في العقود "
        "والرسائل الرسمية والاستشارات القانونية أو الإجراءات الإدارية. هل تحتاج مساعدة في أحد "
        "هذه المواضيع؟"
    ),
    "UK": (
        "Вибачте, я можу допомагати лише з юридичними та адміністративними питаннями. Можу "
        "допомогти з договорами, офіційними листами, юридичними консультаціями чи "
        "бюрократичними процедурами. Чи потрібна вам допомога з одним із цих питань?"
    ),
    "RU": (
        "Извините, я могу помогать только по юридическим и административным вопросам. Могу "
        "помочь с договорами, официальными письмами, юридическими консультациями или "
        "бюрократическими процедурами. Нужна ли вам помощь по одному из этих вопросов?"
    ),
}

# Tabela de autoteste do scope gate (mensagem, esperado)
SELF_TEST_CASES: Final[tuple[tuple[str, bool], ...]] = (
    ("Finanzamt Bescheid Frist Einspruch", True),
    ("Patate al forno ricetta", False),
    ("Kartoffelsalat rezept", False),
    ("Ho una lettera e non capisco", True),
    ("Come fare ricorso contro una multa", True),
    ("Netflix film consiglio", False),
    ("Jobcenter Antrag ausfüllen", True),
    ("Pizza margherita ingredients", False),
    ("Widerspruch gegen Bescheid", True),
)


def check_scope(message: object, *, short_message_chars: int | None = None) -> ScopeVerdict:
    """Classifica a mensagem como dentro/fora do escopo.

    Tabela de decisão:
    - só padrões fora de escopo → recusa (high)
    - algum padrão em escopo → aceita (high se >= 2 padrões, senão medium),
      mesmo com termos fora de escopo na mensagem
    - nenhum sinal → aceita (low)

    Args:
        message: Texto do usuário
        short_message_chars: Limite abaixo do qual a mensagem passa com low
            (padrão: settings.limits.scope_short_message_chars)
    """
    if not isinstance(message, str) or not message:
        return ScopeVerdict(in_scope=False, confidence="high", reason="empty_message")

    threshold = short_message_chars
    if threshold is None:
        threshold = get_ai_settings().limits.scope_short_message_chars

    if len(message.strip()) < threshold:
        return ScopeVerdict(in_scope=True, confidence="low", reason="short_message")

    in_hits = sum(1 for pattern in _IN_SCOPE_PATTERNS if pattern.search(message))
    out_hits = sum(1 for pattern in _OUT_OF_SCOPE_PATTERNS if pattern.search(message))

    if out_hits > 0 and in_hits == 0:
        return ScopeVerdict(in_scope=False, confidence="high", reason="out_of_scope_detected")

    if in_hits > 0:
        confidence = "high" if in_hits >= 2 else "medium"
        return ScopeVerdict(in_scope=True, confidence=confidence, reason="in_scope_detected")

    return ScopeVerdict(in_scope=True, confidence="low", reason="no_clear_signal")


def get_refusal_message(language: object = None) -> str:
    """Mensagem localizada de recusa para pedidos fora de escopo."""
    return lookup(SCOPE_REFUSAL_MESSAGES, language)


def run_scope_self_test() -> list[dict[str, object]]:
    """Executa a tabela de autoteste (diagnóstico operacional)."""
    results: list[dict[str, object]] = []
    for message, expected in SELF_TEST_CASES:
        got = check_scope(message).in_scope
        results.append(
            {"message": message, "expected": expected, "got": got, "passed": got == expected}
        )
    return results
