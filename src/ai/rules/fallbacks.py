"""Fallbacks determinísticos e ajustes de cópia da resposta do assistente.

Garante resposta previsível quando a saída do modelo não pode ser usada
como está: documento já gerado, saudação obrigatória ausente, CTA de ação
indisponível, erro do provedor.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Final

from ai.models.chat import SupportedLanguage
from ai.rules.language import lookup, normalize_language

PROVIDER_ERROR_MESSAGE: Final[str] = "AI temporarily unavailable"
RATE_LIMIT_MESSAGE: Final[str] = "Rate limit exceeded. Please try again later."

ALREADY_GENERATED_MESSAGE: Final[str] = (
    "Il documento è già stato generato. Puoi usare Anteprima, Stampa, Email o Copia."
)

# Apresentação obrigatória do primeiro turno (com ou sem documento)
LEXORA_FIRST_GREETING: Final[Mapping[SupportedLanguage, str]] = {
    "IT": "Salve, sono LEXORA, il vostro assistente AI. Come posso aiutarla?",
    "DE": "Guten Tag, ich bin LEXORA, Ihr KI-Assistent. Wie kann ich Ihnen helfen?",
    "EN": "Hello, I am LEXORA, your AI assistant. How may I help you?",
    "FR": "Bonjour, je suis LEXORA, votre assistant IA. Comment puis-je vous aider?",
    "ES": "Hola, soy LEXORA, su asistente de IA. ¿Cómo puedo ayudarle?",
    "PL": "Dzień dobry, jestem LEXORA, Pana/Pani asystent AI. Jak mogę pomóc?",
    "RO": "Bună ziua, sunt LEXORA, asistentul dvs. AI. Cu ce vă pot ajuta?",
    "TR": "Merhaba, ben LEXORA, yapay zeka asistanınız. Size nasıl yardımcı olabilirim?",
    "AR": "مرحباً، أنا LEXORA، مساعدكم بالذكاء الاصطناعي. كيف يمكنني مساعدتكم؟",
    "UK": "Доброго дня, я LEXORA, ваш асистент з ШІ. Як я можу вам допомогти?",
    "RU": "Здравствуйте, я LEXORA, ваш ИИ-ассистент. Чем могу помочь?",
}

CTA_WHEN_READY: Final[Mapping[SupportedLanguage, str]] = {
    "IT": (
        "\n\n---\n✅ **Il documento è pronto.** Ora puoi inviarlo via email/PEC, stamparlo, "
        "esportarlo o archiviarlo nella pratica."
    ),
    "DE": (
        "\n\n---\n✅ **Das Dokument ist fertig!** Verwenden Sie den Button 'Dokument erstellen' "
        "unter dem Chat zum Speichern."
    ),
    "EN": (
        "\n\n---\n✅ **The document is ready!** Use the 'Create document' button below the "
        "chat to save it."
    ),
    "FR": (
        "\n\n---\n✅ **Le document est prêt!** Utilisez le bouton 'Créer document' sous le chat "
        "pour le sauvegarder."
    ),
    "ES": (
        "\n\n---\n✅ **¡El documento está listo!** Usa el botón 'Crear documento' debajo del "
        "chat para guardarlo."
    ),
    "TR": (
        "\n\n---\n✅ **Belge hazır!** Kaydetmek için sohbetin altındaki 'Belge oluştur' "
        "düğmesini kullanın."
    ),
    "RO": (
        "\n\n---\n✅ **Documentul este gata!** Folosește butonul 'Creează document' de sub chat "
        "pentru a-l salva."
    ),
    "RU": (
        "\n\n---\n✅ **Документ готов!** Используйте кнопку 'Создать документ' под чатом для "
        "сохранения."
    ),
    "UK": (
        "\n\n---\n✅ **Документ готовий!** Використовуйте кнопку 'Створити документ' під чатом "
        "для збереження."
    ),
    "PL": (
        "\n\n---\n✅ **Dokument jest gotowy!** Użyj przycisku 'Utwórz dokument' pod czatem, aby "
        "go zapisać."
    ),
    "AR": "\n\n---\n✅ **المستند جاهز!** استخدم زر 'إنشاء مستند' أسفل الدردشة لحفظه.",
}

NOT_READY_HINT: Final[Mapping[SupportedLanguage, str]] = {
    "IT": (
        "\n\nPer ora sto analizzando la situazione. Quando avrò il testo completo della "
        "lettera, potrai creare il documento."
    ),
    "DE": (
        "\n\nIch analysiere die Situation noch. Sobald der vollständige Briefentwurf fertig "
        "ist, können Sie das Dokument erstellen."
    ),
    "EN": (
        "\n\nI'm still analyzing the situation. Once the full formal letter is ready, you'll "
        "be able to create the document."
    ),
    "FR": (
        "\n\nJ'analyse encore la situation. Une fois la lettre formelle prête, vous pourrez "
        "créer le document."
    ),
    "ES": (
        "\n\nTodavía estoy analizando la situación. Cuando la carta formal esté lista, podrás "
        "crear el documento."
    ),
}

_UNAVAILABLE_CTA_RES: Final[tuple[re.Pattern[str], ...]] = (
    re.compile(
        r".*\b(apertura\s+del\s+fascicolo|apri(?:re)?\s+un\s+fascicolo|aprire\s+un\s+fascicolo"
        r"|apri(?:re)?\s+(?:una\s+)?pratica|aprire\s+(?:una\s+)?pratica|dashboard)\b.*\n?",
        re.IGNORECASE,
    ),
    re.compile(
        r".*\b(crea(?:re)?\s+documento|crea(?:re)?\s+il\s+documento|usa\s+il\s+pulsante"
        r"|pulsante\s+['\"]?crea\s+documento['\"]?)\b.*\n?",
        re.IGNORECASE,
    ),
    re.compile(
        r".*\b(create\s+(a\s+)?case|open\s+(a\s+)?case|create\s+document|use\s+the\s+button)\b.*\n?",
        re.IGNORECASE,
    ),
    re.compile(r".*\b(dossier|expediente|dosar)\b.*\b(créer|crear|create)\b.*\n?", re.IGNORECASE),
)

_PDF_ONLY_IT_RES: Final[tuple[re.Pattern[str], ...]] = (
    re.compile(r"\bversione\s+ufficiale\s+in\s+pdf\b", re.IGNORECASE),
    re.compile(r"\bpdf\s+pronto\s+per\s+la\s+stampa\b", re.IGNORECASE),
)
_PDF_ONLY_IT_REPLACEMENT: Final[str] = (
    "Il documento è pronto. Ora puoi inviarlo via email/PEC, stamparlo, esportarlo o "
    "archiviarlo nella pratica"
)
_PDF_ONLY_GENERIC_RE: Final[re.Pattern[str]] = re.compile(
    r"\b(only|solo|nur)\s+(as\s+)?pdf\b", re.IGNORECASE
)

# Primeiro turno nunca diz "não encontrei" nem pede endereço
_FIRST_MESSAGE_FORBIDDEN_RES: Final[tuple[re.Pattern[str], ...]] = (
    re.compile(r"non ho trovato", re.IGNORECASE),
    re.compile(r"I didn't find", re.IGNORECASE),
    re.compile(r"I couldn't find", re.IGNORECASE),
    re.compile(r"nessuna informazione", re.IGNORECASE),
    re.compile(r"indicami l'indirizzo", re.IGNORECASE),
    re.compile(r"please provide the address", re.IGNORECASE),
    re.compile(r"could you provide", re.IGNORECASE),
    re.compile(r"puoi indicarmi", re.IGNORECASE),
    re.compile(r"non dispongo di informazioni", re.IGNORECASE),
)
_GREETING_PREFIX_CHARS: Final[int] = 20


def get_first_greeting(language: object) -> str:
    return lookup(LEXORA_FIRST_GREETING, language)


def strip_unavailable_ctas(text: str) -> str:
    """Remove linhas que sugerem ações indisponíveis sem rascunho pronto."""
    out = text
    for pattern in _UNAVAILABLE_CTA_RES:
        out = pattern.sub("", out)
    return re.sub(r"\n{3,}", "\n\n", out).strip()


def normalize_assistant_copy(language: object, text: str) -> str:
    """Nunca sugerir que o documento existe só em PDF."""
    out = (text or "").rstrip()
    if not out:
        return out
    for pattern in _PDF_ONLY_IT_RES:
        out = pattern.sub(_PDF_ONLY_IT_REPLACEMENT, out)
    if normalize_language(language) == "IT":
        out = _PDF_ONLY_GENERIC_RE.sub("in vari formati (email, stampa, export, archivio)", out)
    return out


def append_ready_cta(language: object, text: str) -> str:
    return normalize_assistant_copy(language, text + lookup(CTA_WHEN_READY, language))


def append_not_ready_hint(language: object, text: str) -> str:
    stripped = strip_unavailable_ctas(text)
    return (stripped + lookup(NOT_READY_HINT, language)).strip()


def enforce_first_message_greeting(language: object, text: str, *, has_document: bool) -> str:
    """Garante que o primeiro turno comece com a apresentação LEXORA.

    Se a resposta não começa com a saudação ou contém frase proibida,
    é substituída por saudação + (linha de documento lido) + pergunta.
    """
    greeting = get_first_greeting(language)
    trimmed = text.strip()
    starts_with_greeting = trimmed.startswith(greeting) or trimmed.lower().startswith(
        greeting.lower()[:_GREETING_PREFIX_CHARS]
    )
    has_forbidden = any(pattern.search(text) for pattern in _FIRST_MESSAGE_FORBIDDEN_RES)
    if starts_with_greeting and not has_forbidden:
        return text

    is_italian = normalize_language(language) == "IT"
    doc_line = ""
    if has_document:
        doc_line = (
            "Ho letto il documento e sono pronto ad aiutarla.\n\n"
            if is_italian
            else "I have read the document and am ready to help.\n\n"
        )
    closing = "Come posso aiutarla?" if is_italian else "How may I help you?"
    return f"{greeting}\n\n{doc_line}{closing}"
