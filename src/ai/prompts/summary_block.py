"""Bloco de resumo localizado exibido antes da geração do documento.

Formatação pura: campos vazios são omitidos e idiomas desconhecidos
usam EN. O cabeçalho (📋 **) e o CTA (✅ **) são os marcadores que
`was_previous_message_summary` procura no turno seguinte.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from datetime import date
from typing import Final

from ai.config.settings import get_ai_settings
from ai.models.chat import SupportedLanguage
from ai.models.document import CaseContext, DocumentSummary, SenderProfile
from ai.rules.language import lookup

_Table = Mapping[SupportedLanguage, str]

SUMMARY_HEADERS: Final[_Table] = {
    "IT": "📋 **RIEPILOGO DATI PER IL DOCUMENTO:**",
    "DE": "📋 **ZUSAMMENFASSUNG DER DOKUMENTDATEN:**",
    "EN": "📋 **DOCUMENT DATA SUMMARY:**",
    "FR": "📋 **RÉSUMÉ DES DONNÉES DU DOCUMENT:**",
    "ES": "📋 **RESUMEN DE DATOS DEL DOCUMENTO:**",
    "TR": "📋 **BELGE VERİLERİ ÖZETİ:**",
    "RO": "📋 **REZUMATUL DATELOR DOCUMENTULUI:**",
    "PL": "📋 **PODSUMOWANIE DANYCH DOKUMENTU:**",
    "AR": "📋 **ملخص بيانات المستند:**",
    "RU": "📋 **СВОДКА ДАННЫХ ДОКУМЕНТА:**",
    "UK": "📋 **ПІДСУМОК ДАНИХ ДОКУМЕНТА:**",
}

CONFIRMATION_PROMPTS: Final[_Table] = {
    "IT": '\n\n✅ **Per generare il documento, rispondi con "CONFERMO" o "OK".**',
    "DE": '\n\n✅ **Um das Dokument zu erstellen, antworte mit "BESTÄTIGEN" oder "OK".**',
    "EN": '\n\n✅ **To generate the document, reply with "CONFIRM" or "OK".**',
    "FR": '\n\n✅ **Pour générer le document, répondez avec "CONFIRMER" ou "OK".**',
    "ES": '\n\n✅ **Para generar el documento, responde con "CONFIRMO" o "OK".**',
    "TR": '\n\n✅ **Belgeyi oluşturmak için "ONAYLIYORUM" veya "OK" yazın.**',
    "RO": '\n\n✅ **Pentru a genera documentul, răspunde cu "CONFIRM" sau "OK".**',
    "PL": '\n\n✅ **Aby wygenerować dokument, odpowiedz "POTWIERDZAM" lub "OK".**',
    "AR": '\n\n✅ **لإنشاء المستند، أجب بـ "أؤكد" أو "OK".**',
    "RU": '\n\n✅ **Чтобы создать документ, ответьте "ПОДТВЕРЖДАЮ" или "OK".**',
    "UK": '\n\n✅ **Щоб створити документ, відповідайте "ПІДТВЕРДЖУЮ" або "OK".**',
}

FIELD_LABELS: Final[Mapping[str, _Table]] = {
    "sender": {
        "IT": "Mittente",
        "DE": "Absender",
        "EN": "Sender",
        "FR": "Expéditeur",
        "ES": "Remitente",
        "TR": "Gönderen",
        "RO": "Expeditor",
        "PL": "Nadawca",
        "AR": "المرسل",
        "RU": "Отправитель",
        "UK": "Відправник",
    },
    "address": {
        "IT": "Indirizzo",
        "DE": "Adresse",
        "EN": "Address",
        "FR": "Adresse",
        "ES": "Dirección",
        "TR": "Adres",
        "RO": "Adresă",
        "PL": "Adres",
        "AR": "العنوان",
        "RU": "Адрес",
        "UK": "Адреса",
    },
    "recipient": {
        "IT": "Destinatario",
        "DE": "Empfänger",
        "EN": "Recipient",
        "FR": "Destinataire",
        "ES": "Destinatario",
        "TR": "Alıcı",
        "RO": "Destinatar",
        "PL": "Odbiorca",
        "AR": "المستلم",
        "RU": "Получатель",
        "UK": "Одержувач",
    },
    "recipient_address": {
        "IT": "Indirizzo destinatario",
        "DE": "Empfängeradresse",
        "EN": "Recipient address",
        "FR": "Adresse du destinataire",
        "ES": "Dirección del destinatario",
        "TR": "Alıcı adresi",
        "RO": "Adresa destinatarului",
        "PL": "Adres odbiorcy",
        "AR": "عنوان المستلم",
        "RU": "Адрес получателя",
        "UK": "Адреса одержувача",
    },
    "subject": {
        "IT": "Oggetto",
        "DE": "Betreff",
        "EN": "Subject",
        "FR": "Objet",
        "ES": "Asunto",
        "TR": "Konu",
        "RO": "Subiect",
        "PL": "Temat",
        "AR": "الموضوع",
        "RU": "Тема",
        "UK": "Тема",
    },
    "date": {
        "IT": "Data",
        "DE": "Datum",
        "EN": "Date",
        "FR": "Date",
        "ES": "Fecha",
        "TR": "Tarih",
        "RO": "Data",
        "PL": "Data",
        "AR": "التاريخ",
        "RU": "Дата",
        "UK": "Дата",
    },
    "reference": {
        "IT": "Riferimento",
        "DE": "Aktenzeichen",
        "EN": "Reference",
        "FR": "Référence",
        "ES": "Referencia",
        "TR": "Referans",
        "RO": "Referință",
        "PL": "Numer sprawy",
        "AR": "المرجع",
        "RU": "Номер дела",
        "UK": "Номер справи",
    },
    "content": {
        "IT": "Contenuto",
        "DE": "Inhalt",
        "EN": "Content",
        "FR": "Contenu",
        "ES": "Contenido",
        "TR": "İçerik",
        "RO": "Conținut",
        "PL": "Treść",
        "AR": "المحتوى",
        "RU": "Содержание",
        "UK": "Зміст",
    },
}

# (campo do DocumentSummary, chave do rótulo), na ordem de exibição
_FIELD_ORDER: Final[tuple[tuple[str, str], ...]] = (
    ("sender_name", "sender"),
    ("sender_address", "address"),
    ("recipient_name", "recipient"),
    ("recipient_address", "recipient_address"),
    ("subject", "subject"),
    ("date", "date"),
    ("reference", "reference"),
)

_SUBJECT_LINE_RE: Final[re.Pattern[str]] = re.compile(
    r"\b(betreff|oggetto|subject|objet|asunto)\s*:\s*(.+?)(?:\n|$)", re.IGNORECASE
)


def get_label(key: str, language: object) -> str:
    table = FIELD_LABELS.get(key)
    if table is None:
        return key
    return lookup(table, language)


def build_summary_block(
    data: DocumentSummary,
    language: object,
    *,
    preview_chars: int | None = None,
) -> str:
    """Renderiza o resumo rotulado + CTA de confirmação no idioma pedido.

    Args:
        data: Dados coletados para o documento
        language: Código de idioma (desconhecido → EN)
        preview_chars: Tamanho da prévia do conteúdo principal
    """
    if preview_chars is None:
        preview_chars = get_ai_settings().limits.summary_preview_chars

    lines = [lookup(SUMMARY_HEADERS, language), ""]
    for field_name, label_key in _FIELD_ORDER:
        value = getattr(data, field_name)
        if value:
            lines.append(f"**{get_label(label_key, language)}:** {value}")
    if data.main_content:
        preview = data.main_content[:preview_chars]
        lines.append(f"**{get_label('content', language)}:** {preview}...")

    lines.append(lookup(CONFIRMATION_PROMPTS, language))
    return "\n".join(lines)


def extract_document_data(
    ai_response: str,
    user_profile: SenderProfile | None = None,
    case_context: CaseContext | None = None,
    *,
    today: date | None = None,
) -> DocumentSummary:
    """Monta o resumo a partir do perfil, do caso e da resposta do modelo.

    A linha "Betreff:/Oggetto:/Subject:" da resposta prevalece sobre o
    título do caso. A data sai no formato alemão sem zeros (d.m.aaaa).
    """
    values: dict[str, str | None] = {}

    if user_profile is not None:
        values["sender_name"] = user_profile.sender_full_name or user_profile.full_name
        postal_city = " ".join(
            part
            for part in (
                user_profile.sender_postal_code or user_profile.postal_code,
                user_profile.sender_city or user_profile.city,
            )
            if part
        )
        address_parts = [
            part
            for part in (user_profile.sender_address or user_profile.address, postal_city)
            if part
        ]
        values["sender_address"] = ", ".join(address_parts) or None

    if case_context is not None:
        values["recipient_name"] = case_context.authority
        values["subject"] = case_context.title
        values["reference"] = case_context.aktenzeichen

    subject_match = _SUBJECT_LINE_RE.search(ai_response or "")
    if subject_match:
        values["subject"] = subject_match.group(2).strip()

    current = today or date.today()
    values["date"] = f"{current.day}.{current.month}.{current.year}"
    return DocumentSummary(**values)
