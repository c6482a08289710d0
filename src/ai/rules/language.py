"""Normalização de idioma para o conjunto fechado suportado.

Qualquer código desconhecido vira o idioma padrão; nunca lança.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Final, TypeVar, cast

from ai.models.chat import SupportedLanguage

SUPPORTED_LANGUAGES: Final[tuple[SupportedLanguage, ...]] = (
    "DE",
    "EN",
    "IT",
    "FR",
    "ES",
    "TR",
    "RO",
    "PL",
    "AR",
    "RU",
    "UK",
)

DEFAULT_LANGUAGE: Final[SupportedLanguage] = "EN"

LOCALE_MAP: Final[Mapping[SupportedLanguage, str]] = {
    "DE": "de-DE",
    "EN": "en-US",
    "IT": "it-IT",
    "FR": "fr-FR",
    "ES": "es-ES",
    "TR": "tr-TR",
    "RO": "ro-RO",
    "PL": "pl-PL",
    "AR": "ar-SA",
    "RU": "ru-RU",
    "UK": "uk-UA",
}

# Usado na instrução "responda em <idioma>" do system prompt
LANGUAGE_NAMES: Final[Mapping[SupportedLanguage, str]] = {
    "DE": "German",
    "EN": "English",
    "IT": "Italian",
    "FR": "French",
    "ES": "Spanish",
    "TR": "Turkish",
    "RO": "Romanian",
    "PL": "Polish",
    "AR": "Arabic",
    "RU": "Russian",
    "UK": "Ukrainian",
}

_T = TypeVar("_T")


def normalize_language(value: object = None) -> SupportedLanguage:
    """Normaliza código de idioma (trim + upper) para o conjunto suportado.

    Args:
        value: Código recebido do cliente (ex: "de", " it ", None)

    Returns:
        Código suportado ou DEFAULT_LANGUAGE ("EN").

    Exemplos:
        >>> normalize_language(" de ")
        'DE'
        >>> normalize_language("pt-BR")
        'EN'
    """
    if not isinstance(value, str):
        return DEFAULT_LANGUAGE
    candidate = value.strip().upper()
    if candidate in SUPPORTED_LANGUAGES:
        return cast(SupportedLanguage, candidate)
    return DEFAULT_LANGUAGE


def lookup(table: Mapping[SupportedLanguage, _T], language: object) -> _T:
    """Busca tradução por idioma com fallback para o idioma padrão."""
    found = table.get(normalize_language(language))
    if found is not None:
        return found
    return table[DEFAULT_LANGUAGE]


def get_locale(language: object) -> str:
    """Retorna locale BCP-47 (ex: "de-DE") do idioma normalizado."""
    return lookup(LOCALE_MAP, language)
