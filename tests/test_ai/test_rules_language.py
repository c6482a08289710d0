"""Testes para ai/rules/language.py."""

from __future__ import annotations

import pytest

from ai.rules.language import (
    DEFAULT_LANGUAGE,
    SUPPORTED_LANGUAGES,
    get_locale,
    lookup,
    normalize_language,
)


class TestNormalizeLanguage:
    """Testes para normalize_language."""

    @pytest.mark.parametrize("value", [None, "", "   ", "pt-BR", "xx", 42, ["DE"]])
    def test_unknown_values_default_to_english(self, value: object) -> None:
        assert normalize_language(value) == "EN"

    def test_trims_and_uppercases(self) -> None:
        assert normalize_language(" de ") == "DE"
        assert normalize_language("it") == "IT"
        assert normalize_language("Uk") == "UK"

    def test_result_always_in_supported_set(self) -> None:
        """Função total: qualquer string cai no conjunto fechado."""
        for value in ("de", "fr", "zz", "english", "ES ", "\tru\n"):
            assert normalize_language(value) in SUPPORTED_LANGUAGES

    def test_missing_and_empty_are_equal(self) -> None:
        assert normalize_language(None) == normalize_language("") == DEFAULT_LANGUAGE


class TestLookup:
    """Testes para lookup e get_locale."""

    def test_lookup_falls_back_to_default(self) -> None:
        table = {"EN": "hello", "DE": "hallo"}
        assert lookup(table, "de") == "hallo"
        assert lookup(table, "IT") == "hello"
        assert lookup(table, None) == "hello"

    def test_get_locale(self) -> None:
        assert get_locale("DE") == "de-DE"
        assert get_locale("uk") == "uk-UA"
        assert get_locale("pt") == "en-US"
