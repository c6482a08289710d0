"""Testes para ai/rules/document_guardrails.py.

Cobre o guardrail fail-closed e o validador de frases proibidas.
"""

from __future__ import annotations

import logging

import pytest

from ai.models.guardrail import DocumentContext, GuardrailFailure, GuardrailPassed
from ai.rules.document_guardrails import (
    DOCUMENT_TEXT_MISSING_HINT,
    SAFE_FALLBACK_MESSAGE,
    expect_document_guardrail,
    find_forbidden_phrase,
    validate_output_forbidden_phrases,
)


class TestExpectDocumentGuardrail:
    """Testes para expect_document_guardrail."""

    @pytest.mark.parametrize("text", [None, "", "   ", "\n\t "])
    @pytest.mark.parametrize(
        "ids",
        [
            {"case_id": "case-1"},
            {"document_id": "doc-1"},
            {"pratica_id": "pr-1"},
            {"case_id": "case-1", "document_id": "doc-1"},
        ],
    )
    def test_fails_closed_when_ids_present_and_text_empty(
        self, text: str | None, ids: dict[str, str]
    ) -> None:
        result = expect_document_guardrail(DocumentContext(document_text=text, **ids))
        assert isinstance(result, GuardrailFailure)
        assert result.ok is False
        assert result.error == "DOCUMENT_TEXT_MISSING"
        assert result.hint == DOCUMENT_TEXT_MISSING_HINT
        assert result.document_text_length == 0

    def test_failure_carries_identifiers(self) -> None:
        result = expect_document_guardrail(
            DocumentContext(document_text=" ", case_id="c1", document_id="d1", pratica_id="p1")
        )
        assert isinstance(result, GuardrailFailure)
        assert (result.case_id, result.document_id, result.pratica_id) == ("c1", "d1", "p1")

    @pytest.mark.parametrize(
        "ids",
        [{}, {"case_id": "case-1"}, {"case_id": "c", "document_id": "d", "pratica_id": "p"}],
    )
    def test_passes_when_text_present_regardless_of_ids(self, ids: dict[str, str]) -> None:
        result = expect_document_guardrail(
            DocumentContext(document_text="Sehr geehrte Damen und Herren", **ids)
        )
        assert isinstance(result, GuardrailPassed)
        assert result.ok is True

    def test_passes_without_ids_and_without_text(self) -> None:
        assert expect_document_guardrail(DocumentContext()).ok is True

    def test_upload_without_text_fails_even_without_ids(self) -> None:
        result = expect_document_guardrail(DocumentContext(is_upload_without_text=True))
        assert isinstance(result, GuardrailFailure)
        assert result.case_id is None

    def test_upload_without_text_wins_over_present_text(self) -> None:
        result = expect_document_guardrail(
            DocumentContext(document_text="testo", is_upload_without_text=True)
        )
        assert result.ok is False


class TestValidateOutputForbiddenPhrases:
    """Testes para validate_output_forbidden_phrases."""

    @pytest.mark.parametrize(
        "output",
        [
            "I have not received the document",
            "I did not receive the letter.",
            "Non ho ricevuto il testo della lettera.",
            "Per favore, incolla il testo della lettera",
            "Ich habe das Dokument nicht erhalten.",
            "Please provide the letter so I can help.",
        ],
    )
    def test_substitutes_safe_fallback_when_document_present(self, output: str) -> None:
        result = validate_output_forbidden_phrases(500, output, endpoint="chat/document")
        assert result.ok is False
        assert result.response == SAFE_FALLBACK_MESSAGE
        assert result.logged is True

    @pytest.mark.parametrize(
        "output",
        ["I have not received the document", "Ciao!", "", "Please provide the letter"],
    )
    def test_no_op_without_document(self, output: str) -> None:
        result = validate_output_forbidden_phrases(0, output)
        assert result.ok is True
        assert result.response == output

    def test_clean_output_passes(self) -> None:
        output = "Il Finanzamt chiede il pagamento entro il 30.06."
        result = validate_output_forbidden_phrases(1200, output)
        assert result.ok is True
        assert result.response == output
        assert result.logged is False

    def test_log_masks_pii_in_snippet(self, caplog: pytest.LogCaptureFixture) -> None:
        output = "I have not received the document. Write to max@example.de"
        with caplog.at_level(logging.ERROR, logger="ai.rules.document_guardrails"):
            validate_output_forbidden_phrases(
                10, output, endpoint="chat/document", case_id="c1", document_id="d1"
            )

        record = next(r for r in caplog.records if r.getMessage() == "forbidden_phrase_in_output")
        assert record.endpoint == "chat/document"
        assert record.case_id == "c1"
        assert "[EMAIL]" in record.output_snippet
        assert "max@example.de" not in record.output_snippet

    def test_find_forbidden_phrase(self) -> None:
        assert find_forbidden_phrase("I cannot see the document") is not None
        assert find_forbidden_phrase("Tutto chiaro") is None
        assert find_forbidden_phrase("") is None
