"""Testes para ai/rules/placeholders.py (hard-stop de placeholders)."""

from __future__ import annotations

from ai.rules.placeholders import (
    PLACEHOLDER_BLOCK_MESSAGE,
    SIGNATURE_LINE,
    build_placeholder_question,
    contains_bracket_placeholders,
    extract_bracket_placeholders,
    replace_signature_placeholders,
)


class TestExtractBracketPlaceholders:
    """Testes para extract_bracket_placeholders."""

    def test_extracts_in_order_without_duplicates(self) -> None:
        text = "[Luogo], [Data] ... [CAP, Città] ... [Luogo]"
        assert extract_bracket_placeholders(text) == ["[Luogo]", "[Data]", "[CAP, Città]"]

    def test_ignores_system_markers_and_signature(self) -> None:
        text = "[LETTER]Testo[/LETTER] [Firma] [Unterschrift] [Firma del mittente]"
        assert extract_bracket_placeholders(text) == []
        assert contains_bracket_placeholders(text) is False

    def test_respects_max_items(self) -> None:
        text = " ".join(f"[Campo {i}]" for i in range(10))
        assert len(extract_bracket_placeholders(text)) == 6
        assert len(extract_bracket_placeholders(text, max_items=2)) == 2

    def test_empty_input(self) -> None:
        assert extract_bracket_placeholders(None) == []
        assert contains_bracket_placeholders("") is False


class TestSignatureAndQuestion:
    """Testes de assinatura e da pergunta de dados faltantes."""

    def test_signature_placeholder_becomes_line(self) -> None:
        text = "Cordiali saluti\n[Firma]"
        out = replace_signature_placeholders(text)
        assert "[Firma]" not in out
        assert SIGNATURE_LINE.strip() in out

    def test_signature_variants(self) -> None:
        for token in ("[Signature]", "[Unterschrift]", "[Firma del mittente]", "[Your signature]"):
            assert "[" not in replace_signature_placeholders(f"Best regards {token}")

    def test_question_lists_at_most_three_bullets(self) -> None:
        raw = "Gentile [Nome], scrivo da [Città] il [Data] per [Motivo]"
        question = build_placeholder_question("IT", raw)
        assert question.startswith(PLACEHOLDER_BLOCK_MESSAGE["IT"])
        assert question.count("•") == 3
        assert "[Motivo]" not in question

    def test_question_without_placeholders_is_intro_only(self) -> None:
        assert build_placeholder_question("xx", "niente") == PLACEHOLDER_BLOCK_MESSAGE["EN"]
