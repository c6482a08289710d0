"""Testes para ai/rules/scope_gate.py."""

from __future__ import annotations

import pytest

from ai.rules.scope_gate import (
    SCOPE_REFUSAL_MESSAGES,
    check_scope,
    get_refusal_message,
    run_scope_self_test,
)


class TestCheckScope:
    """Testes da tabela de decisão do scope gate."""

    @pytest.mark.parametrize(
        ("message", "expected"),
        [
            ("Finanzamt Bescheid Frist Einspruch", True),
            ("Patate al forno ricetta", False),
            ("Come fare ricorso contro una multa", True),
            ("Pizza margherita ingredients", False),
        ],
    )
    def test_reference_examples(self, message: str, expected: bool) -> None:
        assert check_scope(message).in_scope is expected

    def test_out_of_scope_only_is_high_confidence(self) -> None:
        verdict = check_scope("Netflix film consiglio per stasera")
        assert verdict.in_scope is False
        assert verdict.confidence == "high"
        assert verdict.should_refuse is True

    def test_two_in_scope_patterns_are_high(self) -> None:
        verdict = check_scope("Jobcenter lettera deadline")
        assert verdict.in_scope is True
        assert verdict.confidence == "high"

    def test_single_in_scope_pattern_is_medium(self) -> None:
        verdict = check_scope("Ho una lettera e non capisco")
        assert verdict.in_scope is True
        assert verdict.confidence == "medium"

    def test_no_signal_is_low_and_not_refused(self) -> None:
        verdict = check_scope("Buongiorno, come stai oggi?")
        assert verdict.in_scope is True
        assert verdict.confidence == "low"
        assert verdict.reason == "no_clear_signal"
        assert verdict.should_refuse is False

    def test_short_message_gets_benefit_of_doubt(self) -> None:
        verdict = check_scope("pizza")
        assert verdict.in_scope is True
        assert verdict.reason == "short_message"

    def test_short_message_threshold_is_configurable(self) -> None:
        assert check_scope("pizza", short_message_chars=3).in_scope is False

    def test_in_scope_term_wins_over_out_of_scope_terms(self) -> None:
        verdict = check_scope("Letter about my Netflix and gym subscription cancellation")
        assert verdict.in_scope is True
        assert verdict.reason == "in_scope_detected"
        assert verdict.confidence == "medium"
        assert verdict.should_refuse is False

    def test_in_scope_term_with_more_out_of_scope_terms_is_accepted(self) -> None:
        verdict = check_scope("ricetta pizza e film netflix, poi la lettera")
        assert verdict.in_scope is True
        assert verdict.reason == "in_scope_detected"

    def test_two_in_scope_patterns_keep_high_confidence_with_out_of_scope_terms(self) -> None:
        verdict = check_scope("Scrivere una lettera per il Finanzamt, non per Netflix")
        assert verdict.in_scope is True
        assert verdict.confidence == "high"

    @pytest.mark.parametrize("message", ["", None, 123])
    def test_empty_or_non_text_is_rejected(self, message: object) -> None:
        verdict = check_scope(message)
        assert verdict.in_scope is False
        assert verdict.reason == "empty_message"


class TestRefusalAndSelfTest:
    """Testes de mensagem de recusa e autoteste."""

    def test_refusal_message_localized(self) -> None:
        assert get_refusal_message("DE") == SCOPE_REFUSAL_MESSAGES["DE"]
        assert get_refusal_message("it").startswith("Mi dispiace")

    def test_refusal_message_defaults_to_english(self) -> None:
        assert get_refusal_message("pt") == SCOPE_REFUSAL_MESSAGES["EN"]

    def test_self_test_table_passes(self) -> None:
        results = run_scope_self_test()
        assert len(results) == 9
        assert all(row["passed"] for row in results)
