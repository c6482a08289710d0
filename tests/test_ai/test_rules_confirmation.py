"""Testes para ai/rules/confirmation.py (gate de confirmação)."""

from __future__ import annotations

import pytest

from ai.models.chat import ChatTurn
from ai.rules.confirmation import (
    has_user_confirmed,
    is_generation_allowed,
    is_short_confirmation,
    was_previous_message_summary,
)

SUMMARY_TURN = ChatTurn(
    role="assistant",
    content=(
        "📋 **RIEPILOGO DATI PER IL DOCUMENTO:**\n\n**Oggetto:** Ricorso\n\n"
        '✅ **Per generare il documento, rispondi con "CONFERMO" o "OK".**'
    ),
)


class TestHasUserConfirmed:
    """Testes para has_user_confirmed."""

    @pytest.mark.parametrize(
        "message",
        ["OK", "ok!", "Confermo, procedi", "Ja, bitte erstellen", "Go ahead", "yes please", "Да"],
    )
    def test_confirmations(self, message: str) -> None:
        assert has_user_confirmed(message) is True

    @pytest.mark.parametrize("message", ["no grazie", "   ", "", None, 3])
    def test_not_confirmations(self, message: object) -> None:
        assert has_user_confirmed(message) is False


class TestShortConfirmation:
    """Testes para is_short_confirmation."""

    @pytest.mark.parametrize("message", ["ok", "Procedi!", "do it", " ja. "])
    def test_short_confirmations(self, message: str) -> None:
        assert is_short_confirmation(message) is True

    @pytest.mark.parametrize("message", ["ok ma prima una domanda", "ricetta pizza"])
    def test_longer_messages_are_not_short_confirmations(self, message: str) -> None:
        assert is_short_confirmation(message) is False


class TestGenerationGate:
    """Testes para was_previous_message_summary e is_generation_allowed."""

    def test_summary_detected_on_last_assistant_turn(self) -> None:
        history = [ChatTurn(role="user", content="Ricorso"), SUMMARY_TURN]
        assert was_previous_message_summary(history) is True

    def test_only_last_assistant_turn_counts(self) -> None:
        history = [SUMMARY_TURN, ChatTurn(role="assistant", content="Altro testo")]
        assert was_previous_message_summary(history) is False

    def test_header_without_cta_is_not_summary(self) -> None:
        history = [ChatTurn(role="assistant", content="📋 **RIEPILOGO**")]
        assert was_previous_message_summary(history) is False

    def test_empty_history(self) -> None:
        assert was_previous_message_summary([]) is False

    def test_allowed_after_summary_and_confirmation(self) -> None:
        assert is_generation_allowed([SUMMARY_TURN], "CONFERMO") is True

    def test_not_allowed_without_summary(self) -> None:
        assert is_generation_allowed([], "ok") is False

    def test_not_allowed_without_confirmation(self) -> None:
        assert is_generation_allowed([SUMMARY_TURN], "no grazie") is False

    @pytest.mark.parametrize("status", ["confirmed", "document_generated"])
    def test_allowed_by_stored_status(self, status: str) -> None:
        assert is_generation_allowed([], "qualcosa", status) is True  # type: ignore[arg-type]

    def test_collecting_status_does_not_allow(self) -> None:
        assert is_generation_allowed([], "qualcosa", "collecting") is False
