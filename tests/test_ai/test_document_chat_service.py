"""Testes para ai/services/document_chat.py (pipeline completo com MockChatClient)."""

from __future__ import annotations

from typing import Any

import pytest

from ai.config.settings import AISettings, ChatLimitSettings
from ai.core.mock_client import MockChatClient
from ai.models.chat import DocumentChatRequest
from ai.models.completion import ChatCompletionResult
from ai.models.document import DocumentSummary
from ai.prompts.summary_block import SUMMARY_HEADERS, build_summary_block
from ai.rules.document_guardrails import DOCUMENT_TEXT_SYSTEM_LABEL, SAFE_FALLBACK_MESSAGE
from ai.rules.fallbacks import (
    ALREADY_GENERATED_MESSAGE,
    CTA_WHEN_READY,
    LEXORA_FIRST_GREETING,
    NOT_READY_HINT,
)
from ai.rules.placeholders import PLACEHOLDER_BLOCK_MESSAGE
from ai.rules.scope_gate import SCOPE_REFUSAL_MESSAGES
from ai.services.document_chat import DocumentChatService

DOCUMENT_TEXT = "Jobcenter Berlin\nBescheid vom 12.03.2024\nIhr Antrag wurde abgelehnt."

GERMAN_LETTER = (
    "Betreff: Widerspruch gegen den Bescheid vom 12.03.2024\n\n"
    "Sehr geehrte Damen und Herren,\n\n"
    "hiermit lege ich fristgerecht Widerspruch gegen den oben genannten Bescheid ein. "
    "Die Berechnung der Leistungen berücksichtigt meine aktuellen Mietkosten nicht. "
    "Ich bitte um Überprüfung und um eine schriftliche Bestätigung des Eingangs dieses "
    "Schreibens.\n\n"
    "Mit freundlichen Grüßen\n\n"
    "Max Mustermann"
)

ITALIAN_LETTER = (
    "Oggetto: Ricorso contro verbale n. 1234\n\n"
    "Gentile Ufficio,\n\n"
    "con la presente la sottoscritta presenta ricorso contro il verbale indicato in oggetto, "
    "poiché la notifica è avvenuta oltre i termini previsti dalla legge. Si chiede pertanto "
    "l'annullamento del verbale e la restituzione di quanto eventualmente versato.\n\n"
    "Cordiali saluti\n\n"
    "Maria Rossi"
)

PREVIOUS_TURNS = [
    {"role": "user", "content": "Ho ricevuto un verbale"},
    {"role": "assistant", "content": "Mi racconti i dettagli del verbale."},
]


def make_request(**overrides: Any) -> DocumentChatRequest:
    payload: dict[str, Any] = {"userMessage": "Ho bisogno di aiuto con una lettera"}
    payload.update(overrides)
    return DocumentChatRequest.model_validate(payload)


def make_service(*replies: Any, settings: AISettings | None = None) -> tuple[DocumentChatService, MockChatClient]:
    client = MockChatClient(list(replies))
    return DocumentChatService(client, settings or AISettings()), client


class RaisingClient:
    """Cliente que falha com exceção inesperada."""

    async def complete(self, messages):
        raise RuntimeError("connection reset")


class TestEarlyExits:
    """Ramos que respondem sem chamar o modelo."""

    @pytest.mark.asyncio
    async def test_document_expected_but_missing(self) -> None:
        service, client = make_service("nunca usado")

        outcome = await service.handle(
            make_request(caseId="case-1", documentText="   "), correlation_id="corr-1"
        )

        assert outcome.kind == "guardrail_failed"
        assert outcome.guardrail is not None
        assert outcome.guardrail.error == "DOCUMENT_TEXT_MISSING"
        assert outcome.guardrail.case_id == "case-1"
        assert client.calls == []

    @pytest.mark.asyncio
    async def test_upload_without_text(self) -> None:
        service, client = make_service()

        outcome = await service.handle(make_request(isUploadWithoutText=True))

        assert outcome.kind == "guardrail_failed"
        assert client.calls == []

    @pytest.mark.asyncio
    async def test_already_generated(self) -> None:
        service, client = make_service()

        outcome = await service.handle(
            make_request(documentText=DOCUMENT_TEXT, conversationStatus="document_generated")
        )

        assert outcome.kind == "already_generated"
        assert outcome.response == ALREADY_GENERATED_MESSAGE
        assert client.calls == []

    @pytest.mark.asyncio
    async def test_out_of_scope_refused_in_user_language(self) -> None:
        service, client = make_service()

        outcome = await service.handle(
            make_request(userMessage="Mi dai la ricetta della pizza margherita?", userLanguage="it")
        )

        assert outcome.kind == "out_of_scope"
        assert outcome.language == "IT"
        assert outcome.response == SCOPE_REFUSAL_MESSAGES["IT"]
        assert client.calls == []

    @pytest.mark.asyncio
    async def test_scope_check_skipped_with_document(self) -> None:
        service, client = make_service("Ecco la ricetta del documento.")

        outcome = await service.handle(
            make_request(
                userMessage="Mi dai la ricetta della pizza margherita?",
                documentText=DOCUMENT_TEXT,
                chatHistory=PREVIOUS_TURNS,
            )
        )

        assert outcome.kind == "reply"
        assert len(client.calls) == 1

    @pytest.mark.asyncio
    async def test_scope_check_skipped_by_flag(self) -> None:
        service, client = make_service("Va bene.")

        outcome = await service.handle(
            make_request(userMessage="Consigliami un film su Netflix stasera", skipScopeCheck=True)
        )

        assert outcome.kind == "reply"
        assert len(client.calls) == 1


class TestProviderErrors:
    """Falhas do provedor viram outcome tipado."""

    @pytest.mark.asyncio
    async def test_error_result(self) -> None:
        service, _ = make_service(ChatCompletionResult(ok=False, error="Rate limit", status=429))

        outcome = await service.handle(make_request(chatHistory=PREVIOUS_TURNS))

        assert outcome.kind == "provider_error"
        assert outcome.provider_status == 429
        assert outcome.provider_error == "Rate limit"

    @pytest.mark.asyncio
    async def test_empty_content(self) -> None:
        service, _ = make_service(ChatCompletionResult(ok=True, content="", status=200))

        outcome = await service.handle(make_request(chatHistory=PREVIOUS_TURNS))

        assert outcome.kind == "provider_error"
        assert outcome.provider_error == "empty_response"

    @pytest.mark.asyncio
    async def test_client_exception(self) -> None:
        service = DocumentChatService(RaisingClient(), AISettings())

        outcome = await service.handle(make_request(chatHistory=PREVIOUS_TURNS))

        assert outcome.kind == "provider_error"
        assert outcome.provider_error == "RuntimeError"
        assert outcome.provider_status is None


class TestReplyPostProcessing:
    """Validação e ajustes da resposta do modelo."""

    @pytest.mark.asyncio
    async def test_forbidden_phrase_replaced_with_safe_fallback(self) -> None:
        service, _ = make_service("I cannot see the document, please send it again.")

        outcome = await service.handle(
            make_request(documentText=DOCUMENT_TEXT, chatHistory=PREVIOUS_TURNS)
        )

        assert outcome.kind == "reply"
        assert outcome.response == SAFE_FALLBACK_MESSAGE
        assert outcome.fallback_used is True
        assert outcome.draft_ready is False

    @pytest.mark.asyncio
    async def test_forbidden_phrase_allowed_without_document(self) -> None:
        service, _ = make_service("I cannot see the document yet.")

        outcome = await service.handle(make_request(chatHistory=PREVIOUS_TURNS))

        assert outcome.fallback_used is False
        assert outcome.response.startswith("I cannot see the document yet.")

    @pytest.mark.asyncio
    async def test_placeholders_block_the_draft(self) -> None:
        raw = "Gentile [Nome Ufficio],\n\nscrivo da [Città] per il verbale.\n\nCordiali saluti"
        service, _ = make_service(raw)

        outcome = await service.handle(
            make_request(userLanguage="IT", chatHistory=PREVIOUS_TURNS)
        )

        assert outcome.response.startswith(PLACEHOLDER_BLOCK_MESSAGE["IT"])
        assert "• [Nome Ufficio]" in outcome.response
        assert "• [Città]" in outcome.response
        assert outcome.draft_ready is False
        assert outcome.fallback_used is True

    @pytest.mark.asyncio
    async def test_not_ready_hint_appended_to_plain_reply(self) -> None:
        service, _ = make_service("Quando è stato notificato il verbale?")

        outcome = await service.handle(
            make_request(userLanguage="IT", chatHistory=PREVIOUS_TURNS)
        )

        assert outcome.response.startswith("Quando è stato notificato il verbale?")
        assert outcome.response.endswith(NOT_READY_HINT["IT"].strip())
        assert outcome.draft_ready is False


class TestGenerationGate:
    """Carta só é liberada após resumo + confirmação."""

    @pytest.mark.asyncio
    async def test_unconfirmed_letter_becomes_summary(self) -> None:
        service, _ = make_service(GERMAN_LETTER)

        outcome = await service.handle(
            make_request(userLanguage="DE", chatHistory=PREVIOUS_TURNS, mode="dashboard")
        )

        assert outcome.response.startswith(SUMMARY_HEADERS["DE"])
        assert "Widerspruch gegen den Bescheid vom 12.03.2024" in outcome.response
        assert outcome.draft_ready is False
        assert outcome.draft is None
        assert outcome.document_generated is False
        assert outcome.fallback_used is True

    @pytest.mark.asyncio
    async def test_first_turn_letter_keeps_summary_without_greeting(self) -> None:
        service, _ = make_service(GERMAN_LETTER)

        outcome = await service.handle(make_request(userLanguage="DE", mode="dashboard"))

        assert outcome.response.startswith(SUMMARY_HEADERS["DE"])
        assert LEXORA_FIRST_GREETING["DE"] not in outcome.response
        assert outcome.draft_ready is False
        assert outcome.fallback_used is True

    @pytest.mark.asyncio
    async def test_confirmation_after_first_turn_summary_releases_draft(self) -> None:
        service, _ = make_service(GERMAN_LETTER, GERMAN_LETTER)
        first = await service.handle(make_request(userLanguage="DE", mode="dashboard"))
        history = [
            {"role": "user", "content": "Ho bisogno di aiuto con una lettera"},
            {"role": "assistant", "content": first.response},
        ]

        outcome = await service.handle(
            make_request(userMessage="OK", userLanguage="DE", mode="dashboard", chatHistory=history)
        )

        assert outcome.draft_ready is True
        assert outcome.draft is not None
        assert outcome.draft.startswith("Sehr geehrte Damen und Herren")

    @pytest.mark.asyncio
    async def test_edit_mode_is_not_gated(self) -> None:
        service, _ = make_service(GERMAN_LETTER)

        outcome = await service.handle(
            make_request(userLanguage="DE", chatHistory=PREVIOUS_TURNS, mode="edit")
        )

        assert outcome.draft_ready is True
        assert outcome.document_generated is True
        assert outcome.response.endswith(CTA_WHEN_READY["DE"])

    @pytest.mark.asyncio
    async def test_confirmation_after_summary_releases_draft(self) -> None:
        summary = build_summary_block(DocumentSummary(subject="Ricorso verbale"), "IT")
        history = [
            {"role": "user", "content": "Ho ricevuto un verbale"},
            {"role": "assistant", "content": summary},
        ]
        service, _ = make_service(ITALIAN_LETTER)

        outcome = await service.handle(
            make_request(userMessage="Confermo", userLanguage="IT", chatHistory=history)
        )

        assert outcome.kind == "reply"
        assert outcome.draft_ready is True
        assert outcome.draft is not None
        assert outcome.draft.startswith("Gentile Ufficio")
        assert outcome.title == "Ricorso contro verbale n. 1234"
        assert outcome.response.endswith(CTA_WHEN_READY["IT"])

    @pytest.mark.asyncio
    async def test_confirmed_status_releases_draft(self) -> None:
        service, _ = make_service(ITALIAN_LETTER)

        outcome = await service.handle(
            make_request(
                userLanguage="IT", chatHistory=PREVIOUS_TURNS, conversationStatus="confirmed"
            )
        )

        assert outcome.draft_ready is True
        assert outcome.document_generated is True


class TestFirstMessage:
    """Primeiro turno sempre começa com a apresentação."""

    @pytest.mark.asyncio
    async def test_greeting_enforced(self) -> None:
        service, _ = make_service("Certo, di cosa si tratta?")

        outcome = await service.handle(
            make_request(userMessage="Ho ricevuto una lettera dal Comune", userLanguage="IT")
        )

        assert outcome.response.startswith(LEXORA_FIRST_GREETING["IT"])
        assert "Come posso aiutarla?" in outcome.response

    @pytest.mark.asyncio
    async def test_greeting_mentions_document(self) -> None:
        service, _ = make_service("Non ho trovato nulla.")

        outcome = await service.handle(
            make_request(documentText=DOCUMENT_TEXT, userLanguage="EN")
        )

        assert outcome.response.startswith(LEXORA_FIRST_GREETING["EN"])
        assert "I have read the document" in outcome.response


class TestPromptAssembly:
    """Mensagens enviadas ao cliente."""

    @pytest.mark.asyncio
    async def test_message_order(self) -> None:
        service, client = make_service("Ok.")

        await service.handle(
            make_request(
                userMessage="Cosa devo fare?",
                documentText=DOCUMENT_TEXT,
                chatHistory=PREVIOUS_TURNS,
            )
        )

        roles = [message.role for message in client.last_messages]
        assert roles == ["system", "system", "user", "assistant", "user"]
        assert client.last_messages[1].content.startswith(DOCUMENT_TEXT_SYSTEM_LABEL)
        assert DOCUMENT_TEXT in client.last_messages[1].content
        assert client.last_messages[-1].content == "Cosa devo fare?"

    @pytest.mark.asyncio
    async def test_history_window(self) -> None:
        settings = AISettings(limits=ChatLimitSettings(history_max_turns=2))
        history = [
            {"role": "user", "content": "primo"},
            {"role": "assistant", "content": "secondo"},
            {"role": "user", "content": "terzo"},
            {"role": "assistant", "content": "quarto"},
        ]
        service, client = make_service("Ok.", settings=settings)

        await service.handle(make_request(userMessage="quinto", chatHistory=history))

        contents = [message.content for message in client.last_messages[1:]]
        assert contents == ["terzo", "quarto", "quinto"]

    @pytest.mark.asyncio
    async def test_unknown_language_defaults_to_english(self) -> None:
        service, _ = make_service("Sure.")

        outcome = await service.handle(
            make_request(userLanguage="pt-BR", chatHistory=PREVIOUS_TURNS)
        )

        assert outcome.language == "EN"
