"""Serviço do chat de documentos (pipeline completo de um turno).

Fluxo:
  idioma → guardrail de documento → status "já gerado" → scope gate
  → regras do sistema + gate de confirmação → mensagens estritas
  → chamada ao modelo → rascunho/placeholders → gate de geração
  → validador de frases proibidas → saudação do primeiro turno → CTA
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from ai.config.settings import AISettings, get_ai_settings
from ai.models.chat import DocumentChatRequest, SupportedLanguage
from ai.models.completion import ChatCompletionResult
from ai.models.guardrail import DocumentContext, GuardrailFailure
from ai.models.outcome import DocumentChatOutcome
from ai.prompts.message_builder import build_strict_messages
from ai.prompts.summary_block import build_summary_block, extract_document_data
from ai.prompts.system_rules import build_system_rules
from ai.rules.confirmation import is_generation_allowed, is_short_confirmation
from ai.rules.document_guardrails import (
    expect_document_guardrail,
    validate_output_forbidden_phrases,
)
from ai.rules.fallbacks import (
    ALREADY_GENERATED_MESSAGE,
    append_not_ready_hint,
    append_ready_cta,
    enforce_first_message_greeting,
)
from ai.rules.language import normalize_language
from ai.rules.letter_detection import looks_like_generated_document
from ai.rules.scope_gate import check_scope, get_refusal_message
from ai.services._reply_postprocess import ReplyDraft, prepare_reply
from app.observability import (
    record_fallback,
    record_guardrail_block,
    record_latency,
    record_scope_refusal,
)
from config.logging import log_fallback

if TYPE_CHECKING:
    from ai.core.client import ChatCompletionClientProtocol

logger = logging.getLogger(__name__)

ENDPOINT_NAME = "chat/document"

# Modo edição altera texto existente: sem gate de resumo
_GATED_MODES = frozenset({"demo", "dashboard", "document"})


class DocumentChatService:
    """Orquestra um turno do chat com documento.

    Nunca lança para falhas esperadas: cada ramo vira um
    DocumentChatOutcome tipado que a borda HTTP traduz em status.
    """

    def __init__(
        self,
        client: ChatCompletionClientProtocol,
        settings: AISettings | None = None,
    ) -> None:
        self._client = client
        self._settings = settings or get_ai_settings()

    async def handle(
        self,
        request: DocumentChatRequest,
        *,
        correlation_id: str | None = None,
    ) -> DocumentChatOutcome:
        start_time = time.perf_counter()
        try:
            return await self._handle(request, correlation_id)
        finally:
            latency_ms = (time.perf_counter() - start_time) * 1000
            record_latency("document_chat", "handle", latency_ms, correlation_id)

    async def _handle(
        self,
        request: DocumentChatRequest,
        correlation_id: str | None,
    ) -> DocumentChatOutcome:
        limits = self._settings.limits
        language = normalize_language(request.user_language)
        context = DocumentContext(
            document_text=request.document_text,
            case_id=request.case_id,
            document_id=request.document_id,
            pratica_id=request.pratica_id,
            is_upload_without_text=request.is_upload_without_text,
        )

        guard = expect_document_guardrail(context)
        if isinstance(guard, GuardrailFailure):
            return _guardrail_outcome(guard, language, correlation_id)

        if request.conversation_status == "document_generated":
            return DocumentChatOutcome(
                kind="already_generated",
                language=language,
                response=ALREADY_GENERATED_MESSAGE,
            )

        refusal = _scope_refusal(request, context, language, limits.scope_short_message_chars)
        if refusal is not None:
            record_scope_refusal(refusal[1], refusal[2], correlation_id)
            logger.info(
                "scope_refused",
                extra={
                    "component": "document_chat",
                    "action": "scope_gate",
                    "result": "refused",
                    "reason": refusal[1],
                    "correlation_id": correlation_id,
                },
            )
            return DocumentChatOutcome(kind="out_of_scope", language=language, response=refusal[0])

        history = request.chat_history[-limits.history_max_turns :]
        first_message = not request.chat_history
        allow_generation = is_generation_allowed(
            request.chat_history, request.user_message, request.conversation_status
        )
        system_rules = build_system_rules(
            request.mode,
            language,
            has_document=context.has_text,
            first_message=first_message,
            allow_generation=allow_generation,
        )
        messages = build_strict_messages(
            system_rules,
            context.stripped_text or None,
            history,
            request.user_message,
            document_text_max_chars=limits.document_text_max_chars,
            history_turn_max_chars=limits.history_turn_max_chars,
            user_message_max_chars=limits.user_message_max_chars,
        )

        result = await self._safe_complete(messages, correlation_id)
        if not result.ok or not result.content:
            return _provider_error_outcome(result, language, correlation_id)

        return self._finalize_reply(
            raw=result.content,
            request=request,
            context=context,
            language=language,
            first_message=first_message,
            allow_generation=allow_generation,
            correlation_id=correlation_id,
        )

    async def _safe_complete(self, messages, correlation_id: str | None) -> ChatCompletionResult:
        try:
            return await self._client.complete(messages)
        except Exception as exc:
            logger.warning(
                "chat_client_error",
                extra={
                    "component": "document_chat",
                    "action": "complete",
                    "result": "error",
                    "correlation_id": correlation_id,
                    "error_type": type(exc).__name__,
                },
            )
            return ChatCompletionResult(ok=False, error=type(exc).__name__)

    def _finalize_reply(
        self,
        *,
        raw: str,
        request: DocumentChatRequest,
        context: DocumentContext,
        language: SupportedLanguage,
        first_message: bool,
        allow_generation: bool,
        correlation_id: str | None,
    ) -> DocumentChatOutcome:
        reply = prepare_reply(raw, language)
        if reply.placeholder_blocked:
            _note_fallback("placeholder_guard", "placeholder_block", correlation_id)

        document_generated = looks_like_generated_document(
            raw, min_chars=self._settings.limits.readiness_min_chars
        )

        summary_shown = False
        if (
            document_generated
            and not allow_generation
            and not reply.placeholder_blocked
            and request.mode in _GATED_MODES
        ):
            _show_summary_instead(reply, raw, request, language)
            summary_shown = True
            _note_fallback("generation_gate", "not_confirmed", correlation_id)

        check = validate_output_forbidden_phrases(
            len(context.stripped_text),
            reply.message,
            endpoint=ENDPOINT_NAME,
            case_id=request.case_id,
            document_id=request.document_id,
        )
        fallback_used = reply.placeholder_blocked or summary_shown
        if not check.ok:
            reply.message = check.response
            reply.drop_draft()
            fallback_used = True
            _note_fallback("output_validator", "forbidden_phrase", correlation_id)
        elif first_message and reply.message and not summary_shown:
            reply.message = enforce_first_message_greeting(
                language, reply.message, has_document=context.has_text
            )

        if reply.extraction.draft_ready:
            reply.message = append_ready_cta(language, reply.message)
        elif not fallback_used:
            reply.message = append_not_ready_hint(language, reply.message)

        logger.info(
            "document_chat_reply",
            extra={
                "component": "document_chat",
                "action": "reply",
                "result": "draft_ready" if reply.extraction.draft_ready else "message",
                "mode": request.mode,
                "language": language,
                "fallback_used": fallback_used,
                "document_generated": document_generated,
                "correlation_id": correlation_id,
            },
        )
        return DocumentChatOutcome(
            kind="reply",
            language=language,
            response=reply.message,
            draft_ready=reply.extraction.draft_ready,
            draft=reply.extraction.draft,
            title=reply.extraction.title,
            document_generated=document_generated and not summary_shown,
            fallback_used=fallback_used,
        )


def _guardrail_outcome(
    guard: GuardrailFailure,
    language: SupportedLanguage,
    correlation_id: str | None,
) -> DocumentChatOutcome:
    logger.error(
        "document_text_missing",
        extra={
            "component": "document_guardrail",
            "action": "expect_document",
            "result": "blocked",
            "reason": guard.error,
            "case_id": guard.case_id,
            "document_id": guard.document_id,
            "pratica_id": guard.pratica_id,
            "correlation_id": correlation_id,
        },
    )
    record_guardrail_block(
        guard.error,
        correlation_id,
        {"case_id": guard.case_id, "document_id": guard.document_id},
    )
    return DocumentChatOutcome(kind="guardrail_failed", language=language, guardrail=guard)


def _provider_error_outcome(
    result: ChatCompletionResult,
    language: SupportedLanguage,
    correlation_id: str | None,
) -> DocumentChatOutcome:
    logger.warning(
        "chat_provider_failed",
        extra={
            "component": "document_chat",
            "action": "complete",
            "result": "empty" if result.ok else "error",
            "status": result.status,
            "correlation_id": correlation_id,
        },
    )
    return DocumentChatOutcome(
        kind="provider_error",
        language=language,
        provider_status=result.status,
        provider_error=result.error or "empty_response",
    )


def _scope_refusal(
    request: DocumentChatRequest,
    context: DocumentContext,
    language: SupportedLanguage,
    short_message_chars: int,
) -> tuple[str, str, str] | None:
    """(mensagem, motivo, confiança) quando o scope gate recusa."""
    should_filter = not (
        request.chat_history
        or request.skip_scope_check
        or context.has_text
        or is_short_confirmation(request.user_message)
    )
    if not should_filter:
        return None
    verdict = check_scope(request.user_message, short_message_chars=short_message_chars)
    if not verdict.should_refuse:
        return None
    return get_refusal_message(language), verdict.reason, verdict.confidence


def _show_summary_instead(
    reply: ReplyDraft,
    raw: str,
    request: DocumentChatRequest,
    language: SupportedLanguage,
) -> None:
    summary = extract_document_data(raw, request.user_profile, request.case_context)
    reply.message = build_summary_block(summary, language)
    reply.drop_draft()


def _note_fallback(component: str, reason: str, correlation_id: str | None) -> None:
    log_fallback(logger, component, reason=reason, endpoint=ENDPOINT_NAME)
    record_fallback(component, reason, correlation_id)
