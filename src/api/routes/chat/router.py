"""Endpoint do chat de documentos.

Endpoints:
- POST /chat/document: um turno do chat (guardrail → scope → LLM → validação)

Mapeamento de status:
- guardrail_failed → 400 {error, hint, caseId, documentId, praticaId}
- provider_error 429 → 429 {error}
- provider_error → 502 {error: "AI_PROVIDER_ERROR", message}
- reply / out_of_scope / already_generated → 200
- body inválido → 422 (validação do FastAPI)
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from ai.models.chat import DocumentChatRequest
from ai.models.outcome import DocumentChatOutcome
from ai.rules.fallbacks import PROVIDER_ERROR_MESSAGE, RATE_LIMIT_MESSAGE
from app.observability import (
    CORRELATION_ID_HEADER,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_service(request: Request) -> Any:
    """Serviço do app.state (criado no lifespan ou injetado em testes)."""
    service = getattr(request.app.state, "document_chat_service", None)
    if service is None:
        from app.bootstrap import create_document_chat_service

        service = create_document_chat_service()
        request.app.state.document_chat_service = service
    return service


def outcome_to_response(outcome: DocumentChatOutcome, correlation_id: str) -> JSONResponse:
    """Traduz o DocumentChatOutcome em resposta HTTP."""
    headers = {CORRELATION_ID_HEADER: correlation_id}

    if outcome.kind == "guardrail_failed" and outcome.guardrail is not None:
        guard = outcome.guardrail
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            headers=headers,
            content={
                "error": guard.error,
                "hint": guard.hint,
                "caseId": guard.case_id,
                "documentId": guard.document_id,
                "praticaId": guard.pratica_id,
            },
        )

    if outcome.kind == "provider_error":
        if outcome.provider_status == status.HTTP_429_TOO_MANY_REQUESTS:
            return JSONResponse(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                headers=headers,
                content={"error": RATE_LIMIT_MESSAGE},
            )
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            headers=headers,
            content={"error": "AI_PROVIDER_ERROR", "message": PROVIDER_ERROR_MESSAGE},
        )

    return JSONResponse(
        status_code=status.HTTP_200_OK,
        headers=headers,
        content={
            "response": outcome.response,
            "draftReady": outcome.draft_ready,
            "draftResponse": outcome.draft,
            "title": outcome.title,
            "documentGenerated": outcome.document_generated,
            "fallbackUsed": outcome.fallback_used,
            "outOfScope": outcome.kind == "out_of_scope",
            "language": outcome.language,
        },
    )


@router.post("/document", response_model=None)
async def document_chat(body: DocumentChatRequest, request: Request) -> JSONResponse:
    """Um turno do chat de documentos.

    O correlation_id vem do header X-Correlation-ID (ou é gerado) e
    volta no mesmo header da resposta.
    """
    token = set_correlation_id(request.headers.get(CORRELATION_ID_HEADER))
    try:
        correlation_id = get_correlation_id()
        service = _get_service(request)
        outcome = await service.handle(body, correlation_id=correlation_id)
        logger.info(
            "document_chat_handled",
            extra={
                "component": "chat_route",
                "action": "document_chat",
                "result": outcome.kind,
                "correlation_id": correlation_id,
            },
        )
        return outcome_to_response(outcome, correlation_id)
    finally:
        reset_correlation_id(token)
