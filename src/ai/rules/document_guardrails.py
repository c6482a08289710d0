"""Guardrails estruturais do chat com documento (demo, dashboard, edição).

- Fonte única do DOCUMENT_TEXT nas mensagens (ver ai.prompts.message_builder).
- Fail-closed quando o documento é esperado mas o texto OCR está ausente.
- Validação de saída: frases "não recebi o documento" viram fallback seguro.
"""

from __future__ import annotations

import logging
import re
from typing import Final

from ai.models.guardrail import (
    DocumentContext,
    GuardrailFailure,
    GuardrailPassed,
    GuardrailResult,
    OutputValidationResult,
)
from ai.utils.sanitizer import log_snippet

logger = logging.getLogger(__name__)

DOCUMENT_TEXT_SYSTEM_LABEL: Final[str] = "DOCUMENT_TEXT (authoritative):"

DOCUMENT_TEXT_MISSING_HINT: Final[str] = "OCR text not provided to chat. Fix pipeline."

SAFE_FALLBACK_MESSAGE: Final[str] = (
    "Technical error: document context missing or not injected. Please retry."
)

# Modelo afirma não ter recebido / não ver o documento, ou pede que seja reenviado
_FORBIDDEN_PHRASES_DOCUMENT_NOT_RECEIVED: Final[tuple[re.Pattern[str], ...]] = (
    re.compile(r"non ho ricevuto il testo", re.IGNORECASE),
    re.compile(r"non ho ricevuto (la )?lettera", re.IGNORECASE),
    re.compile(r"I did not receive the letter", re.IGNORECASE),
    re.compile(r"I have not received the (letter|document)", re.IGNORECASE),
    re.compile(r"I can't see the document", re.IGNORECASE),
    re.compile(r"I cannot see the document", re.IGNORECASE),
    re.compile(r"I don't have (access to )?the document", re.IGNORECASE),
    re.compile(r"document (text )?(was )?not (provided|received|included)", re.IGNORECASE),
    re.compile(r"letter (text )?(was )?not (provided|received|included)", re.IGNORECASE),
    re.compile(
        r"(please|kindly|could you) (provide|send|share|paste) (the )?(letter|document)",
        re.IGNORECASE,
    ),
    re.compile(r"(forniscimi|inviami|incolla|carica) (il )?(testo della )?lettera", re.IGNORECASE),
    re.compile(r"(ti chiedo di )?riportare i dati (della lettera|anagrafici)", re.IGNORECASE),
    re.compile(r"nessun (documento|testo) (fornito|ricevuto|presente)", re.IGNORECASE),
    re.compile(r"no (document|letter) (text )?(has been )?(provided|received)", re.IGNORECASE),
    re.compile(
        r"ich habe (das dokument|den brief|das schreiben) nicht (erhalten|bekommen)",
        re.IGNORECASE,
    ),
    re.compile(r"(bitte )?(senden|schicken) sie mir (das dokument|den brief)", re.IGNORECASE),
)


def expect_document_guardrail(context: DocumentContext) -> GuardrailResult:
    """Verifica se o texto do documento está de fato disponível.

    Regras (nesta ordem):
    1. upload sem texto extraído → falha, independente de ids
    2. algum id (case/document/pratica) presente e texto vazio → falha
    3. caso contrário → ok

    Função pura: o chamador traduz a falha em HTTP 400 e registra o log.
    """
    if context.is_upload_without_text:
        return GuardrailFailure(hint=DOCUMENT_TEXT_MISSING_HINT, document_text_length=0)

    if context.has_identifier and not context.has_text:
        return GuardrailFailure(
            hint=DOCUMENT_TEXT_MISSING_HINT,
            case_id=context.case_id or None,
            document_id=context.document_id or None,
            pratica_id=context.pratica_id or None,
            document_text_length=0,
        )

    return GuardrailPassed()


def find_forbidden_phrase(model_output: str) -> str | None:
    """Retorna o padrão de frase proibida encontrado (ou None)."""
    if not model_output:
        return None
    for pattern in _FORBIDDEN_PHRASES_DOCUMENT_NOT_RECEIVED:
        if pattern.search(model_output):
            return pattern.pattern
    return None


def validate_output_forbidden_phrases(
    document_text_length: int,
    model_output: str,
    *,
    endpoint: str | None = None,
    case_id: str | None = None,
    document_id: str | None = None,
) -> OutputValidationResult:
    """Substitui a resposta pelo fallback seguro quando ela contradiz o contexto.

    Só se aplica quando um documento foi de fato enviado neste turno
    (document_text_length > 0); sem documento a saída passa inalterada.

    Args:
        document_text_length: Tamanho do texto do documento injetado
        model_output: Resposta bruta do modelo
        endpoint: Nome do endpoint (para log)
        case_id: ID do caso (para log)
        document_id: ID do documento (para log)
    """
    if document_text_length <= 0:
        return OutputValidationResult(ok=True, response=model_output)

    matched = find_forbidden_phrase(model_output)
    if matched is None:
        return OutputValidationResult(ok=True, response=model_output)

    logger.error(
        "forbidden_phrase_in_output",
        extra={
            "component": "output_validator",
            "action": "replace_output",
            "result": "safe_fallback",
            "endpoint": endpoint,
            "case_id": case_id,
            "document_id": document_id,
            "document_text_length": document_text_length,
            "output_length": len(model_output),
            "output_snippet": log_snippet(model_output, 200),
            "pattern": matched,
        },
    )
    return OutputValidationResult(ok=False, response=SAFE_FALLBACK_MESSAGE, logged=True)
