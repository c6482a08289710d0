"""Helper para a chamada HTTP de chat completion da OpenAI.

IO concreto do cliente OpenAI (app/infra).
Nunca lança: todo caminho devolve ChatCompletionResult.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

import httpx

from ai.models.chat import PromptMessage
from ai.models.completion import ChatCompletionResult
from ai.rules.fallbacks import RATE_LIMIT_MESSAGE

logger = logging.getLogger(__name__)

OPENAI_API_URL = "https://api.openai.com/v1/chat/completions"

MISSING_KEY_ERROR = "OPENAI_API_KEY not configured"

# Alguns modelos (ex.: gpt-5*) não aceitam temperatura customizada.
_TEMPERATURE_LOCKED_PREFIXES = ("gpt-5",)


def _supports_custom_temperature(model_name: str) -> bool:
    """Retorna True se o modelo aceita temperatura customizada."""
    return not model_name.startswith(_TEMPERATURE_LOCKED_PREFIXES)


def build_payload(
    *,
    model: str,
    messages: Sequence[PromptMessage],
    temperature: float,
    max_tokens: int | None = None,
) -> dict[str, Any]:
    """Corpo `{model, messages, temperature, max_tokens?}` do POST."""
    payload: dict[str, Any] = {
        "model": model,
        "messages": [message.as_payload() for message in messages],
    }
    if _supports_custom_temperature(model):
        payload["temperature"] = temperature
    if max_tokens is not None:
        payload["max_tokens"] = max_tokens
    return payload


def _error_message(response: httpx.Response) -> str:
    # Mensagem da OpenAI quando disponível (segura para log)
    try:
        body = response.json()
    except ValueError:
        return response.text[:500]
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
    return response.text[:500]


async def call_chat_completion(
    *,
    http_client: httpx.AsyncClient,
    api_key: str,
    payload: dict[str, Any],
    timeout_seconds: float,
) -> ChatCompletionResult:
    """Executa um único POST (sem retries).

    Args:
        http_client: Cliente HTTP async
        api_key: API key da OpenAI
        payload: Corpo montado por build_payload
        timeout_seconds: Timeout da chamada (para logs e request)

    Returns:
        ChatCompletionResult com conteúdo ou erro + status.
    """
    if not api_key:
        logger.error("openai_api_key_missing", extra={"component": "openai_client"})
        return ChatCompletionResult(ok=False, error=MISSING_KEY_ERROR, status=500)

    headers = {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
    }

    try:
        response = await http_client.post(
            OPENAI_API_URL, headers=headers, json=payload, timeout=timeout_seconds
        )
    except httpx.TimeoutException:
        logger.warning(
            "openai_timeout",
            extra={"component": "openai_client", "timeout": timeout_seconds},
        )
        return ChatCompletionResult(ok=False, error="timeout", status=504)
    except httpx.HTTPError as exc:
        logger.warning(
            "openai_transport_error",
            extra={"component": "openai_client", "error_type": type(exc).__name__},
        )
        return ChatCompletionResult(ok=False, error=type(exc).__name__, status=502)

    if response.status_code == 429:
        logger.warning(
            "openai_rate_limited",
            extra={"component": "openai_client", "status_code": 429},
        )
        return ChatCompletionResult(ok=False, error=RATE_LIMIT_MESSAGE, status=429)

    if response.is_error:
        err_message = _error_message(response)
        logger.warning(
            "openai_http_error",
            extra={
                "component": "openai_client",
                "status_code": response.status_code,
                "error": err_message,
            },
        )
        return ChatCompletionResult(ok=False, error=err_message, status=response.status_code)

    try:
        data = response.json()
    except ValueError:
        logger.warning("openai_invalid_json", extra={"component": "openai_client"})
        return ChatCompletionResult(ok=False, error="invalid_json", status=502)

    content = _first_choice_content(data)
    if not content:
        logger.warning("openai_empty_response", extra={"component": "openai_client"})
        return ChatCompletionResult(ok=False, error="empty_response", status=502)

    logger.debug(
        "openai_call_success",
        extra={
            "component": "openai_client",
            "model": payload.get("model"),
            "tokens_used": (data.get("usage") or {}).get("total_tokens"),
        },
    )
    return ChatCompletionResult(ok=True, content=content, status=response.status_code)


def _first_choice_content(data: Any) -> str | None:
    if not isinstance(data, dict):
        return None
    choices = data.get("choices") or []
    if not choices or not isinstance(choices[0], dict):
        return None
    message = choices[0].get("message") or {}
    content = message.get("content")
    return content if isinstance(content, str) else None
