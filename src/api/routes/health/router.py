"""Endpoints de health check (liveness e readiness)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Literal

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ai.config.prompt_assets_loader import PromptAssetError
from ai.prompts.chat_policy import get_chat_policy
from config.settings import get_openai_settings

logger = logging.getLogger(__name__)

router = APIRouter()

SERVICE_LABEL = "lexora-chat"


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    """Resultado de checagem de dependência."""

    status: Literal["ok", "degraded", "failed"]
    error: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {"status": self.status, "error": self.error}


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe: verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service=SERVICE_LABEL,
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check(request: Request) -> JSONResponse:
    """Readiness probe: prompts carregáveis e serviço montado."""
    prompts_check = _check_prompt_assets()
    openai_check = _check_openai()
    service_ready = getattr(request.app.state, "document_chat_service", None) is not None

    ready = prompts_check.status == "ok" and service_ready
    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {
            "prompts": prompts_check.as_dict(),
            "openai": openai_check.as_dict(),
            "service": {"status": "ok" if service_ready else "failed", "error": None},
        },
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)


def _check_prompt_assets() -> DependencyCheck:
    try:
        get_chat_policy("dashboard")
    except PromptAssetError as exc:
        logger.warning("readiness_prompts_failed", extra={"error": str(exc)})
        return DependencyCheck(status="failed", error="prompt_assets_unavailable")
    return DependencyCheck(status="ok")


def _check_openai() -> DependencyCheck:
    # Sem chamada de rede: só confirma que há chave configurada
    settings = get_openai_settings()
    if not settings.enabled or not settings.api_key:
        return DependencyCheck(status="degraded", error="not_configured")
    return DependencyCheck(status="ok")
