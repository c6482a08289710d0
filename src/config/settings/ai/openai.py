"""Settings de OpenAI.

Configurações para a chamada de chat completion usada pelo chat de documentos.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class OpenAISettings:
    """Configurações do OpenAI.

    Attributes:
        api_key: Chave da API OpenAI
        model: Modelo padrão a usar
        temperature: Temperatura enviada em cada chamada
        max_tokens: Limite opcional de tokens da resposta
        timeout_seconds: Timeout para chamadas à API
        enabled: Se integração OpenAI está habilitada
    """

    api_key: str = ""
    model: str = "gpt-4.1-mini"
    temperature: float = 0.4
    max_tokens: int | None = None
    timeout_seconds: float = 30.0
    enabled: bool = True

    def validate(self) -> list[str]:
        """Valida configurações do OpenAI.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if self.enabled and not self.api_key:
            errors.append("OPENAI_API_KEY não configurado mas OPENAI_ENABLED=true")

        if self.timeout_seconds <= 0:
            errors.append("OPENAI_TIMEOUT_SECONDS deve ser > 0")

        if not 0.0 <= self.temperature <= 2.0:
            errors.append("OPENAI_TEMPERATURE deve estar entre 0 e 2")

        if self.max_tokens is not None and self.max_tokens <= 0:
            errors.append("OPENAI_MAX_TOKENS deve ser > 0")

        return errors


def _load_openai_from_env() -> OpenAISettings:
    """Carrega OpenAISettings de variáveis de ambiente."""
    max_tokens_raw = os.getenv("OPENAI_MAX_TOKENS", "").strip()
    return OpenAISettings(
        api_key=os.getenv("OPENAI_API_KEY", ""),
        model=os.getenv("OPENAI_MODEL", "gpt-4.1-mini"),
        temperature=float(os.getenv("OPENAI_TEMPERATURE", "0.4")),
        max_tokens=int(max_tokens_raw) if max_tokens_raw else None,
        timeout_seconds=float(os.getenv("OPENAI_TIMEOUT_SECONDS", "30")),
        enabled=os.getenv("OPENAI_ENABLED", "true").lower() in ("true", "1", "yes"),
    )


@lru_cache(maxsize=1)
def get_openai_settings() -> OpenAISettings:
    """Retorna instância cacheada de OpenAISettings."""
    return _load_openai_from_env()
