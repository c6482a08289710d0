"""Configurações para o módulo de IA.

Define settings tipados para o modelo de chat e para os limites aplicados
na montagem do prompt e nas heurísticas de documento.

Os limites de caracteres não derivam de tokenizer; dependem do provedor/modelo
e por isso são configuráveis via env (prefixo LEXORA_).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache

MODEL_GPT41_MINI = "gpt-4.1-mini"


@dataclass(frozen=True, slots=True)
class AIModelSettings:
    """Configurações do modelo de chat.

    Atributos:
        model: Nome do modelo (ex: "gpt-4.1-mini")
        temperature: Temperatura para geração (0.0-2.0)
        max_tokens: Limite de tokens na resposta (None = padrão do provedor)
    """

    model: str = MODEL_GPT41_MINI
    temperature: float = 0.4
    max_tokens: int | None = None


@dataclass(frozen=True, slots=True)
class ChatLimitSettings:
    """Limites de tamanho e thresholds das heurísticas do chat.

    Atributos:
        document_text_max_chars: Tamanho máximo do bloco DOCUMENT_TEXT
        history_turn_max_chars: Corte por turno do histórico
        user_message_max_chars: Corte da mensagem atual do usuário
        history_max_turns: Janela de histórico enviada ao LLM
        readiness_min_chars: Tamanho mínimo para considerar carta gerada
        strict_draft_min_chars: Tamanho mínimo do rascunho extraído
        summary_preview_chars: Prévia do conteúdo no bloco de resumo
        scope_short_message_chars: Abaixo disso o scope gate dá o benefício da dúvida
    """

    document_text_max_chars: int = 12000
    history_turn_max_chars: int = 4000
    user_message_max_chars: int = 4000
    history_max_turns: int = 8
    readiness_min_chars: int = 300
    strict_draft_min_chars: int = 200
    summary_preview_chars: int = 100
    scope_short_message_chars: int = 10

    def validate(self) -> list[str]:
        """Valida limites (todos devem ser positivos)."""
        errors: list[str] = []
        for name in self.__dataclass_fields__:
            value = getattr(self, name)
            if value <= 0:
                errors.append(f"LEXORA_{name.upper()} deve ser > 0")
        return errors


@dataclass(frozen=True, slots=True)
class AISettings:
    """Agregador de todas as configurações de IA.

    Exemplo de uso:
        settings = AISettings()
        settings = AISettings(limits=ChatLimitSettings(document_text_max_chars=8000))
    """

    model: AIModelSettings = field(default_factory=AIModelSettings)
    limits: ChatLimitSettings = field(default_factory=ChatLimitSettings)


# Settings padrão (singleton imutável)
DEFAULT_AI_SETTINGS = AISettings()


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _load_limits_from_env() -> ChatLimitSettings:
    defaults = ChatLimitSettings()
    return ChatLimitSettings(
        **{
            name: _env_int(f"LEXORA_{name.upper()}", getattr(defaults, name))
            for name in defaults.__dataclass_fields__
        }
    )


@lru_cache(maxsize=1)
def get_ai_settings() -> AISettings:
    """Retorna configurações de IA (limites sobrescritíveis por env).

    Returns:
        AISettings com valores padrão ou customizados.
    """
    from config.settings.ai.openai import get_openai_settings

    openai_settings = get_openai_settings()
    return AISettings(
        model=AIModelSettings(
            model=openai_settings.model,
            temperature=openai_settings.temperature,
            max_tokens=openai_settings.max_tokens,
        ),
        limits=_load_limits_from_env(),
    )
