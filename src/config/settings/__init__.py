"""Agregador de settings do serviço de chat Lexora.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# AI/LLM settings
from config.settings.ai import (
    OpenAISettings,
    get_openai_settings,
)

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

__all__ = [
    # Base
    "BaseSettings",
    "Environment",
    # AI
    "OpenAISettings",
    "get_base_settings",
    "get_openai_settings",
]
