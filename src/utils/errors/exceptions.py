"""Exceções de infraestrutura do serviço de chat.

O núcleo (ai/) nunca lança: retorna resultados tipados. Estas exceções
ficam restritas ao bootstrap e aos adapters de IO.
"""

from __future__ import annotations


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura."""


class ConfigurationError(InfrastructureError):
    """Configuração inválida detectada no startup (staging/produção)."""

    def __init__(self, environment: str, errors: list[str]) -> None:
        self.environment = environment
        self.errors = list(errors)
        details = "\n".join(f"- {error}" for error in self.errors)
        super().__init__(f"Configuração inválida para {environment}:\n{details}")
