"""Veredito do scope gate (relevância burocrática/jurídica)."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

ScopeConfidence = Literal["high", "medium", "low"]


class ScopeVerdict(BaseModel):
    """Derivado apenas da mensagem atual; sem estado entre turnos."""

    model_config = ConfigDict(frozen=True)

    in_scope: bool
    confidence: ScopeConfidence
    reason: str

    @property
    def should_refuse(self) -> bool:
        """Recusa só quando fora de escopo com confiança acima de low."""
        return not self.in_scope and self.confidence != "low"
