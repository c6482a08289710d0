"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ConfigurationError,
    InfrastructureError,
)

__all__ = [
    "ConfigurationError",
    "InfrastructureError",
]
