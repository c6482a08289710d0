"""Testes para app/observability/correlation.py."""

from __future__ import annotations

import uuid

import pytest

from app.observability import (
    get_correlation_id,
    reset_correlation_id,
    resolve_correlation_id,
    set_correlation_id,
)


class TestResolveCorrelationId:
    """Validação do header recebido."""

    @pytest.mark.parametrize("value", ["corr-abc", "req_42.v1", "trace:9f"])
    def test_safe_values_are_kept(self, value: str) -> None:
        assert resolve_correlation_id(value) == value

    @pytest.mark.parametrize("value", [None, "", "   ", "a b", 'x"}\n{', "z" * 129])
    def test_unsafe_values_become_uuid(self, value: str | None) -> None:
        resolved = resolve_correlation_id(value)

        assert resolved != value
        assert uuid.UUID(resolved)


class TestCorrelationContext:
    """Ciclo set/get/reset."""

    def test_set_and_reset(self) -> None:
        assert get_correlation_id() == ""

        token = set_correlation_id("corr-1")
        assert get_correlation_id() == "corr-1"

        reset_correlation_id(token)
        assert get_correlation_id() == ""

    def test_set_without_value_generates(self) -> None:
        token = set_correlation_id(None)
        try:
            assert uuid.UUID(get_correlation_id())
        finally:
            reset_correlation_id(token)
