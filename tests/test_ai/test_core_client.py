"""Testes para ai/core (protocol e MockChatClient)."""

from __future__ import annotations

import pytest

from ai.core.mock_client import DEFAULT_MOCK_REPLY, MockChatClient
from ai.models.chat import PromptMessage
from ai.models.completion import ChatCompletionResult

MESSAGES = (
    PromptMessage(role="system", content="RULES"),
    PromptMessage(role="user", content="Ciao"),
)


class TestMockChatClient:
    """Testes para MockChatClient."""

    @pytest.mark.asyncio
    async def test_returns_scripted_replies_in_order(self) -> None:
        client = MockChatClient(["primeira", "segunda"])

        first = await client.complete(MESSAGES)
        second = await client.complete(MESSAGES)
        third = await client.complete(MESSAGES)

        assert first.content == "primeira"
        assert second.content == "segunda"
        assert third.content == DEFAULT_MOCK_REPLY
        assert all(r.ok for r in (first, second, third))

    @pytest.mark.asyncio
    async def test_scripted_error_result(self) -> None:
        error = ChatCompletionResult(ok=False, error="boom", status=500)
        client = MockChatClient([error])

        result = await client.complete(MESSAGES)

        assert result is error

    @pytest.mark.asyncio
    async def test_records_calls(self) -> None:
        client = MockChatClient()
        assert client.last_messages == ()

        await client.complete(list(MESSAGES))

        assert len(client.calls) == 1
        assert client.last_messages == MESSAGES

    def test_prompt_message_payload(self) -> None:
        assert MESSAGES[0].as_payload() == {"role": "system", "content": "RULES"}
