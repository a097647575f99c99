"""
OllamaClientのテスト（ollama.AsyncClientをモック）
"""

import asyncio
from unittest.mock import AsyncMock, patch

import pytest

from src.story_journal.ollama_client import OllamaClient


@patch("src.story_journal.ollama_client.ollama.AsyncClient")
def test_chat_returns_text(mock_async_client):
    instance = mock_async_client.return_value
    instance.chat = AsyncMock(return_value={"message": {"content": "A short story."}})

    client = OllamaClient(host="http://example:11434", model="test-model", max_tokens=128)
    messages = [{"role": "user", "content": "hi"}]
    result = asyncio.run(client.chat(messages))

    assert result == "A short story."
    mock_async_client.assert_called_once_with(host="http://example:11434", headers=None)
    kwargs = instance.chat.call_args.kwargs
    assert kwargs["model"] == "test-model"
    assert kwargs["messages"] == messages
    assert "format" not in kwargs
    assert kwargs["options"]["num_predict"] == 128
    assert kwargs["options"]["temperature"] == 1.0


@patch("src.story_journal.ollama_client.ollama.AsyncClient")
def test_api_key_sent_as_bearer_header(mock_async_client):
    OllamaClient(api_key="secret")

    assert mock_async_client.call_args.kwargs["headers"] == {"Authorization": "Bearer secret"}


@patch("src.story_journal.ollama_client.ollama.AsyncClient")
def test_chat_propagates_service_errors(mock_async_client):
    instance = mock_async_client.return_value
    instance.chat = AsyncMock(side_effect=ConnectionError("refused"))

    with pytest.raises(ConnectionError):
        asyncio.run(OllamaClient().chat([{"role": "user", "content": "x"}]))
