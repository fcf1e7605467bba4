"""
Tests for signalist.ai.generate_text with a mocked Gemini client.
"""

from types import SimpleNamespace
from unittest import mock

import pytest

from signalist import ai


class FakeClientError(Exception):
    pass


@pytest.fixture
def client(monkeypatch):
    fake = mock.MagicMock()
    monkeypatch.setattr(ai, "get_genai_client", lambda: fake)
    monkeypatch.setattr(ai.genai_errors, "ClientError", FakeClientError)
    monkeypatch.setattr(ai.time, "sleep", lambda seconds: None)
    return fake


class TestGenerateText:
    def test_returns_stripped_text(self, client):
        client.models.generate_content.return_value = SimpleNamespace(text="  <p>Hello</p>\n")

        assert ai.generate_text("prompt", model="gemini-2.5-flash-lite") == "<p>Hello</p>"
        kwargs = client.models.generate_content.call_args.kwargs
        assert kwargs["model"] == "gemini-2.5-flash-lite"
        assert kwargs["contents"] == ["prompt"]

    def test_empty_response_is_none(self, client):
        client.models.generate_content.return_value = SimpleNamespace(text=None)
        assert ai.generate_text("prompt", model="m") is None

    def test_rate_limit_is_retried(self, client):
        client.models.generate_content.side_effect = [
            FakeClientError("429 RESOURCE_EXHAUSTED"),
            SimpleNamespace(text="done"),
        ]
        assert ai.generate_text("prompt", model="m") == "done"
        assert client.models.generate_content.call_count == 2

    def test_rate_limit_gives_up_after_max_retries(self, client):
        client.models.generate_content.side_effect = FakeClientError("429 RESOURCE_EXHAUSTED")

        with pytest.raises(ai.AIError):
            ai.generate_text("prompt", model="m")
        assert client.models.generate_content.call_count == ai.MAX_RETRIES

    def test_other_client_errors_are_not_retried(self, client):
        client.models.generate_content.side_effect = FakeClientError("400 INVALID_ARGUMENT")

        with pytest.raises(ai.AIError, match="INVALID_ARGUMENT"):
            ai.generate_text("prompt", model="m")
        assert client.models.generate_content.call_count == 1

    def test_unexpected_errors_become_ai_error(self, client):
        client.models.generate_content.side_effect = ConnectionError("offline")

        with pytest.raises(ai.AIError):
            ai.generate_text("prompt", model="m")
