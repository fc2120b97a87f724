"""Shared pytest fixtures for the Meeting Summarizer test suite.

Provides fake settings, a mock completion client and canned completion
payloads used across the unit tests.
"""

import json
from types import SimpleNamespace
from unittest.mock import AsyncMock, patch

import pytest

# ---------------------------------------------------------------------------
# Settings Fixtures
# ---------------------------------------------------------------------------


def make_settings(**overrides):
    """Return a fake Settings object with the production defaults."""
    defaults = {
        "completion_base_url": "https://completions.test/v1",
        "completion_model": "gpt-5",
        "completion_temperature": 0.3,
        "completion_max_tokens": 1000,
        "request_timeout": 60.0,
        "log_level": "INFO",
    }
    defaults.update(overrides)
    return SimpleNamespace(**defaults)


@pytest.fixture
def fake_settings():
    """Patch ``get_settings`` wherever it is looked up at construction time."""
    settings = make_settings()
    with (
        patch("meeting_summarizer.services.completion.client.get_settings", return_value=settings),
        patch(
            "meeting_summarizer.services.summarization.dispatcher.get_settings",
            return_value=settings,
        ),
    ):
        yield settings


# ---------------------------------------------------------------------------
# Completion Fixtures
# ---------------------------------------------------------------------------


def make_content(summary=None, action_items=None) -> str:
    """Build the JSON text the model places in ``message.content``."""
    return json.dumps(
        {
            "summary": summary if summary is not None else ["A", "B"],
            "actionItems": action_items if action_items is not None else [],
        }
    )


def make_completion_body(content: str) -> dict:
    """Wrap message content in a chat-completion response envelope."""
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
    }


@pytest.fixture
def mock_completion_client():
    """Create a mock CompletionClient returning a well-formed summary.

    Returns:
        AsyncMock: A mock with the CompletionClient interface whose
        ``complete`` returns two summary points and no action items.
    """
    from meeting_summarizer.services.completion.client import CompletionClient

    client = AsyncMock(spec=CompletionClient)
    client.complete.return_value = make_content(["A", "B"], [])
    return client
