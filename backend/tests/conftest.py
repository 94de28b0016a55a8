"""
Shared pytest fixtures for backend tests.
The Anthropic client is replaced by an in-process fake; no test hits the network.
"""
import pytest
import sys
import os
from types import SimpleNamespace

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from claude_client import ClaudeClient


class FakeMessages:
    """Stands in for AsyncAnthropic.messages, recording every create() call."""

    def __init__(self, reply=None, error=None, blocks=None):
        self.reply = reply
        self.error = error
        self.blocks = blocks
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        blocks = self.blocks
        if blocks is None:
            blocks = [SimpleNamespace(type="text", text=self.reply)]
        return SimpleNamespace(content=blocks)


class FakeAnthropic:
    def __init__(self, **kwargs):
        self.messages = FakeMessages(**kwargs)


@pytest.fixture
def fake_anthropic():
    """Factory for fake Anthropic clients: fake_anthropic(reply=...) or fake_anthropic(error=...)."""
    return FakeAnthropic


@pytest.fixture
def app_client(monkeypatch):
    """
    Create a test client for the FastAPI app.
    A real key is never needed: tests that reach the model patch get_claude_client.
    """
    from fastapi.testclient import TestClient
    import main

    monkeypatch.setenv("ANTHROPIC_API_KEY", "test-key")

    with TestClient(main.app) as client:
        yield client


@pytest.fixture
def claude_reply(monkeypatch):
    """
    Make the /api/analyze-task endpoint talk to a fake Claude.
    Returns a function taking reply= or error= that installs the fake and returns it.
    """
    import main

    def install(**kwargs):
        fake = FakeAnthropic(**kwargs)
        monkeypatch.setattr(main, "get_claude_client", lambda: ClaudeClient("test-key", client=fake))
        return fake

    return install
