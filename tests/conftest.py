"""Shared fixtures and fakes for the commitgen test suite."""

import io
import json
import re

import pytest

from commitgen.git import GitError, VersionControl
from commitgen.llm import LLMClient, LLMResponse

ANSI_RE = re.compile(r'\033\[[0-9;]*m')


class FakeRepository(VersionControl):
    """In-memory stand-in for a git working tree."""

    def __init__(self, diff: str = "", commit_error: str | None = None):
        self.diff = diff
        self.commit_error = commit_error
        self.diff_calls = 0
        self.commits: list[tuple[str, bool]] = []

    def staged_diff(self) -> str:
        self.diff_calls += 1
        return self.diff

    def commit(self, message: str, edit: bool = False) -> None:
        if self.commit_error is not None:
            raise GitError(f"Failed to commit: {self.commit_error}")
        self.commits.append((message, edit))


class FakeClient(LLMClient):
    """Returns canned messages in order and records every diff it was sent."""

    def __init__(self, *messages: str):
        self.messages = list(messages) or ["Add feature"]
        self.calls: list[str] = []

    @property
    def name(self) -> str:
        return "Fake (test-model)"

    def generate(self, diff: str) -> LLMResponse:
        self.calls.append(diff)
        content = self.messages[min(len(self.calls), len(self.messages)) - 1]
        return LLMResponse(content=content, model="test-model", tokens_used=42)



class FakeUrlopen:
    """urllib.request.urlopen replacement. Records requests; answers with a JSON body or raises."""

    def __init__(self, body=None, raw: bytes | None = None, raises=None):
        self.raw = raw if raw is not None else json.dumps(body).encode('utf-8')
        self.raises = raises
        self.requests = []

    def __call__(self, request, timeout=None):
        self.requests.append((request, timeout))
        if self.raises is not None:
            raise self.raises
        return io.BytesIO(self.raw)

    @property
    def payload(self) -> dict:
        return json.loads(self.requests[0][0].data.decode('utf-8'))

@pytest.fixture
def strip_ansi():
    """Return a function that removes ANSI escape codes."""
    def _strip(text: str) -> str:
        return ANSI_RE.sub('', text)
    return _strip


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every variable the config layer reads from the process env."""
    for name in ("GROQ_API_KEY", "COMMITGEN_ENV_FILE", "COMMITGEN_MODEL", "COMMITGEN_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def env_file(tmp_path, clean_env):
    """Return a factory that writes a .env file and returns its path."""
    def _write(content: str = "GROQ_API_KEY=gsk_test_key_1234\n"):
        path = tmp_path / ".env"
        path.write_text(content, encoding='utf-8')
        return path
    return _write


@pytest.fixture
def inputs():
    """Return a factory for an input() replacement that replays answers."""
    def _make(*answers: str):
        remaining = list(answers)

        def _input(prompt: str = "") -> str:
            if not remaining:
                raise EOFError
            return remaining.pop(0)
        return _input
    return _make
