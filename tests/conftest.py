"""Test configuration and fixtures for chatlib tests.

This module provides reusable test fixtures organized by functionality:
- Constants and test data
- Sample chats as arrays and transcripts
- CLI helpers
"""

import io
from collections.abc import Callable

import pytest

from chatlib import cli


class TestConstants:
    """Centralized test constants shared across test files."""

    GREETING_TURNS = ("hi", "hello there", "how are you")
    GREETING_TRANSCRIPT = "human: hi\nchatbot: hello there\nhuman: how are you\n"
    GREETING_QUERY = "human: hi\nchatbot: hello there\nhuman: how are you"


@pytest.fixture
def greeting_turns() -> list[str]:
    """Three-message chat ending with an unanswered human message."""
    return list(TestConstants.GREETING_TURNS)


@pytest.fixture
def greeting_transcript() -> str:
    """Transcript form of ``greeting_turns``."""
    return TestConstants.GREETING_TRANSCRIPT


@pytest.fixture
def greeting_query() -> str:
    """Query left over by ``greeting_turns``."""
    return TestConstants.GREETING_QUERY


@pytest.fixture
def answered_turns() -> list[str]:
    """Four-message chat where every human message has a reply."""
    return [
        "What's the capital of France?",
        "Paris.",
        "And of Italy?",
        "Rome.",
    ]


@pytest.fixture
def multiline_turns() -> list[str]:
    """Chat whose messages carry embedded newlines and indentation."""
    return [
        "Please format this:\n  a\n  b",
        "Sure:\n- a\n- b",
    ]


@pytest.fixture
def run_cli() -> Callable[..., tuple[int, str]]:
    """Factory that runs ``cli.main`` with in-memory stdin/stdout."""

    def _run(argv: list[str], stdin_text: str) -> tuple[int, str]:
        stdout = io.StringIO()
        code = cli.main(argv, stdin=io.StringIO(stdin_text), stdout=stdout)
        return code, stdout.getvalue()

    return _run
