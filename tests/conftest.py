"""
Pytest configuration and shared fixtures for streamedit tests.
"""

import pytest

from streamedit.patterns import function_matcher
from streamedit.types import MatchResult
from streamedit.utils.logger import PACKAGE_NAME, logger


@pytest.fixture
def reset_logging():
    """Undo any configure_logging() a test (or the CLI) performed."""
    yield
    logger.remove()
    logger.disable(PACKAGE_NAME)


@pytest.fixture
def call_log() -> list:
    """Shared list that recording matchers and editors append to."""
    return []


@pytest.fixture
def recording_digit(call_log):
    """Single-digit matcher that logs every offset it is tried at."""

    def parse(text: str, pos: int):
        call_log.append(("try", pos))
        if pos < len(text) and text[pos].isdigit():
            return MatchResult(int(text[pos]), pos + 1)
        return None

    return function_matcher(parse)
