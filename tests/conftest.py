"""
Pytest configuration and shared fixtures for hookfetch tests.
"""

import sys
from pathlib import Path

import pytest

_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

from helpers import NOT_FOUND_BODY, TODO_BODY, URL, mock_fetch  # noqa: E402


@pytest.fixture
def url():
    return URL


@pytest.fixture
def success_fetch():
    """200 response carrying a todo item."""
    return mock_fetch(TODO_BODY, expected="success")


@pytest.fixture
def error_fetch():
    """404 response carrying an error message."""
    return mock_fetch(NOT_FOUND_BODY, expected="error")


@pytest.fixture
def mutated_fetch():
    """200 response that records the requests it receives."""
    return mock_fetch(TODO_BODY, expected="mutated")
