"""
Paramount - Test Configuration and Shared Fixtures

Provides pytest configuration and shared fixtures for unit and integration tests.
"""

import os
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest

# Set test environment
os.environ["PARAMOUNT_ENVIRONMENT"] = "test"
os.environ["PARAMOUNT_LOG_LEVEL"] = "DEBUG"

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def _reset_paramount() -> None:
    # Import here so the environment above is in place first
    from paramount.config import reload_config
    from paramount.registry import get_registry
    from paramount.reporting import reset_error_reporter

    get_registry().reset()
    reset_error_reporter()
    reload_config()


@pytest.fixture(autouse=True)  # type: ignore[misc]
def reset_paramount_state() -> Generator[None, None, None]:
    """Restore the process-wide registry, reporter and config around each test."""
    saved_env = {k: v for k, v in os.environ.items() if k.startswith("PARAMOUNT_")}
    _reset_paramount()
    yield
    for key in [k for k in os.environ if k.startswith("PARAMOUNT_")]:
        if key not in saved_env:
            del os.environ[key]
    os.environ.update(saved_env)
    _reset_paramount()


@pytest.fixture  # type: ignore[misc]
def fixtures_dir() -> Path:
    """Directory holding the binding modules loaded by require() tests."""
    return FIXTURES_DIR


class CollectingReporter:
    """Non-raising error reporter that records every reported violation."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, str, Any, str]] = []

    def __call__(self, function_name: str, param_label: str, expected_type: str, value: Any, description: str) -> None:
        self.calls.append((function_name, param_label, expected_type, value, description))

    @property
    def labels(self) -> list[str]:
        return [call[1] for call in self.calls]


@pytest.fixture  # type: ignore[misc]
def collecting_reporter() -> CollectingReporter:
    """A reporter that records violations instead of raising."""
    return CollectingReporter()


@pytest.fixture  # type: ignore[misc]
def sample_options() -> dict[str, Any]:
    """Valid options argument for the bindings fixture."""
    return {
        "option1": 127,
        "option2": "hejsa",
        "stuff": [1, 2],
    }
