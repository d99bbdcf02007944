"""Global pytest fixtures for PennyWise."""

from __future__ import annotations

import pytest

pytest_plugins = [
    "tests.fixtures.datagen",
]


@pytest.fixture(autouse=True)
def clean_pennywise_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test without PENNYWISE_* settings leaking in from the shell."""
    for name in (
        "PENNYWISE_DEFAULT_CURRENCY",
        "PENNYWISE_LOG_LEVEL",
        "PENNYWISE_LOGGER_LEVELS",
    ):
        monkeypatch.delenv(name, raising=False)
