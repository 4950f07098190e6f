"""Shared test fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from huegrep.highlight import Highlighter
from huegrep.models import Settings

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

SAMPLE_LINES = [
    "2024-01-15 ERROR: Connection failed for user=alice",
    "2024-01-15 INFO: Server started",
    "2024-01-15 WARN: High memory usage",
    "",
    "plain text without anything interesting",
]


@pytest.fixture
def sample_lines() -> list[str]:
    """Log-like lines, including an empty one."""
    return list(SAMPLE_LINES)


@pytest.fixture
def make_highlighter() -> Callable[..., Highlighter]:
    """Build a Highlighter from patterns and Settings overrides."""

    def _make(*patterns: str, **overrides: Any) -> Highlighter:
        return Highlighter(Settings(patterns=patterns, **overrides))

    return _make


@pytest.fixture
def config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the config directory at an empty temporary directory."""
    monkeypatch.setenv("HUEGREP_CONFIG_DIR", str(tmp_path))
    return tmp_path
