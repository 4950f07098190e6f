"""Pydantic models and core records for huegrep."""

from __future__ import annotations

import re  # noqa: TC003
from dataclasses import dataclass
from enum import StrEnum
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, field_validator


class Color(StrEnum):
    """Terminal base colors usable for highlighting."""

    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"


# Black and white are left out, they vanish on most terminal themes.
DEFAULT_PALETTE: tuple[Color, ...] = (
    Color.RED,
    Color.GREEN,
    Color.YELLOW,
    Color.BLUE,
    Color.MAGENTA,
    Color.CYAN,
)


class HighlightMode(StrEnum):
    """Which parts of a character cell a highlight colors."""

    BOTH = "both"
    FOREGROUND = "foreground"
    BACKGROUND = "background"


def _check_palette(value: tuple[Color, ...] | None) -> tuple[Color, ...] | None:
    if value is not None and not value:
        msg = "palette must contain at least one color"
        raise ValueError(msg)
    return value


class AppConfig(BaseModel):
    """Defaults read from the configuration file."""

    ignore_case: bool = False
    fixed_strings: bool = False
    full_match_highlight: bool = False
    only_matching_lines: bool = False
    highlight_mode: HighlightMode = HighlightMode.BOTH
    vary_group_colors: bool | None = None
    palette: tuple[Color, ...] | None = None

    @field_validator("palette")
    @classmethod
    def _palette_not_empty(cls, value: tuple[Color, ...] | None) -> tuple[Color, ...] | None:
        return _check_palette(value)


class Settings(BaseModel):
    """The resolved, read-only configuration of one run."""

    model_config = ConfigDict(frozen=True)

    patterns: tuple[str, ...]
    fixed_strings: bool = False
    ignore_case: bool = False
    highlight_mode: HighlightMode = HighlightMode.BOTH
    full_match_highlight: bool = False
    only_matching_lines: bool = False
    vary_group_colors: bool | None = None
    palette: tuple[Color, ...] = DEFAULT_PALETTE

    @field_validator("palette")
    @classmethod
    def _palette_not_empty(cls, value: tuple[Color, ...]) -> tuple[Color, ...]:
        return _check_palette(value)  # type: ignore[return-value]


@dataclass(frozen=True)
class Pattern:
    """A compiled pattern, index-aligned with the command line order."""

    source: str
    fixed_string: bool
    case_insensitive: bool
    regex: re.Pattern[str]

    @property
    def group_count(self) -> int:
        return self.regex.groups


@dataclass(frozen=True)
class PatternColoring:
    """Colors resolved for one pattern: a primary color plus one per capturing group."""

    pattern: Pattern
    color: Color
    group_colors: tuple[Color, ...] = ()

    @property
    def varies_groups(self) -> bool:
        return bool(self.group_colors)


class MatchSpan(NamedTuple):
    """A colored range found on a line, before overlap resolution."""

    start: int
    end: int
    color: Color
    pattern_index: int
    order: int


class ColorSegment(NamedTuple):
    """A maximal run of a line sharing one color (or none)."""

    start: int
    end: int
    color: Color | None
