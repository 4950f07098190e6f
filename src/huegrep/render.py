"""Render a resolved line as text with ANSI escape sequences."""

from __future__ import annotations

from typing import TYPE_CHECKING

from huegrep.colors import COLOR_SYSTEM

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from rich.style import Style

    from huegrep.models import Color, ColorSegment


def render_line(line: str, segments: Sequence[ColorSegment], styles: Mapping[Color, Style]) -> str:
    """Join the segments of a line, wrapping each colored one in its style.

    Each colored segment gets its own start sequence and a reset, so color
    never leaks past the segment. Empty segments produce nothing.
    """
    parts: list[str] = []
    for start, end, color in segments:
        text = line[start:end]
        if color is None:
            parts.append(text)
        else:
            parts.append(styles[color].render(text, color_system=COLOR_SYSTEM))
    return "".join(parts)
