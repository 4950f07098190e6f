"""Highlight styles for palette colors."""

from __future__ import annotations

from rich.color import ColorSystem
from rich.style import Style

from huegrep.models import Color, HighlightMode

# Matched text only ever uses the 8 base colors and their bright variants.
COLOR_SYSTEM = ColorSystem.STANDARD


def color_style(color: Color, mode: HighlightMode) -> Style:
    """Return the highlight style of a palette color in the given mode."""
    if mode == HighlightMode.FOREGROUND:
        return Style(color=color.value)
    if mode == HighlightMode.BACKGROUND:
        return Style(bgcolor=color.value)
    return Style(color=f"bright_{color.value}", bgcolor=color.value)


def build_style_table(mode: HighlightMode) -> dict[Color, Style]:
    """Precompute the style of every color for one highlight mode."""
    return {color: color_style(color, mode) for color in Color}
