"""Per-line highlighting pipeline."""

from __future__ import annotations

from typing import TYPE_CHECKING

from huegrep.colors import build_style_table
from huegrep.palette import assign_colors, default_vary
from huegrep.patterns import compile_patterns
from huegrep.render import render_line
from huegrep.resolve import resolve_segments
from huegrep.search import find_line_spans

if TYPE_CHECKING:
    from huegrep.models import ColorSegment, PatternColoring, Settings


class Highlighter:
    """Compiles the patterns and colors of a run once, then highlights lines.

    Holds no per-line state: highlighting a line depends only on the line
    and the tables built here.
    """

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        patterns = compile_patterns(
            settings.patterns,
            fixed_string=settings.fixed_strings,
            ignore_case=settings.ignore_case,
        )
        # Full-match highlighting paints with the primary color, which is group 1 when groups vary.
        vary = default_vary(len(patterns), settings.vary_group_colors)
        self.colorings: list[PatternColoring] = assign_colors(patterns, settings.palette, vary_groups=vary)
        self.styles = build_style_table(settings.highlight_mode)

    def segments(self, line: str) -> tuple[list[ColorSegment], bool]:
        """Resolve a line, returning its segments and whether anything matched."""
        spans = find_line_spans(line, self.colorings, full_match_highlight=self.settings.full_match_highlight)
        return resolve_segments(len(line), spans), bool(spans)

    def highlight(self, line: str) -> str | None:
        """Render a line, or return None if it should be left out of the output."""
        segments, matched = self.segments(line)
        if not matched and self.settings.only_matching_lines:
            return None
        return render_line(line, segments, self.styles)
