"""Line matcher: find the colored spans of every pattern on one line."""

from __future__ import annotations

from typing import TYPE_CHECKING

from huegrep.models import MatchSpan

if TYPE_CHECKING:
    import re
    from collections.abc import Sequence

    from huegrep.models import PatternColoring

_UNMATCHED = (-1, -1)


def _group_spans(match: re.Match[str], coloring: PatternColoring) -> list[tuple[int, int, int]]:
    """Return (start, end, group) for every group that took part in the match."""
    spans: list[tuple[int, int, int]] = []
    for group in range(1, coloring.pattern.group_count + 1):
        start, end = match.span(group)
        if (start, end) != _UNMATCHED:
            spans.append((start, end, group))
    return spans


def find_line_spans(
    line: str,
    colorings: Sequence[PatternColoring],
    *,
    full_match_highlight: bool = False,
) -> list[MatchSpan]:
    """Run every pattern over a line and return its colored spans.

    Patterns are visited in index order and each pattern's matches left to
    right, so `order` reflects discovery. When a match has participating
    capturing groups (and full-match highlighting is off) only the groups are
    reported; otherwise the whole match is, in the pattern's primary color.
    Zero-width matches yield zero-width spans.
    """
    spans: list[MatchSpan] = []
    for pattern_index, coloring in enumerate(colorings):
        use_groups = not full_match_highlight and coloring.pattern.group_count > 0
        for match in coloring.pattern.regex.finditer(line):
            groups = _group_spans(match, coloring) if use_groups else []
            if not groups:
                spans.append(MatchSpan(match.start(), match.end(), coloring.color, pattern_index, len(spans)))
                continue
            for start, end, group in groups:
                color = coloring.group_colors[group - 1] if coloring.varies_groups else coloring.color
                spans.append(MatchSpan(start, end, color, pattern_index, len(spans)))
    return spans
