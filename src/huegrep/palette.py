"""Deterministic color assignment for patterns and their capturing groups.

A single cursor walks the palette across all patterns in order. A pattern
with uniform coloring takes one slot; a pattern whose groups vary takes one
slot per capturing group. The cursor wraps around the palette, so colors
only repeat once every color has been used.
"""

from __future__ import annotations

import logging
from itertools import cycle, islice
from typing import TYPE_CHECKING

from huegrep.models import Color, PatternColoring

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from huegrep.models import Pattern

logger = logging.getLogger(__name__)


def default_vary(pattern_count: int, override: bool | None = None) -> bool:
    """Whether capturing groups get their own colors.

    Without an explicit override, groups vary only when a single pattern was given.
    """
    if override is not None:
        return override
    return pattern_count == 1


def _take(slots: Iterator[Color], count: int) -> tuple[Color, ...]:
    return tuple(islice(slots, count))


def assign_colors(
    patterns: Sequence[Pattern],
    palette: Sequence[Color],
    *,
    vary_groups: bool,
) -> list[PatternColoring]:
    """Build the coloring table, index-aligned with patterns."""
    slots = cycle(palette)
    table: list[PatternColoring] = []
    for pattern in patterns:
        if vary_groups and pattern.group_count > 0:
            group_colors = _take(slots, pattern.group_count)
            coloring = PatternColoring(pattern=pattern, color=group_colors[0], group_colors=group_colors)
        else:
            coloring = PatternColoring(pattern=pattern, color=next(slots))
        table.append(coloring)

    for i, c in enumerate(table):
        logger.debug("pattern %d colored %s, groups %s", i, c.color, [str(g) for g in c.group_colors])
    return table
