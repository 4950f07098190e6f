"""Overlap resolution of matched spans into a flat coloring plan."""

from __future__ import annotations

from itertools import groupby
from operator import attrgetter
from typing import TYPE_CHECKING

from huegrep.models import ColorSegment

if TYPE_CHECKING:
    from collections.abc import Iterable

    from huegrep.models import Color, MatchSpan

_PAINT_ORDER = attrgetter("pattern_index", "order")


def resolve_segments(length: int, spans: Iterable[MatchSpan]) -> list[ColorSegment]:
    """Resolve overlapping spans into non-overlapping segments covering [0, length).

    Every character starts uncolored. Spans are painted in pattern order, then
    in discovery order, each overwriting what lies beneath: the highest pattern
    index wins, and within a pattern the later match wins. Equal neighbours are
    merged so the result has one segment per color change.

    An empty line resolves to a single empty, uncolored segment.
    """
    if length == 0:
        return [ColorSegment(0, 0, None)]

    cells: list[Color | None] = [None] * length
    for span in sorted(spans, key=_PAINT_ORDER):
        start, end = max(span.start, 0), min(span.end, length)
        if start < end:
            cells[start:end] = [span.color] * (end - start)

    segments: list[ColorSegment] = []
    pos = 0
    for color, run in groupby(cells):
        run_end = pos + sum(1 for _ in run)
        segments.append(ColorSegment(pos, run_end, color))
        pos = run_end
    return segments
