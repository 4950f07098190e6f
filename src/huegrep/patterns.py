"""Pattern compilation."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from huegrep.exceptions import PatternCompileError
from huegrep.models import Pattern

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


def compile_pattern(source: str, *, fixed_string: bool = False, ignore_case: bool = False) -> Pattern:
    """Compile one pattern.

    Fixed strings are matched literally and never have capturing groups.
    Raises PatternCompileError if a regular expression is invalid.
    """
    flags = re.IGNORECASE if ignore_case else 0
    expression = re.escape(source) if fixed_string else source
    try:
        regex = re.compile(expression, flags)
    except re.error as e:
        raise PatternCompileError(source, e) from e
    return Pattern(source=source, fixed_string=fixed_string, case_insensitive=ignore_case, regex=regex)


def compile_patterns(sources: Sequence[str], *, fixed_string: bool = False, ignore_case: bool = False) -> list[Pattern]:
    """Compile all patterns, keeping their order.

    The first invalid pattern aborts compilation of the whole list.
    """
    patterns = [compile_pattern(s, fixed_string=fixed_string, ignore_case=ignore_case) for s in sources]
    for i, p in enumerate(patterns):
        logger.debug("pattern %d: %r (%d groups)", i, p.source, p.group_count)
    return patterns
