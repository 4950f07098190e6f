"""Reading input lines and writing rendered ones."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from huegrep.exceptions import OutputWriteError

if TYPE_CHECKING:
    from collections.abc import Iterator


def is_pipe() -> bool:
    """Check if stdin is a pipe (not a terminal)."""
    return not sys.stdin.isatty()


def read_lines(stream: TextIO | None = None) -> Iterator[str]:
    """Yield lines from a stream (stdin by default) without their LF or CRLF ending."""
    source = stream if stream is not None else sys.stdin
    for raw_line in source:
        if raw_line.endswith("\n"):
            yield raw_line[:-1].removesuffix("\r")
        else:
            yield raw_line


def write_line(text: str, stream: TextIO | None = None) -> None:
    """Write one rendered line and flush it.

    Raises OutputWriteError if the stream is closed or gone.
    """
    sink = stream if stream is not None else sys.stdout
    try:
        sink.write(text + "\n")
        sink.flush()
    except (OSError, ValueError) as e:
        raise OutputWriteError(e) from e
