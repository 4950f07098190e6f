"""Exceptions raised by huegrep.

Every error is fatal: the command line reports it and exits non-zero.

- HueGrepError (base)
  - PatternCompileError (a pattern is not a valid regular expression)
  - ConflictingFlagsError (mutually exclusive options given together)
  - OutputWriteError (standard output cannot be written, e.g. broken pipe)
"""

from __future__ import annotations


class HueGrepError(Exception):
    """Base class for all huegrep errors."""

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class PatternCompileError(HueGrepError):
    """A pattern could not be compiled."""

    def __init__(self, pattern: str, error: Exception) -> None:
        super().__init__(f"invalid pattern {pattern!r}", original_error=error)
        self.pattern = pattern


class ConflictingFlagsError(HueGrepError):
    """Two mutually exclusive options were both given."""

    def __init__(self, first: str, second: str) -> None:
        super().__init__(f"options {first} and {second} cannot be used together")
        self.first = first
        self.second = second


class OutputWriteError(HueGrepError):
    """The output stream refused a write."""

    def __init__(self, error: Exception) -> None:
        super().__init__("cannot write output", original_error=error)
