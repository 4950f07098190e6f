"""Multi-pattern, multi-color regular expression highlighter."""

__version__ = "0.1.0"
