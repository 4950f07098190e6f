"""Tests for line input and output."""

from __future__ import annotations

from io import StringIO
from unittest.mock import MagicMock, patch

import pytest

from huegrep.exceptions import OutputWriteError
from huegrep.reader import is_pipe, read_lines, write_line


class TestReadLines:
    def test_strips_newlines(self) -> None:
        assert list(read_lines(StringIO("one\ntwo\n"))) == ["one", "two"]

    def test_last_line_without_newline(self) -> None:
        assert list(read_lines(StringIO("one\ntwo"))) == ["one", "two"]

    def test_keeps_empty_lines(self) -> None:
        assert list(read_lines(StringIO("a\n\nb\n"))) == ["a", "", "b"]

    def test_empty_input(self) -> None:
        assert list(read_lines(StringIO(""))) == []

    def test_strips_crlf(self) -> None:
        stream = StringIO("dos\r\nunix\n", newline="\n")
        assert list(read_lines(stream)) == ["dos", "unix"]

    def test_keeps_carriage_return_inside_line(self) -> None:
        stream = StringIO("a\rb\r\n", newline="\n")
        assert list(read_lines(stream)) == ["a\rb"]

    def test_keeps_carriage_return_without_newline(self) -> None:
        stream = StringIO("last\r", newline="\n")
        assert list(read_lines(stream)) == ["last\r"]

    def test_reads_stdin_by_default(self) -> None:
        with patch("huegrep.reader.sys.stdin", StringIO("piped\n")):
            assert list(read_lines()) == ["piped"]

    def test_is_lazy(self) -> None:
        lines = read_lines(StringIO("a\nb\n"))
        assert next(lines) == "a"


class TestIsPipe:
    def test_pipe(self) -> None:
        with patch("huegrep.reader.sys.stdin", StringIO("")):
            assert is_pipe() is True

    def test_terminal(self) -> None:
        fake_tty = MagicMock()
        fake_tty.isatty.return_value = True
        with patch("huegrep.reader.sys.stdin", fake_tty):
            assert is_pipe() is False


class TestWriteLine:
    def test_appends_newline(self) -> None:
        out = StringIO()
        write_line("hello", out)
        write_line("", out)
        assert out.getvalue() == "hello\n\n"

    def test_writes_stdout_by_default(self) -> None:
        out = StringIO()
        with patch("huegrep.reader.sys.stdout", out):
            write_line("x")
        assert out.getvalue() == "x\n"

    def test_broken_pipe(self) -> None:
        sink = MagicMock()
        sink.write.side_effect = BrokenPipeError(32, "Broken pipe")
        with pytest.raises(OutputWriteError) as exc_info:
            write_line("x", sink)
        assert isinstance(exc_info.value.__cause__, BrokenPipeError)

    def test_closed_stream(self) -> None:
        out = StringIO()
        out.close()
        with pytest.raises(OutputWriteError):
            write_line("x", out)
