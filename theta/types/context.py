"""Per-run mutable state that is independent of lexical scope.

A Context is created once per interpreter run and threaded by reference
through evaluation. It owns the output sink that `write` targets and the
input source `readline` reads from.
"""

from __future__ import annotations

import sys
from io import StringIO
from typing import Optional, Protocol, TextIO

from theta.errors import ThetaInputError


class OutputSink(Protocol):
    def write(self, text: str) -> None: ...


class StdoutSink:
    """Writes straight through to the process's standard output."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def write(self, text: str) -> None:
        # Resolve sys.stdout late so that pytest's capsys sees the output.
        stream = self.stream or sys.stdout
        stream.write(text)
        stream.flush()


class BufferSink:
    """Accumulates everything written in memory."""

    def __init__(self):
        self.buffer = StringIO()

    def write(self, text: str) -> None:
        self.buffer.write(text)

    def getvalue(self) -> str:
        return self.buffer.getvalue()


class Context:
    __slots__ = ("stdout", "stdin")

    def __init__(self, stdout: Optional[OutputSink] = None, stdin: Optional[TextIO] = None):
        self.stdout: OutputSink = stdout if stdout is not None else StdoutSink()
        self.stdin = stdin

    @classmethod
    def in_memory(cls, input_text: str = "") -> Context:
        """A context that captures output and reads from `input_text`."""
        return cls(BufferSink(), StringIO(input_text))

    def write_line(self, text: str) -> None:
        self.stdout.write(text + "\n")

    def read_line(self) -> str:
        stream = self.stdin if self.stdin is not None else sys.stdin
        line = stream.readline()
        if not line:
            raise ThetaInputError("readline reached the end of input")
        return line.rstrip("\r\n")

    @property
    def output(self) -> str:
        """Captured output, or '' when writing through to stdout."""
        if isinstance(self.stdout, BufferSink):
            return self.stdout.getvalue()
        return ""
