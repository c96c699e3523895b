from __future__ import annotations


class HiliteError(Exception):
    """Base class for errors raised by the highlighter."""


class InvalidPatternError(HiliteError):
    """A pattern string could not be compiled.

    Raised while the pattern set is built, so nothing is read from the
    input stream when this happens.
    """

    def __init__(self, pattern: str, index: int, reason: str) -> None:
        self.pattern = pattern
        self.index = index
        self.reason = reason
        super().__init__(f"Error compiling pattern {pattern!r}: {reason}")


class LineMatchError(HiliteError):
    """Matching failed on a single line; the line is passed through as is."""

    def __init__(self, line: str, cause: BaseException) -> None:
        self.line = line
        self.cause = cause
        super().__init__(f"Matching failed on line {line[:40]!r}: {cause}")
