"""Exception hierarchy for the editor core."""

from __future__ import annotations


class EmodokuError(Exception):
    """Base class for all editor errors."""


class ProtocolError(EmodokuError, ValueError):
    """A solver response could not be decoded or has the wrong shape."""


class NotReadyError(EmodokuError, LookupError):
    """Possibilities were requested before the first solver response."""


class GlyphConflictError(EmodokuError, ValueError):
    """A glyph edit was rejected (duplicate or not a single character)."""

    def __init__(self, value: int, glyph: str, message: str) -> None:
        super().__init__(message)
        self.value = value
        self.glyph = glyph


class PuzzleTextError(EmodokuError, ValueError):
    """Puzzle text could not be parsed.

    Args:
        message: What went wrong.
        line: 1-based line number of the offending character.
        column: 1-based character position within that line.
    """

    def __init__(self, message: str, line: int = 0, column: int = 0) -> None:
        if line:
            message = f"{message}: line {line}, character {column}"
        super().__init__(message)
        self.line = line
        self.column = column
