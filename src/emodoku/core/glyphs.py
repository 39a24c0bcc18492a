"""GlyphMap — display symbols chosen by the user for the values 1..9."""

from __future__ import annotations

from collections.abc import Iterable

from emodoku.core.errors import GlyphConflictError
from emodoku.core.types import GRID_SIZE, VALUES, check_value

DEFAULT_GLYPHS: tuple[str, ...] = tuple(str(v) for v in VALUES)


class GlyphMap:
    """Bidirectional value <-> glyph table.

    Each value 1..9 maps to exactly one single-character glyph and no glyph
    is shared by two values. Edits that would break this are rejected with
    :class:`GlyphConflictError` and leave the table untouched. The table only
    affects display; the wire protocol always uses decimal digits.
    """

    __slots__ = ("_glyphs", "_values")

    def __init__(self, glyphs: Iterable[str] | None = None) -> None:
        self._glyphs: list[str] = list(DEFAULT_GLYPHS)
        self._values: dict[str, int] = {}
        if glyphs is not None:
            self.set_all(glyphs)
        else:
            self._rebuild()

    # ── Lookups ──────────────────────────────────────────────────────────

    def glyph_for(self, value: int) -> str:
        """Return the current glyph for *value*."""
        return self._glyphs[check_value(value) - 1]

    def value_for_glyph(self, glyph: str) -> int | None:
        """Return the value displayed as *glyph*, or ``None``."""
        return self._values.get(glyph)

    def glyphs(self) -> tuple[str, ...]:
        """The nine glyphs in value order."""
        return tuple(self._glyphs)

    # ── Edits ────────────────────────────────────────────────────────────

    def set_glyph(self, value: int, glyph: str) -> None:
        """Bind *glyph* to *value*.

        Raises:
            GlyphConflictError: *glyph* is not one character, or another
                value already uses it.
        """
        check_value(value)
        self._check_glyph(value, glyph)
        owner = self._values.get(glyph)
        if owner is not None and owner != value:
            raise GlyphConflictError(
                value, glyph, f"Glyph {glyph!r} is already used for {owner}"
            )
        self._glyphs[value - 1] = glyph
        self._rebuild()

    def set_all(self, glyphs: Iterable[str]) -> None:
        """Replace the whole table at once (validated before applying)."""
        new = list(glyphs)
        if len(new) != GRID_SIZE:
            raise ValueError(f"Expected {GRID_SIZE} glyphs, got {len(new)}")
        seen: dict[str, int] = {}
        for value, glyph in zip(VALUES, new):
            self._check_glyph(value, glyph)
            if glyph in seen:
                raise GlyphConflictError(
                    value, glyph, f"Glyph {glyph!r} is already used for {seen[glyph]}"
                )
            seen[glyph] = value
        self._glyphs = new
        self._rebuild()

    def reset(self) -> None:
        """Restore the decimal-digit defaults."""
        self._glyphs = list(DEFAULT_GLYPHS)
        self._rebuild()

    # ── Internals ────────────────────────────────────────────────────────

    def _rebuild(self) -> None:
        self._values = {glyph: value for value, glyph in zip(VALUES, self._glyphs)}

    @staticmethod
    def _check_glyph(value: int, glyph: str) -> None:
        if not isinstance(glyph, str) or len(glyph) != 1 or glyph.isspace():
            raise GlyphConflictError(
                value, str(glyph), f"Glyph must be a single visible character: {glyph!r}"
            )

    def __repr__(self) -> str:
        return f"GlyphMap({''.join(self._glyphs)!r})"
