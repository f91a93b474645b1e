"""Data models shared by the dataset parser and the pronunciation table.

The table is keyed by character code, the uppercase hexadecimal form of a
Unicode code point, because that is how the bundled dataset spells its keys.
"""

from __future__ import annotations

from dataclasses import dataclass
import re

CODE_RE = re.compile(r"^[0-9A-F]+$")


class PinyinLoadError(ValueError):
    """Raised when the pronunciation dataset cannot be opened, read, or parsed.

    A table that failed to load is never returned; callers should treat this as
    a fatal initialization failure.
    """


@dataclass(frozen=True)
class PinyinEntry:
    """One dataset record mapping a character code to its readings.

    ``variants`` keeps the order of the source line. The first variant is the
    canonical reading used for transliteration; every variant ends with one
    tone-indicator character.
    """

    code: str
    variants: tuple[str, ...]

    @property
    def canonical(self) -> str:
        """Return the default reading of the character."""

        return self.variants[0]

    @property
    def char(self) -> str:
        """Return the character this entry describes."""

        return chr(int(self.code, 16))


def char_code(ch: str) -> str:
    """Return the character code used as a table key.

    Args:
        ch: A single character.

    Returns:
        Uppercase hexadecimal code point without zero padding, e.g. ``4E2D``.
    """

    return format(ord(ch), "X")
