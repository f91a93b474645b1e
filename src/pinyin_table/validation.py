"""Integrity checks and summary statistics for a loaded pronunciation table."""

from __future__ import annotations

from collections import Counter
from functools import lru_cache
import re
import unicodedata

from pypinyin import constants as pypinyin_constants

from pinyin_table.models import CODE_RE, PinyinEntry
from pinyin_table.table.repository import PinyinTable

VARIANT_RE = re.compile(r"^([a-zv]+)([1-5])$")
EXTRA_VALID_SYLLABLES = {"m", "n", "ng", "hm", "hng", "r"}


def _strip_tone_marks(syllable: str) -> str:
    """Remove tone marks from a pypinyin reading and lowercase it.

    Args:
        syllable: Tone-marked reading such as ``zhōng`` or ``lǜ``.

    Returns:
        Untoned reading where ``ü`` is kept as ``ü``.
    """

    chars: list[str] = []
    for ch in unicodedata.normalize("NFD", syllable.lower()):
        if unicodedata.combining(ch) and ch != "\u0308":
            continue
        chars.append(ch)
    return unicodedata.normalize("NFC", "".join(chars))


@lru_cache(maxsize=1)
def known_syllables() -> frozenset[str]:
    """Collect untoned syllables from pypinyin's single-character dictionary.

    Returns:
        Set of bases such as ``zhong`` and ``lü``.
    """

    syllables: set[str] = set(EXTRA_VALID_SYLLABLES)
    for value in pypinyin_constants.PINYIN_DICT.values():
        for item in str(value).split(","):
            base = _strip_tone_marks(item.strip())
            if base:
                syllables.add(base)
    return frozenset(syllables)


def variant_errors(entry: PinyinEntry) -> list[str]:
    """Return human-readable problems found in one entry."""

    errors: list[str] = []
    if not CODE_RE.fullmatch(entry.code):
        errors.append(f"{entry.code}: code is not uppercase hexadecimal")
    for variant in entry.variants:
        match = VARIANT_RE.fullmatch(variant)
        if not match:
            errors.append(f"{entry.code}: malformed variant '{variant}'")
            continue
        base = match.group(1).replace("v", "ü")
        if base not in known_syllables():
            errors.append(f"{entry.code}: unknown syllable '{match.group(1)}' in '{variant}'")
    return errors


def validate_table(table: PinyinTable) -> None:
    """Validate codes and readings of every table entry.

    Args:
        table: Loaded table to check.

    Raises:
        ValueError: If any code or reading is malformed.
    """

    errors: list[str] = []
    for entry in table.entries():
        errors.extend(variant_errors(entry))

    if errors:
        preview = "\n".join(f"- {item}" for item in errors[:25])
        rest = len(errors) - min(25, len(errors))
        more = f"\n- ... and {rest} more" if rest > 0 else ""
        raise ValueError(f"Dataset validation failed with {len(errors)} errors:\n{preview}{more}")


def collect_variant_counts(table: PinyinTable) -> dict[int, int]:
    """Count entries by how many readings they carry.

    Returns:
        Dictionary of variant count to number of entries.
    """

    counter: Counter[int] = Counter()
    for variants in table.tables.values():
        counter[len(variants)] += 1
    return dict(counter)


def heteronyms(table: PinyinTable) -> list[PinyinEntry]:
    """Return entries with more than one reading, ordered by code point."""

    return [entry for entry in table.entries() if len(entry.variants) > 1]
