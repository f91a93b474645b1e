"""Parsing utilities for the ``<HEXCODE>=<variant>,<variant>`` dataset format."""

from __future__ import annotations

import io
from typing import BinaryIO, Iterable

from pinyin_table.models import CODE_RE, PinyinEntry, PinyinLoadError

DATASET_ENCODING = "iso-8859-1"
KEY_DELIMITER = "="
VARIANT_DELIMITER = ","


def split_variants(field: str) -> tuple[str, ...]:
    """Split a comma-delimited variant field into readings.

    Trailing empty pieces are dropped, so ``"zhong1,"`` yields ``("zhong1",)``
    and ``","`` yields an empty tuple. Interior empty pieces are kept as-is.

    Args:
        field: Text after the first ``=`` of a dataset line.

    Returns:
        Ordered tuple of readings, possibly empty.
    """

    pieces = field.split(VARIANT_DELIMITER)
    while pieces and not pieces[-1]:
        pieces.pop()
    return tuple(pieces)


def parse_table_line(line: str, line_number: int = 0) -> PinyinEntry | None:
    """Parse one dataset line into an entry.

    Args:
        line: Raw line with its terminator already removed.
        line_number: 1-based position used in error messages.

    Returns:
        The parsed entry, or ``None`` when the line carries no readings.

    Raises:
        PinyinLoadError: If the line has no ``=`` or its key is not uppercase hex.
    """

    code, delimiter, field = line.partition(KEY_DELIMITER)
    if not delimiter:
        raise PinyinLoadError(f"Line {line_number}: missing '{KEY_DELIMITER}' in {line!r}")
    if not code:
        raise PinyinLoadError(f"Line {line_number}: empty character code in {line!r}")
    if not CODE_RE.fullmatch(code):
        raise PinyinLoadError(
            f"Line {line_number}: character code {code!r} is not uppercase hexadecimal"
        )

    variants = split_variants(field)
    if not variants:
        return None
    return PinyinEntry(code=code, variants=variants)


def parse_table_lines(lines: Iterable[str]) -> list[PinyinEntry]:
    """Parse dataset lines into entries, skipping lines without readings.

    Parsing is all-or-nothing: the first malformed line aborts the whole load.

    Args:
        lines: Iterable of raw lines; trailing ``\\r``/``\\n`` are stripped.

    Returns:
        Entries in source order, duplicates included.
    """

    entries: list[PinyinEntry] = []
    for line_number, line in enumerate(lines, start=1):
        entry = parse_table_line(line.rstrip("\r\n"), line_number)
        if entry is not None:
            entries.append(entry)
    return entries


def parse_table_stream(stream: BinaryIO) -> list[PinyinEntry]:
    """Decode a binary dataset stream as ISO-8859-1 and parse every line.

    The stream is closed on every exit path, including parse failures.

    Args:
        stream: Readable binary stream positioned at the start of the dataset.

    Returns:
        Entries in source order.
    """

    with stream, io.TextIOWrapper(stream, encoding=DATASET_ENCODING, newline=None) as handle:
        return parse_table_lines(handle)
