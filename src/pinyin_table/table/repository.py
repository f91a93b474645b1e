"""Read-only pronunciation table built from the character dataset."""

from __future__ import annotations

from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from types import MappingProxyType
from typing import BinaryIO, Iterable, Iterator, Mapping

from pinyin_table.models import PinyinEntry, PinyinLoadError, char_code
from pinyin_table.table.parser import parse_table_stream

RESOURCE_PACKAGE = "pinyin_table"
RESOURCE_DIR = "data"
RESOURCE_NAME = "ChinesePinyin.dat"


@dataclass(frozen=True, eq=False)
class PinyinTable:
    """Immutable mapping from character code to ordered pronunciation variants.

    Tables are built once by one of the ``from_*`` constructors and are safe to
    share between threads without locking. Query methods are pure functions of
    the table and their input; characters without an entry are passed through
    (or dropped by :meth:`filter_recognized`) and never raise.
    """

    tables: Mapping[str, tuple[str, ...]]

    def __post_init__(self) -> None:
        frozen = {code: tuple(variants) for code, variants in self.tables.items()}
        object.__setattr__(self, "tables", MappingProxyType(frozen))

    @classmethod
    def from_entries(cls, entries: Iterable[PinyinEntry]) -> PinyinTable:
        """Build a table from parsed entries; later codes replace earlier ones."""

        mapping: dict[str, tuple[str, ...]] = {}
        for entry in entries:
            mapping[entry.code] = entry.variants
        return cls(mapping)

    @classmethod
    def from_stream(cls, stream: BinaryIO) -> PinyinTable:
        """Load a table from an ISO-8859-1 encoded binary stream.

        The stream is always closed before this method returns or raises.

        Raises:
            PinyinLoadError: If the stream cannot be read, is not a binary
                stream, or a line is malformed.
        """

        try:
            entries = parse_table_stream(stream)
        except PinyinLoadError:
            raise
        except (OSError, TypeError, ValueError) as exc:
            raise PinyinLoadError(f"Failed to read pinyin dataset: {exc}") from exc
        return cls.from_entries(entries)

    @classmethod
    def from_path(cls, path: Path) -> PinyinTable:
        """Load a table from a dataset file on disk.

        Raises:
            PinyinLoadError: If the file cannot be opened, read, or parsed.
        """

        try:
            stream = Path(path).open("rb")
        except OSError as exc:
            raise PinyinLoadError(f"Pinyin dataset not readable: {path}") from exc
        return cls.from_stream(stream)

    @classmethod
    def from_resource(cls) -> PinyinTable:
        """Load the dataset bundled with the package.

        Raises:
            PinyinLoadError: If the packaged resource is missing or malformed.
        """

        resource = resources.files(RESOURCE_PACKAGE).joinpath(RESOURCE_DIR, RESOURCE_NAME)
        try:
            stream = resource.open("rb")
        except OSError as exc:
            raise PinyinLoadError(f"Bundled pinyin dataset not readable: {resource}") from exc
        return cls.from_stream(stream)

    def __len__(self) -> int:
        return len(self.tables)

    def __contains__(self, ch: object) -> bool:
        return isinstance(ch, str) and len(ch) == 1 and char_code(ch) in self.tables

    def entries(self) -> Iterator[PinyinEntry]:
        """Yield every entry ordered by numeric code point."""

        for code in sorted(self.tables, key=lambda item: (len(item), item)):
            yield PinyinEntry(code=code, variants=self.tables[code])

    def lookup(self, ch: str) -> tuple[str, ...] | None:
        """Return the toned readings of one character.

        Args:
            ch: A single character.

        Returns:
            The stored variant tuple, or ``None`` when the character is unknown.

        Raises:
            ValueError: If ``ch`` is not exactly one character.
        """

        if len(ch) != 1:
            raise ValueError(f"Expected a single character, got {ch!r}")
        return self.tables.get(char_code(ch))

    def filter_recognized(self, text: str | None) -> str | None:
        """Keep only characters that have at least one known reading."""

        if text is None:
            return None
        return "".join(ch for ch in text if self.lookup(ch) is not None)

    def to_full_pinyin(self, text: str | None) -> str | None:
        """Transliterate to untoned lowercase pinyin; unknown characters pass through.

        Each known character contributes its canonical reading minus the
        trailing tone character, so a one-character reading contributes nothing.
        """

        if text is None:
            return None
        parts: list[str] = []
        for ch in text:
            variants = self.lookup(ch)
            parts.append(ch if variants is None else variants[0][:-1])
        return "".join(parts)

    def to_first_letters(self, text: str | None) -> str | None:
        """Transliterate to the first letter of each canonical reading."""

        if text is None:
            return None
        parts: list[str] = []
        for ch in text:
            variants = self.lookup(ch)
            parts.append(ch if variants is None else variants[0][:1])
        return "".join(parts)
