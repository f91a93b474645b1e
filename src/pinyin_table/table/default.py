"""Process-wide shared pronunciation table with guarded lazy initialization."""

from __future__ import annotations

import os
import threading
from pathlib import Path

from pinyin_table.table.repository import PinyinTable

DATA_PATH_ENV = "PINYIN_TABLE_DATA"

_lock = threading.Lock()
_default_table: PinyinTable | None = None


def resolve_dataset_path(path: Path | None = None) -> Path | None:
    """Resolve which dataset file to load.

    Args:
        path: Explicit dataset path, preferred when given.

    Returns:
        The explicit path, else the ``PINYIN_TABLE_DATA`` path, else ``None``
        meaning the dataset bundled with the package.
    """

    if path is not None:
        return path
    configured = os.environ.get(DATA_PATH_ENV, "").strip()
    if configured:
        return Path(configured)
    return None


def load_table(path: Path | None = None) -> PinyinTable:
    """Load a fresh table from the resolved dataset location.

    Raises:
        PinyinLoadError: If the dataset cannot be loaded.
    """

    resolved = resolve_dataset_path(path)
    if resolved is None:
        return PinyinTable.from_resource()
    return PinyinTable.from_path(resolved)


def get_default_table() -> PinyinTable:
    """Return the shared table, loading it on first use.

    Concurrent first calls load the dataset exactly once. A failed load is not
    cached, so the error propagates to every caller that triggers a load.

    Raises:
        PinyinLoadError: If the dataset cannot be loaded.
    """

    global _default_table

    table = _default_table
    if table is not None:
        return table
    with _lock:
        if _default_table is None:
            _default_table = load_table()
        return _default_table
