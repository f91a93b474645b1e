"""Character-level Chinese pinyin lookup and transliteration."""

from .models import PinyinEntry, PinyinLoadError, char_code
from .table.default import get_default_table, load_table
from .table.repository import PinyinTable

__all__ = [
    "PinyinEntry",
    "PinyinLoadError",
    "PinyinTable",
    "char_code",
    "get_default_table",
    "load_table",
]
