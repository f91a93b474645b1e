"""Unit tests for dataset validation and statistics."""

from __future__ import annotations

import io

import pytest

from pinyin_table.models import PinyinEntry
from pinyin_table.table.repository import PinyinTable
from pinyin_table.validation import (
    collect_variant_counts,
    heteronyms,
    known_syllables,
    validate_table,
    variant_errors,
)


def _table(text: str) -> PinyinTable:
    return PinyinTable.from_stream(io.BytesIO(text.encode("iso-8859-1")))


def test_known_syllables_include_common_and_u_umlaut_bases() -> None:
    syllables = known_syllables()

    assert {"zhong", "guo", "lü", "nü", "ng"} <= syllables


def test_validate_table_accepts_well_formed_entries() -> None:
    validate_table(_table("4E2D=zhong1,zhong4\n7EFF=lv4,lu4\n4E86=le5,liao3\n"))


def test_variant_errors_flags_malformed_code_and_variants() -> None:
    errors = variant_errors(PinyinEntry(code="4e2d", variants=("zhong", "Zhong1", "xq1")))

    assert errors == [
        "4e2d: code is not uppercase hexadecimal",
        "4e2d: malformed variant 'zhong'",
        "4e2d: malformed variant 'Zhong1'",
        "4e2d: unknown syllable 'xq' in 'xq1'",
    ]


def test_validate_table_aggregates_errors() -> None:
    table = _table("4E2D=zhong\n56FD=guo9\n")

    with pytest.raises(ValueError, match="Dataset validation failed with 2 errors"):
        validate_table(table)


def test_collect_variant_counts_and_heteronyms() -> None:
    table = _table("4E2D=zhong1,zhong4\n56FD=guo2\n548C=he2,he4,huo2\n")

    assert collect_variant_counts(table) == {1: 1, 2: 1, 3: 1}
    assert [entry.code for entry in heteronyms(table)] == ["4E2D", "548C"]
