"""Unit tests for the command-line wrapper."""

from __future__ import annotations

from pathlib import Path

import pytest

from pinyin_table.cli import main

FIXTURE = Path(__file__).resolve().parent.parent / "fixtures" / "mini_pinyin.dat"


def test_cli_prints_full_pinyin(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["中国X", "--data", str(FIXTURE)]) == 0

    assert capsys.readouterr().out == "zhongguoX\n"


@pytest.mark.parametrize(
    ("mode", "expected"),
    [("first", "zgX\n"), ("filter", "中国\n")],
)
def test_cli_modes(mode: str, expected: str, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["中国X", "--mode", mode, "--data", str(FIXTURE)]) == 0

    assert capsys.readouterr().out == expected


def test_cli_lookup_mode_prints_table(capsys: pytest.CaptureFixture[str]) -> None:
    main(["中X", "--mode", "lookup", "--data", str(FIXTURE)])

    lines = capsys.readouterr().out.splitlines()
    assert lines[0].split(" | ")[0].strip() == "char"
    assert "zhong1,zhong4" in lines[2]
    assert lines[3].rstrip().endswith("-")


def test_cli_check_prints_summary(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--check", "--data", str(FIXTURE)]) == 0

    out = capsys.readouterr().out
    assert "Loaded 5 entries." in out
    assert "Heteronyms: 4" in out
    assert "Validation passed." in out


def test_cli_missing_dataset_exits(tmp_path: Path) -> None:
    with pytest.raises(SystemExit, match="Dataset not found"):
        main(["中", "--data", str(tmp_path / "missing.dat")])


def test_cli_requires_text_without_check() -> None:
    with pytest.raises(SystemExit):
        main([])
