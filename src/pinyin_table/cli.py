"""CLI entrypoint for character-level pinyin lookup and transliteration."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

from pinyin_table.models import char_code
from pinyin_table.table.default import get_default_table, load_table
from pinyin_table.table.repository import PinyinTable
from pinyin_table.validation import collect_variant_counts, heteronyms, validate_table

MODES = ("full", "first", "filter", "lookup")


def _format_table(headers: Sequence[str], data_rows: Sequence[Sequence[str]]) -> str:
    """Format rows as an ASCII table for terminal output.

    Args:
        headers: Table headers.
        data_rows: Row values.

    Returns:
        Monospace table string.
    """

    widths = [len(header) for header in headers]
    for row in data_rows:
        for idx, value in enumerate(row):
            widths[idx] = max(widths[idx], len(value))

    header_line = " | ".join(header.ljust(widths[idx]) for idx, header in enumerate(headers))
    separator_line = "-+-".join("-" * width for width in widths)
    body_lines = [
        " | ".join(value.ljust(widths[idx]) for idx, value in enumerate(row)) for row in data_rows
    ]
    return "\n".join([header_line, separator_line, *body_lines])


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct CLI argument parser.

    Returns:
        Configured parser for the lookup command.
    """

    parser = argparse.ArgumentParser(description="Look up and transliterate Chinese characters.")
    parser.add_argument("text", nargs="?", default=None, help="Text to process.")
    parser.add_argument(
        "--mode",
        choices=MODES,
        default="full",
        help="full pinyin, first letters, filter to known characters, or per-character lookup.",
    )
    parser.add_argument(
        "--data",
        type=Path,
        default=None,
        help="Dataset path (default: $PINYIN_TABLE_DATA or the bundled dataset).",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Print dataset statistics and validate every entry.",
    )
    return parser


def _print_lookup(table: PinyinTable, text: str) -> None:
    """Print one row per character with its code and readings."""

    rows = []
    for ch in text:
        variants = table.lookup(ch)
        rows.append([ch, char_code(ch), ",".join(variants) if variants else "-"])
    print(_format_table(["char", "code", "variants"], rows))


def _print_dataset_summary(table: PinyinTable) -> None:
    """Print entry counts, variant-count distribution, and validation status."""

    print(f"Loaded {len(table)} entries.")
    counts = collect_variant_counts(table)
    count_rows = [[str(size), str(counts[size])] for size in sorted(counts)]
    print("\nEntries by number of readings:")
    print(_format_table(["variants", "entries"], count_rows))
    print(f"\nHeteronyms: {len(heteronyms(table))}")

    validate_table(table)
    print("Validation passed.")


def main(argv: Sequence[str] | None = None) -> int:
    """Run CLI workflow from arguments to printed output.

    Returns:
        Zero exit status on success.
    """

    parser = build_arg_parser()
    args = parser.parse_args(argv)

    if args.data is not None and not args.data.exists():
        raise SystemExit(f"Dataset not found: {args.data}")
    if args.text is None and not args.check:
        parser.error("text is required unless --check is given")

    table = load_table(args.data) if args.data is not None else get_default_table()

    if args.check:
        _print_dataset_summary(table)
    if args.text is None:
        return 0

    if args.mode == "lookup":
        _print_lookup(table, args.text)
    elif args.mode == "first":
        print(table.to_first_letters(args.text))
    elif args.mode == "filter":
        print(table.filter_recognized(args.text))
    else:
        print(table.to_full_pinyin(args.text))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
