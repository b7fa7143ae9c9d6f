#!/usr/bin/env python3
"""
CLI entry point: add a grouping header row above a rendered table.

Usage
-----
    # 3-column HTML table, group the last two columns
    python add_header.py --file table.html --header " " Group=2

    # LaTeX booktabs table; format and booktabs read from the file
    python add_header.py --file table.tex --header Cars=2 Engine=3 -o out.tex

    # Stack two rows: run it twice
    python add_header.py --file table.html --header " " A=2 B=2 -o step1.html
    python add_header.py --file step1.html --header " " Both=4

Header tokens are ``label=span``, a bare label (span 1) or a bare integer.
Metadata not given on the command line is read back from the markup.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from config import FORMAT_SUFFIXES, TableFormat
from header_above import add_header_above, resolve_format
from models import (
    BareNumber,
    HeaderAboveError,
    LabeledEntry,
    SpanEntry,
    TableMeta,
    TableObject,
    UnsupportedFormatError,
)
from table_meta import read_table_meta

logger = logging.getLogger(__name__)


def parse_header_tokens(tokens: list[str]) -> list[SpanEntry]:
    """Turn CLI tokens into span entries.

    ``Group=2`` -> labeled entry spanning 2, ``3`` -> bare number,
    anything else -> labeled entry spanning 1.  A span that is not an
    integer is passed through as text so normalization rejects it.
    """
    entries: list[SpanEntry] = []
    for token in tokens:
        label, sep, span = token.rpartition("=")
        if sep:
            number = _parse_int(span)
            entries.append(LabeledEntry(label, span.strip() if number is None else number))
        elif _parse_int(token) is not None:
            entries.append(BareNumber(_parse_int(token)))
        else:
            entries.append(LabeledEntry(token, 1))
    return entries


def _parse_int(text: str) -> int | None:
    try:
        return int(text)
    except ValueError:
        return None


def detect_format(file_path: Path, explicit: str | None) -> TableFormat:
    if explicit:
        return resolve_format(explicit)
    fmt = FORMAT_SUFFIXES.get(file_path.suffix.lower())
    if fmt is None:
        raise UnsupportedFormatError(None)
    return fmt


def build_table(
    markup: str,
    fmt: TableFormat,
    ncol: int | None = None,
    booktabs: bool | None = None,
) -> TableObject:
    """Wrap *markup* in a ``TableObject``; CLI overrides win over detection."""
    meta = read_table_meta(markup, fmt) if ncol is None or booktabs is None else None
    meta = TableMeta(
        column_count=ncol if ncol is not None else meta.column_count,
        booktabs=booktabs if booktabs is not None else meta.booktabs,
        align=meta.align if meta else (),
        caption=meta.caption if meta else None,
    )
    return TableObject(markup=markup, format=fmt, meta=meta)


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        description="Add a header row (cells may span several columns) above "
                    "the header of a rendered HTML or LaTeX table."
    )
    ap.add_argument("--file", type=str, required=True,
                    help="Path to the rendered table (.html, .htm or .tex).")
    ap.add_argument("--header", nargs="+", required=True, metavar="CELL",
                    help="Cells of the new row: 'label=span', 'label' or N.")
    ap.add_argument("--format", type=str, default=None,
                    help="Table format (html or latex). Default: from the "
                         "file suffix.")
    ap.add_argument("--ncol", type=int, default=None,
                    help="Column count of the table. Default: read from the "
                         "markup.")
    ap.add_argument("--booktabs", action=argparse.BooleanOptionalAction,
                    default=None,
                    help="LaTeX rule style. Default: booktabs iff \\toprule "
                         "occurs in the markup.")
    ap.add_argument("-o", "--output", type=str, default=None,
                    help="Write the result here instead of stdout.")
    ap.add_argument("-v", "--verbose", action="store_true",
                    help="Log debug information to stderr.")

    args = ap.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    path = Path(args.file)
    if not path.exists():
        print(f"Error: file not found: {path}", file=sys.stderr)
        return 1

    try:
        fmt = detect_format(path, args.format)
        table = build_table(
            path.read_text(encoding="utf-8"), fmt, args.ncol, args.booktabs,
        )
        result = add_header_above(table, parse_header_tokens(args.header))
    except HeaderAboveError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.output:
        out_path = Path(args.output)
        out_path.write_text(result.markup, encoding="utf-8")
        print(f"Header row added → {out_path}", file=sys.stderr)
    else:
        sys.stdout.write(result.markup)
    return 0


if __name__ == "__main__":
    sys.exit(main())
