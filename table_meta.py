"""
Read structural metadata back out of rendered table markup.

The library itself always trusts ``TableObject.meta``.  This module is for
callers that only have the markup (e.g. the command-line entry point) and
need a ``TableMeta`` to go with it:

- HTML: column count and alignment from the bottom ``<thead>`` row,
  caption from ``<caption>``.
- LaTeX: column count and alignment from the ``tabular`` preamble,
  booktabs from the presence of ``\\toprule``, caption from ``\\caption``.
"""

from __future__ import annotations

import re

from bs4 import BeautifulSoup

from config import HTML_PARSER, TOPRULE, TableFormat
from models import StructuralParseError, TableMeta
from writer_html import bottom_header_row, count_cells, find_thead

# CSS text-align value → LaTeX-style alignment letter
ALIGN_CODES: dict[str, str] = {
    "left": "l",
    "center": "c",
    "right": "r",
}

RE_TEXT_ALIGN = re.compile(r"text-align\s*:\s*(\w+)")

# \begin{tabular}, \begin{tabular*}{w}, \begin{tabularx}{w}, \begin{longtable}
RE_TABULAR_BEGIN = re.compile(r"\\begin\{(tabular\*?|tabularx|tabulary|longtable|array)\}")
_ENVS_WITH_WIDTH = {"tabular*", "tabularx", "tabulary"}

RE_CAPTION = re.compile(r"\\caption(?:\[[^\]]*\])?\s*(?=\{)")


def read_table_meta(markup: str, fmt: TableFormat) -> TableMeta:
    """Return the ``TableMeta`` implied by *markup* rendered as *fmt*."""
    if fmt is TableFormat.HTML:
        return _read_html_meta(markup)
    return _read_latex_meta(markup)


# ── HTML ──


def _read_html_meta(markup: str) -> TableMeta:
    soup = BeautifulSoup(markup, HTML_PARSER)
    table = soup.find("table")
    if table is None:
        raise StructuralParseError("No <table> element found in the markup.")

    row = bottom_header_row(find_thead(table))
    align = []
    for cell in row.find_all(["th", "td"], recursive=False):
        m = RE_TEXT_ALIGN.search(cell.get("style", ""))
        align.append(ALIGN_CODES.get(m.group(1).lower(), "l") if m else "l")

    caption = table.find("caption", recursive=False)
    return TableMeta(
        column_count=count_cells(row),
        align=tuple(align),
        caption=caption.get_text(strip=True) if caption else None,
    )


# ── LaTeX ──


def _read_latex_meta(markup: str) -> TableMeta:
    m = RE_TABULAR_BEGIN.search(markup)
    if m is None:
        raise StructuralParseError("No tabular environment found in the markup.")

    pos = m.end()
    if m.group(1) in _ENVS_WITH_WIDTH:
        _, pos = _read_group(markup, pos)
    pos = _skip_optional(markup, pos)
    preamble, _ = _read_group(markup, pos)
    align = parse_column_spec(preamble)

    caption = None
    cm = RE_CAPTION.search(markup)
    if cm:
        caption, _ = _read_group(markup, cm.end())

    return TableMeta(
        column_count=len(align),
        booktabs=TOPRULE in markup,
        align=align,
        caption=caption,
    )


def parse_column_spec(spec: str) -> tuple[str, ...]:
    """Alignment letters of a tabular preamble such as ``l|*{2}{r}|p{3cm}``.

    Rules (``|``), spacing and inter-column material (``@{}``, ``!{}``,
    ``>{}``, ``<{}``) are skipped.
    """
    align: list[str] = []
    i = 0
    while i < len(spec):
        ch = spec[i]
        if ch in "lcrXSLCRJ":
            align.append(ch)
            i += 1
        elif ch in "pmbw":
            align.append(ch)
            i = _read_group(spec, i + 1)[1]
            if ch == "w":
                i = _read_group(spec, i)[1]
        elif ch in "@!><":
            i = _read_group(spec, i + 1)[1]
        elif ch == "*":
            count, i = _read_group(spec, i + 1)
            inner, i = _read_group(spec, i)
            if not count.strip().isdigit():
                raise StructuralParseError(f"Bad repeat count in column spec: {count!r}")
            align.extend(parse_column_spec(inner) * int(count))
        else:
            i += 1
    return tuple(align)


def _skip_optional(text: str, pos: int) -> int:
    """Skip whitespace and one ``[...]`` optional argument at *pos*."""
    while pos < len(text) and text[pos].isspace():
        pos += 1
    if pos < len(text) and text[pos] == "[":
        end = text.find("]", pos)
        if end != -1:
            return end + 1
    return pos


def _read_group(text: str, pos: int) -> tuple[str, int]:
    """Read the brace group starting at *pos* (after optional whitespace).

    Returns the group's inner text and the index just past its closing
    brace.
    """
    while pos < len(text) and text[pos].isspace():
        pos += 1
    if pos >= len(text) or text[pos] != "{":
        raise StructuralParseError(f"Expected '{{' at position {pos} in {text!r}.")

    depth = 0
    for i in range(pos, len(text)):
        if text[i] == "{":
            depth += 1
        elif text[i] == "}":
            depth -= 1
            if depth == 0:
                return text[pos + 1:i], i + 1
    raise StructuralParseError(f"Unbalanced braces in {text!r}.")
