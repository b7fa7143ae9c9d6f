"""
Add a header row on top of a rendered table's current header.

Tables with several header rows are useful to show grouped columns.
``add_header_above`` takes a table already rendered to HTML or LaTeX and
inserts one grouping row above its existing header::

    add_header_above(table, {" ": 1, "Group": 2})

groups columns 2-3 of a 3-column table under "Group".  Call it again on
the result to stack another row on top; each call checks the new spec
against ``table.meta.column_count``, so the caller keeps that consistent.
"""

from __future__ import annotations

import logging
from typing import Any

from base_writer import BaseHeaderWriter
from config import TableFormat
from header_spec import normalize_header
from models import (
    ColumnCountMismatchError,
    HeaderAboveError,
    MalformedSpecError,
    StructuralParseError,
    TableObject,
    UnsupportedFormatError,
)
from writer_html import HtmlHeaderWriter
from writer_latex import LatexHeaderWriter

__all__ = [
    "add_header_above",
    "normalize_header",
    "HeaderAboveError",
    "ColumnCountMismatchError",
    "MalformedSpecError",
    "StructuralParseError",
    "UnsupportedFormatError",
]

logger = logging.getLogger(__name__)

# Format-specific writers (add new formats here)
HEADER_WRITERS: dict[TableFormat, type[BaseHeaderWriter]] = {
    TableFormat.HTML: HtmlHeaderWriter,
    TableFormat.LATEX: LatexHeaderWriter,
}


def resolve_format(value: object) -> TableFormat:
    """Coerce a format tag to ``TableFormat`` or raise ``UnsupportedFormatError``.

    Only the exact tags ``"html"`` and ``"latex"`` are accepted; no case
    folding or whitespace stripping.
    """
    if isinstance(value, TableFormat):
        return value
    if isinstance(value, str):
        try:
            return TableFormat(value)
        except ValueError:
            pass
    raise UnsupportedFormatError(value)


def add_header_above(table: TableObject, header: Any = None) -> TableObject:
    """Return *table* with a new header row inserted above its header.

    Parameters
    ----------
    table : TableObject
        Rendered markup with ``format`` set to ``"html"`` or ``"latex"``.
    header
        Labels and column spans of the new row, e.g.
        ``{" ": 1, "Group": 2}`` or ``[" ", ("Group", 2)]``.  A span of 1
        may be omitted.  ``None`` returns *table* unchanged.

    Raises
    ------
    UnsupportedFormatError
        ``table.format`` is missing or not html/latex.
    MalformedSpecError
        A span is not a positive integer.
    ColumnCountMismatchError
        The spans do not add up to the table's column count.
    StructuralParseError
        The insertion point could not be found in the markup.
    """
    fmt = resolve_format(table.format)
    writer_cls = HEADER_WRITERS[fmt]
    logger.debug("Dispatching %s table to %s", fmt.value, writer_cls.__name__)
    return writer_cls().add_header(table, header)
