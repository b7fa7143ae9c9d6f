"""
HTML writer: adds a grouping header row inside a table's ``<thead>``.

The markup is parsed into a BeautifulSoup tree, the new ``<tr>`` is built
as a node (not a string) and attached as the first child of the header
section, then the whole tree is serialized back to text.
"""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup, Tag

from base_writer import BaseHeaderWriter
from config import HEADER_CELL_STYLE, HTML_PARSER
from models import (
    ColumnCountMismatchError,
    HeaderCell,
    StructuralParseError,
    TableObject,
)

logger = logging.getLogger(__name__)


def build_header_row(cells: tuple[HeaderCell, ...], soup: BeautifulSoup) -> Tag:
    """Build ``<tr>`` of centered ``<th colspan=..>`` cells.

    Labels are set as text nodes; escaping is left to the serializer.
    """
    row = soup.new_tag("tr")
    for cell in cells:
        th = soup.new_tag(
            "th", attrs={"style": HEADER_CELL_STYLE, "colspan": str(cell.span)}
        )
        th.string = cell.label
        row.append(th)
    return row


def _element_children(tag: Tag, names: tuple[str, ...] | None = None) -> list[Tag]:
    return [
        child for child in tag.children
        if isinstance(child, Tag) and (names is None or child.name in names)
    ]


def find_thead(table: Tag) -> Tag:
    """Locate the header section among *table*'s direct children.

    Searched by name rather than position, so a leading <caption> (header
    in second position) or a <colgroup> in front is handled the same way.
    """
    thead = table.find("thead", recursive=False)
    if thead is None:
        raise StructuralParseError(
            "Could not locate the table header section (<thead>)."
        )
    return thead


def bottom_header_row(thead: Tag) -> Tag:
    rows = _element_children(thead, ("tr",))
    if not rows:
        raise StructuralParseError("The table header section has no rows.")
    return rows[-1]


def count_cells(row: Tag) -> int:
    return len(_element_children(row, ("th", "td")))


class HtmlHeaderWriter(BaseHeaderWriter):
    """Header writer for HTML tables."""

    def _splice(self, table: TableObject, cells: tuple[HeaderCell, ...]) -> str:
        soup = BeautifulSoup(table.markup, HTML_PARSER)
        table_tag = soup.find("table")
        if table_tag is None:
            raise StructuralParseError("No <table> element found in the markup.")

        thead = find_thead(table_tag)
        ncol = count_cells(bottom_header_row(thead))
        if ncol != table.meta.column_count:
            raise ColumnCountMismatchError(table.meta.column_count, ncol)

        thead.insert(0, build_header_row(cells, soup))
        logger.debug("Inserted header row as first child of <thead>")
        return str(soup)
