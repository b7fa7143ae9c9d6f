"""
Abstract base writer for adding a header row above a rendered table.

Concrete subclasses (``HtmlHeaderWriter``, ``LatexHeaderWriter``) implement
the format-specific fragment generation and splicing while inheriting the
common spec normalization and column-count validation.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from header_spec import normalize_header
from models import ColumnCountMismatchError, HeaderCell, TableObject

logger = logging.getLogger(__name__)


class BaseHeaderWriter(ABC):
    """Base class for all header-row writers."""

    # ── public entry point ──

    def add_header(self, table: TableObject, header: Any) -> TableObject:
        """Return a copy of *table* with a new header row on top.

        A ``None`` *header* returns *table* unchanged.  The spec is
        normalized and checked against ``table.meta.column_count`` before
        the markup is touched.
        """
        if header is None:
            return table

        cells = normalize_header(header)
        total = sum(c.span for c in cells)
        if total != table.meta.column_count:
            raise ColumnCountMismatchError(table.meta.column_count, total)

        markup = self._splice(table, cells)
        logger.debug(
            "%s: added %d-cell header row to %d-column table",
            type(self).__name__, len(cells), total,
        )
        return table.with_markup(markup)

    # ── abstract methods ── (to be implemented by subclasses)

    @abstractmethod
    def _splice(self, table: TableObject, cells: tuple[HeaderCell, ...]) -> str:
        """Insert the row built from *cells* into ``table.markup``."""
        ...
