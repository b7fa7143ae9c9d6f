"""
Data models for the header-above table transform.

Contains the table object passed in from the renderer, its structural
metadata, the header-row records and the error hierarchy.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Union

from config import TableFormat


# ── table object ──────────────────────────────────────────────────────────


@dataclass(frozen=True)
class TableMeta:
    """Structural snapshot of a rendered table.

    Produced by the renderer alongside the markup.  Carried forward
    unchanged by every transform; never recomputed here.
    """

    column_count: int
    booktabs: bool = False
    align: tuple[str, ...] = ()
    caption: str | None = None


@dataclass(frozen=True)
class TableObject:
    """Rendered table markup plus its format tag and metadata."""

    markup: str
    format: TableFormat | str | None
    meta: TableMeta

    def with_markup(self, markup: str) -> TableObject:
        """Return a copy with *markup* replaced; ``format`` and ``meta`` are
        the very same objects."""
        return replace(self, markup=markup)

    def __str__(self) -> str:
        return self.markup


# ── header row ────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class HeaderCell:
    """One cell of the new header row: *label* spanning *span* columns."""

    label: str
    span: int = 1


@dataclass(frozen=True)
class LabeledEntry:
    """Span-spec entry with an explicit label."""

    label: str
    span: int | float | str = 1


@dataclass(frozen=True)
class BareNumber:
    """Span-spec entry given as a plain number with no label.

    ``n`` may be ``None`` for an entry carrying neither label nor span.
    """

    n: int | float | None = None


SpanEntry = Union[LabeledEntry, BareNumber]


# ── errors ────────────────────────────────────────────────────────────────


class HeaderAboveError(ValueError):
    """Base class for all errors raised while adding a header row."""


class UnsupportedFormatError(HeaderAboveError):
    def __init__(self, format: object) -> None:
        self.format = format
        super().__init__(
            f"Unsupported table format {format!r}. Please specify an explicit "
            f"output format ({', '.join(f.value for f in TableFormat)}) when "
            "rendering the table; generic markdown tables are not supported."
        )


class ColumnCountMismatchError(HeaderAboveError):
    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Column count mismatch: the table has {expected} columns but "
            f"the header row covers {actual}."
        )


class MalformedSpecError(HeaderAboveError):
    """A span value is non-numeric, non-integer or not positive."""


class StructuralParseError(HeaderAboveError):
    """The insertion point for the new row could not be located."""
