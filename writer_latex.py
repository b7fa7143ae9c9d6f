"""
LaTeX writer: adds a grouping header row right after a tabular's top rule.

LaTeX has no tree here, so the row is composed as plain text (a line of
``\\multicolumn`` cells followed by partial rules) and spliced in with a
single first-occurrence substitution.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from base_writer import BaseHeaderWriter
from config import (
    CLINE,
    CMIDRULE,
    HLINE,
    LATEX_CELL_SEP,
    LATEX_LINE_BREAK,
    TOPRULE,
)
from models import HeaderCell, StructuralParseError, TableObject

logger = logging.getLogger(__name__)


class RuleStyle(NamedTuple):
    top_rule: str
    partial_rule: str


def resolve_rule_style(booktabs: bool) -> RuleStyle:
    """``\\toprule`` / ``\\cmidrule`` for booktabs tables, else ``\\hline`` / ``\\cline``."""
    if booktabs:
        return RuleStyle(TOPRULE, CMIDRULE)
    return RuleStyle(HLINE, CLINE)


def _alignments(n: int, booktabs: bool) -> list[str]:
    if booktabs:
        return ["c"] * n
    align = ["|c|"] * n
    align[0] = "c|"
    align[-1] = "|c"
    return align


def build_partial_rules(cells: tuple[HeaderCell, ...], booktabs: bool) -> str:
    """Partial rules under every labeled cell, space separated.

    Cells whose label is blank get no rule.
    """
    partial = resolve_rule_style(booktabs).partial_rule
    rules = []
    end = 0
    for cell in cells:
        start = end + 1
        end += cell.span
        if cell.label.strip():
            rules.append(f"{partial}{start}-{end}}}")
    return " ".join(rules)


def build_header_text(cells: tuple[HeaderCell, ...], booktabs: bool = False) -> str:
    r"""Return the new tabular row, line break included, plus partial rules.

    ``(A x2, B x2)`` without booktabs gives::

        \multicolumn{2}{c|}{A} & \multicolumn{2}{|c}{B} \\ \cline{1-2} \cline{3-4}
    """
    items = [
        f"\\multicolumn{{{cell.span}}}{{{align}}}{{{cell.label}}}"
        for cell, align in zip(cells, _alignments(len(cells), booktabs))
    ]
    text = f"{LATEX_CELL_SEP.join(items)} {LATEX_LINE_BREAK}"
    rules = build_partial_rules(cells, booktabs)
    if rules:
        text = f"{text} {rules}"
    return text


class LatexHeaderWriter(BaseHeaderWriter):
    """Header writer for LaTeX tabular output."""

    def _splice(self, table: TableObject, cells: tuple[HeaderCell, ...]) -> str:
        booktabs = table.meta.booktabs
        top_rule = resolve_rule_style(booktabs).top_rule
        if top_rule not in table.markup:
            raise StructuralParseError(
                f"Top rule {top_rule} not found in the LaTeX table."
            )

        new_row = build_header_text(cells, booktabs)
        logger.debug("Inserting header row after first %s", top_rule)
        return table.markup.replace(top_rule, f"{top_rule}\n{new_row}", 1)
