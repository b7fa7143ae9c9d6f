"""
Configuration for the header-above table transform.

Contains the TableFormat enum, LaTeX rule tokens, HTML cell styling and
the file-suffix → format mapping used by the command-line entry point.
"""

from enum import Enum


class TableFormat(str, Enum):
    """Output formats a rendered table may carry.

    Only these two formats can receive an extra header row; anything else
    is rejected by the dispatcher.
    """

    HTML = "html"
    LATEX = "latex"


# ---------------------------------------------------------------------------
# LaTeX rule tokens
# ---------------------------------------------------------------------------

HLINE = r"\hline"
TOPRULE = r"\toprule"

# Partial rules are completed with "a-b}" by the LaTeX writer
CLINE = r"\cline{"
CMIDRULE = r"\cmidrule(l{2pt}r{2pt}){"

# Row terminator for a LaTeX tabular line
LATEX_LINE_BREAK = r"\\"

# Column separator inside a LaTeX tabular row
LATEX_CELL_SEP = " & "


# ---------------------------------------------------------------------------
# HTML
# ---------------------------------------------------------------------------

# Backend used to parse table fragments.  "html.parser" keeps a bare
# <table> fragment intact (no <html>/<body> wrapper on output).
HTML_PARSER = "html.parser"

HEADER_CELL_STYLE = "text-align:center;"


# ---------------------------------------------------------------------------
# CLI helpers
# ---------------------------------------------------------------------------

FORMAT_SUFFIXES: dict[str, TableFormat] = {
    ".html": TableFormat.HTML,
    ".htm": TableFormat.HTML,
    ".tex": TableFormat.LATEX,
}
