"""Tests for the LaTeX header writer and its fragment builders."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import pytest

from models import HeaderCell, StructuralParseError, TableMeta, TableObject
from writer_latex import (
    LatexHeaderWriter,
    RuleStyle,
    build_header_text,
    build_partial_rules,
    resolve_rule_style,
)

AB = (HeaderCell("A", 2), HeaderCell("B", 2))


class TestRuleStyle:

    def test_plain(self):
        assert resolve_rule_style(False) == RuleStyle(r"\hline", r"\cline{")

    def test_booktabs(self):
        assert resolve_rule_style(True) == RuleStyle(r"\toprule", r"\cmidrule(l{2pt}r{2pt}){")


class TestHeaderText:

    def test_plain_two_groups(self):
        assert build_header_text(AB, booktabs=False) == (
            r"\multicolumn{2}{c|}{A} & \multicolumn{2}{|c}{B} \\ \cline{1-2} \cline{3-4}"
        )

    def test_plain_interior_cells_double_bordered(self):
        cells = (HeaderCell("A", 1), HeaderCell("B", 1), HeaderCell("C", 1))
        text = build_header_text(cells)
        assert r"\multicolumn{1}{c|}{A}" in text
        assert r"\multicolumn{1}{|c|}{B}" in text
        assert r"\multicolumn{1}{|c}{C}" in text

    def test_booktabs_centered_with_cmidrule(self):
        assert build_header_text(AB, booktabs=True) == (
            r"\multicolumn{2}{c}{A} & \multicolumn{2}{c}{B} \\ "
            r"\cmidrule(l{2pt}r{2pt}){1-2} \cmidrule(l{2pt}r{2pt}){3-4}"
        )

    def test_single_cell(self):
        assert build_header_text((HeaderCell("All", 3),)) == (
            r"\multicolumn{3}{|c}{All} \\ \cline{1-3}"
        )

    def test_no_rules_means_no_trailing_space(self):
        assert build_header_text((HeaderCell(" ", 2),), booktabs=True) == (
            r"\multicolumn{2}{c}{ } \\"
        )


class TestPartialRules:

    def test_ranges_are_cumulative(self):
        cells = (HeaderCell("A", 1), HeaderCell("B", 3), HeaderCell("C", 2))
        assert build_partial_rules(cells, False) == r"\cline{1-1} \cline{2-4} \cline{5-6}"

    @pytest.mark.parametrize("span", [1, 2, 5])
    @pytest.mark.parametrize("label", ["", " ", "  \t"])
    def test_blank_label_suppresses_rule(self, label, span):
        cells = (HeaderCell(label, span), HeaderCell("G", 2))
        assert build_partial_rules(cells, False) == rf"\cline{{{span + 1}-{span + 2}}}"
        assert build_partial_rules(cells, True).count(r"\cmidrule") == 1


class TestLatexSplice:

    def test_inserted_after_first_hline_only(self, latex_table):
        result = LatexHeaderWriter().add_header(latex_table, {"A": 2, "B": 2})
        expected_row = (
            r"\multicolumn{2}{c|}{A} & \multicolumn{2}{|c}{B} \\ \cline{1-2} \cline{3-4}"
        )
        assert result.markup.startswith(
            "\\begin{tabular}{l|r|r|r}\n\\hline\n" + expected_row + "\nname & mpg"
        )
        assert result.markup.count(r"\multicolumn") == 2
        assert result.markup.count(r"\hline") == latex_table.markup.count(r"\hline")

    def test_booktabs_inserted_after_toprule(self, booktabs_table):
        result = LatexHeaderWriter().add_header(booktabs_table, [" ", ("Stats", 3)])
        assert "\\toprule\n\\multicolumn{1}{c}{ } & \\multicolumn{3}{c}{Stats} \\\\ " \
               "\\cmidrule(l{2pt}r{2pt}){2-4}\nname" in result.markup
        assert result.meta is booktabs_table.meta

    def test_missing_top_rule(self):
        table = TableObject(
            "\\begin{tabular}{ll}\na & b\\\\\n\\end{tabular}",
            "latex",
            TableMeta(column_count=2),
        )
        with pytest.raises(StructuralParseError):
            LatexHeaderWriter().add_header(table, [("X", 2)])

    def test_rule_style_follows_meta_not_markup(self, booktabs_table):
        # booktabs markup declared as plain: no \hline to anchor on
        table = TableObject(booktabs_table.markup, "latex", TableMeta(column_count=4))
        with pytest.raises(StructuralParseError):
            LatexHeaderWriter().add_header(table, [("X", 4)])
