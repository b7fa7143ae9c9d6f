"""Shared test fixtures: small rendered tables in each supported format."""

import pytest

from config import TableFormat
from models import TableMeta, TableObject

HTML_3COL = """<table>
 <thead>
  <tr>
   <th style="text-align:left;"> name </th>
   <th style="text-align:right;"> mpg </th>
   <th style="text-align:right;"> cyl </th>
  </tr>
 </thead>
<tbody>
  <tr>
   <td style="text-align:left;"> Mazda RX4 </td>
   <td style="text-align:right;"> 21.0 </td>
   <td style="text-align:right;"> 6 </td>
  </tr>
</tbody>
</table>"""

HTML_CAPTION_4COL = """<table>
<caption>Motor cars</caption>
 <thead>
  <tr>
   <th style="text-align:left;"> name </th>
   <th style="text-align:right;"> mpg </th>
   <th style="text-align:center;"> cyl </th>
   <th style="text-align:right;"> disp </th>
  </tr>
 </thead>
<tbody>
  <tr>
   <td> Mazda RX4 </td>
   <td> 21.0 </td>
   <td> 6 </td>
   <td> 160 </td>
  </tr>
</tbody>
</table>"""

LATEX_PLAIN_4COL = r"""\begin{tabular}{l|r|r|r}
\hline
name & mpg & cyl & disp\\
\hline
Mazda RX4 & 21.0 & 6 & 160\\
\hline
\end{tabular}"""

LATEX_BOOKTABS_4COL = r"""\begin{table}
\caption{Motor cars}
\centering
\begin{tabular}[t]{lrrr}
\toprule
name & mpg & cyl & disp\\
\midrule
Mazda RX4 & 21.0 & 6 & 160\\
\bottomrule
\end{tabular}
\end{table}"""


@pytest.fixture
def html_table():
    return TableObject(HTML_3COL, TableFormat.HTML, TableMeta(column_count=3))


@pytest.fixture
def html_caption_table():
    return TableObject(HTML_CAPTION_4COL, "html", TableMeta(column_count=4))


@pytest.fixture
def latex_table():
    return TableObject(LATEX_PLAIN_4COL, "latex", TableMeta(column_count=4))


@pytest.fixture
def booktabs_table():
    return TableObject(
        LATEX_BOOKTABS_4COL,
        TableFormat.LATEX,
        TableMeta(column_count=4, booktabs=True),
    )
