"""LaTeX pmatrix format."""

from typing import List

from ..core.constants import FormatNames
from ..core.exceptions import GrammarError, StructuralError
from ..core.graph import Graph, format_weight, parse_number
from .base import DecodedMatrix, GraphFormat
from .registry import register_format


BEGIN = "\\begin{pmatrix}"
END = "\\end{pmatrix}"
ROW_SEPARATOR = "\\\\"
CELL_SEPARATOR = "&"
EMPTY_MARK = "-"


def _render_cell(value) -> str:
    if value == "" or value is None:
        return EMPTY_MARK
    number = parse_number(value)
    if number is not None and not isinstance(value, str):
        return format_weight(number)
    return str(value)


@register_format(FormatNames.LATEX)
class LatexFormat(GraphFormat):
    """Matrix between \\begin{pmatrix} and \\end{pmatrix}.

    Rows end with '\\\\' and cells are separated by '&'. Empty cells are
    written as '-'; on import '-' and '0' both become empty cells.
    """

    name = FormatNames.LATEX
    mime = "text/plain"
    ext = "tex"
    accept = ".tex"

    def serialize(self, graph: Graph) -> str:
        lines = [BEGIN]
        for row in graph.raw_values:
            lines.append(" & ".join(_render_cell(value) for value in row) + " " + ROW_SEPARATOR)
        lines.append(END)
        return "\n".join(lines)

    def _body(self, text: str) -> str:
        start = text.find(BEGIN)
        if start < 0:
            raise GrammarError(self.name, f"missing {BEGIN}")
        start += len(BEGIN)
        end = text.find(END, start)
        if end < 0:
            raise GrammarError(self.name, f"missing {END}")
        return text[start:end]

    def decode(self, text: str) -> DecodedMatrix:
        if not text or not text.strip():
            raise StructuralError(self.name, "empty input")

        rows: List[List[str]] = []
        for row in self._body(text).split(ROW_SEPARATOR):
            row = row.strip()
            if row:
                rows.append([cell.strip() for cell in row.split(CELL_SEPARATOR)])

        n = len(rows)
        if n == 0:
            raise StructuralError(self.name, "matrix has no rows")
        for i, row in enumerate(rows):
            if len(row) != n:
                raise StructuralError(self.name, "non-square matrix", {"row": i, "columns": len(row), "rows": n})

        matrix = []
        for i, row in enumerate(rows):
            cells = []
            for j, cell in enumerate(row):
                if cell in (EMPTY_MARK, "0"):
                    cells.append("")
                else:
                    self.require_number(cell, i, j)
                    cells.append(cell)
            matrix.append(cells)

        return n, self.force_diagonal(matrix)
