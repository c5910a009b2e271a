"""CSV adjacency table with a label header row and a label column."""

import csv
import io

from ..core.constants import FormatNames
from ..core.exceptions import StructuralError
from ..core.graph import Graph, format_weight, parse_number
from .base import DecodedMatrix, GraphFormat
from .registry import register_format


@register_format(FormatNames.CSV)
class CsvFormat(GraphFormat):
    """Header ',A,B,...' followed by one '<label>,<cell>,...' row per vertex.

    Empty or non-numeric raw cells are written as 0. On import the block
    must be square, every cell numeric, and zero cells become empty.
    """

    name = FormatNames.CSV
    mime = "text/csv"
    ext = "csv"
    accept = ".csv"

    def serialize(self, graph: Graph) -> str:
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow([""] + list(graph.node_labels))
        for label, row in zip(graph.node_labels, graph.raw_values):
            cells = []
            for value in row:
                number = parse_number(value)
                cells.append("0" if number is None else format_weight(number))
            writer.writerow([label] + cells)
        return buffer.getvalue().rstrip("\n")

    def decode(self, text: str) -> DecodedMatrix:
        if not text or not text.strip():
            raise StructuralError(self.name, "empty input")

        rows = [
            [cell.strip() for cell in row]
            for row in csv.reader(io.StringIO(text.strip()))
            if any(cell.strip() for cell in row)
        ]
        if not rows:
            raise StructuralError(self.name, "no rows")
        header, body = rows[0], rows[1:]
        n = len(header) - 1
        if n < 1 or len(body) != n:
            raise StructuralError(self.name, "non-square matrix", {"rows": len(body), "columns": n})

        matrix = []
        for i, row in enumerate(body):
            if len(row) - 1 != n:
                raise StructuralError(self.name, "non-square matrix", {"row": i, "columns": len(row) - 1})
            cells = []
            for j, cell in enumerate(row[1:]):
                self.require_number(cell, i, j)
                cells.append("" if parse_number(cell) == 0 else cell)
            matrix.append(cells)

        return n, self.force_diagonal(matrix)
