"""JSON format: the raw matrix as entered, with its node count."""

import json
import math
from datetime import datetime, timezone

from ..core.constants import FormatNames
from ..core.exceptions import GrammarError, StructuralError
from ..core.graph import Graph
from .base import DecodedMatrix, GraphFormat
from .registry import register_format


@register_format(FormatNames.JSON)
class JsonFormat(GraphFormat):
    """Object with numNodes, rawMatrix and an ISO-8601 timestamp.

    Decoding requires rawMatrix to be an array of arrays and numNodes to be
    a number; the two are not cross-checked.
    """

    name = FormatNames.JSON
    mime = "application/json"
    ext = "json"
    accept = ".json"

    def serialize(self, graph: Graph) -> str:
        timestamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds")
        return json.dumps(
            {
                "numNodes": graph.n,
                "rawMatrix": [list(row) for row in graph.raw_values],
                "timestamp": timestamp.replace("+00:00", "Z"),
            },
            indent=2,
            ensure_ascii=False,
        )

    def decode(self, text: str) -> DecodedMatrix:
        if not text or not text.strip():
            raise StructuralError(self.name, "empty input")

        parsed = json.loads(text)
        if not isinstance(parsed, dict):
            raise GrammarError(self.name, "top level must be an object")

        raw_matrix = parsed.get("rawMatrix")
        if not isinstance(raw_matrix, list) or not all(isinstance(row, list) for row in raw_matrix):
            raise GrammarError(self.name, "rawMatrix must be an array of arrays")

        num_nodes = parsed.get("numNodes")
        if isinstance(num_nodes, bool) or not isinstance(num_nodes, (int, float)):
            raise GrammarError(self.name, "missing number of nodes")
        if not math.isfinite(num_nodes) or num_nodes < 0 or num_nodes != int(num_nodes):
            raise StructuralError(self.name, f"invalid number of nodes {num_nodes}")

        matrix = [list(row) for row in raw_matrix]
        return int(num_nodes), self.force_diagonal(matrix, 0)
