"""Base class for text formats."""

from abc import ABC, abstractmethod
import json
from typing import List, Optional, Tuple
from xml.etree.ElementTree import ParseError

import networkx as nx
from loguru import logger

from ..core.exceptions import CellValueError, FormatError
from ..core.graph import Graph, GraphModel, RawMatrix, parse_number


DecodedMatrix = Tuple[int, RawMatrix]

# Errors a decoder may let through from the libraries it relies on
LIBRARY_ERRORS = (nx.NetworkXError, ParseError, json.JSONDecodeError)


class GraphFormat(ABC):
    """Abstract base class for a bidirectional text format.

    Subclasses implement serialize() and decode(). parse() wraps decode():
    it never raises, logs the cause of a failure, and only touches the model
    when decoding succeeded.
    """

    # Registry name set by @register_format decorator
    _registry_name: Optional[str] = None

    name: str = ""
    mime: str = "text/plain"
    ext: str = ""
    accept: str = ""

    @abstractmethod
    def serialize(self, graph: Graph) -> str:
        """Render a graph snapshot as text.

        Args:
            graph: Graph snapshot

        Returns:
            Text in this format; never fails, including for n == 0
        """
        pass

    @abstractmethod
    def decode(self, text: str) -> DecodedMatrix:
        """Decode text into a vertex count and raw matrix.

        Args:
            text: Input text

        Returns:
            Tuple of (num_nodes, raw_matrix)

        Raises:
            FormatError: If the text is not valid for this format
        """
        pass

    def parse(self, model: GraphModel, text: str) -> bool:
        """Decode text and load it into the model.

        Args:
            model: Model receiving the decoded matrix
            text: Input text

        Returns:
            True on success; False (model untouched) on failure
        """
        try:
            num_nodes, raw_matrix = self.decode(text)
        except (FormatError, *LIBRARY_ERRORS) as e:
            logger.error(f"Error importing {self.name}: {e}")
            return False

        model.load(num_nodes, raw_matrix)
        logger.debug(f"Imported {self.name}: {num_nodes} nodes")
        return True

    @property
    def extensions(self) -> List[str]:
        """Accepted file extensions without the leading dot."""
        return [e.strip().lstrip('.').lower() for e in self.accept.split(',') if e.strip()]

    # Helpers shared by decoders

    def require_number(self, value: str, row: Optional[int] = None,
                       column: Optional[int] = None) -> None:
        """Raise CellValueError unless value parses to a finite number."""
        if parse_number(value) is None:
            raise CellValueError(self.name, value, row, column)

    @staticmethod
    def empty_matrix(n: int) -> RawMatrix:
        """n x n matrix of empty cells."""
        return [["" for _ in range(n)] for _ in range(n)]

    @staticmethod
    def force_diagonal(matrix: RawMatrix, value="0") -> RawMatrix:
        """Overwrite the diagonal in place and return the matrix."""
        for i, row in enumerate(matrix):
            if i < len(row):
                row[i] = value
        return matrix
