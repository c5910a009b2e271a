"""Exception hierarchy for MatrixGraph.

Exceptions are organized by functional area. Codec errors derive from
FormatError and never escape a parse call; the engines only raise
NodeLookupError, for labels that do not exist in the graph.
"""

from typing import Optional, Any, Dict, List


class MatrixGraphError(Exception):
    """Base exception for all MatrixGraph errors.

    Provides common functionality for error handling and reporting.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """Initialize MatrixGraphError with message and optional details.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return formatted error message with details if available."""
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


# =============================================================================
# FORMAT EXCEPTIONS
# =============================================================================

class FormatError(MatrixGraphError):
    """Base exception for text format decoding errors."""

    def __init__(self, format_name: str, message: str, details: Optional[Dict[str, Any]] = None):
        """Initialize with the offending format name.

        Args:
            format_name: Name of the format being decoded
            message: Description of the failure
            details: Optional additional context
        """
        super().__init__(f"{format_name}: {message}", details)
        self.format_name = format_name


class StructuralError(FormatError):
    """Raised for empty input, non-square matrices or inputs without nodes."""
    pass


class GrammarError(FormatError):
    """Raised when text does not match the grammar a format requires."""
    pass


class CellValueError(FormatError, ValueError):
    """Raised when a cell does not parse to a finite number."""

    def __init__(self, format_name: str, value: Any, row: Optional[int] = None,
                 column: Optional[int] = None):
        """Initialize with the rejected cell.

        Args:
            format_name: Name of the format being decoded
            value: Raw cell text that failed to parse
            row: Optional row index of the cell
            column: Optional column index of the cell
        """
        details = {}
        if row is not None:
            details["row"] = row
        if column is not None:
            details["column"] = column
        super().__init__(format_name, f"non-numeric cell {value!r}", details)
        self.value = value


# =============================================================================
# GRAPH EXCEPTIONS
# =============================================================================

class NodeLookupError(MatrixGraphError, LookupError):
    """Raised when a referenced node label does not exist in the graph."""

    def __init__(self, label: Any, available: List[str]):
        """Initialize with the missing label and the labels that do exist.

        Args:
            label: Label that was not found
            available: Labels of the current graph
        """
        super().__init__(f"Node '{label}' not found", {"available": available})
        self.label = label


# =============================================================================
# CONFIGURATION EXCEPTIONS
# =============================================================================

class ConfigurationError(MatrixGraphError):
    """Raised when configuration cannot be loaded or validated."""
    pass
