"""Core components for MatrixGraph."""

# Graph infrastructure
from .graph import Graph, GraphModel, NO_EDGE

# Enumerations
from .enums import PathStatus, MSTUniqueness, EulerianType, Hamiltonicity, StructureType

# Exceptions
from .exceptions import (
    MatrixGraphError, FormatError, StructuralError, GrammarError,
    CellValueError, NodeLookupError, ConfigurationError
)

# Configuration
from .config_spec import EngineConfig, load_config, validate_config

__all__ = [
    # Graph
    "Graph",
    "GraphModel",
    "NO_EDGE",

    # Enumerations
    "PathStatus",
    "MSTUniqueness",
    "EulerianType",
    "Hamiltonicity",
    "StructureType",

    # Exceptions
    "MatrixGraphError",
    "FormatError",
    "StructuralError",
    "GrammarError",
    "CellValueError",
    "NodeLookupError",
    "ConfigurationError",

    # Configuration
    "EngineConfig",
    "load_config",
    "validate_config",
]
