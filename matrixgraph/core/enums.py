"""Enumerations for MatrixGraph results."""

from enum import Enum


class PathStatus(Enum):
    """Outcome of a shortest-path query."""
    OK = "ok"
    UNREACHABLE = "unreachable"


class MSTUniqueness(Enum):
    """Uniqueness verdict of a minimum spanning tree."""
    NOT_CONNECTED = "notConnected"
    UNIQUE_YES = "uniqueYes"
    UNIQUE_NO = "uniqueNo"


class EulerianType(Enum):
    """Eulerian classification of a graph."""
    NONE = "none"
    CYCLE = "cycle"
    PATH = "path"


class Hamiltonicity(Enum):
    """Result of the bounded Hamiltonian cycle search."""
    YES = "yes"
    NO = "no"
    NP_LIMIT = "npLimit"

    @classmethod
    def from_bool(cls, value: bool) -> 'Hamiltonicity':
        """Map a search outcome to a verdict."""
        return cls.YES if value else cls.NO


class StructureType(Enum):
    """Structural tag combining connectivity and cycle presence."""
    TREE = "tree"
    FOREST = "forest"
    CONNECTED_CYCLIC = "connectedCyclic"
    DISCONNECTED_CYCLIC = "disconnectedCyclic"
    WEAK_CONNECTED_CYCLIC = "weakConnectedCyclic"
    WEAK_CONNECTED_ACYCLIC = "weakConnectedAcyclic"
    DISCONNECTED = "disconnected"
