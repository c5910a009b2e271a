"""Constants used throughout the MatrixGraph system."""


# Graph policy
class GraphPolicy:
    """Policy constants for the graph engines."""
    # Largest order for which the Hamiltonian search is attempted
    HAMILTONIAN_LIMIT = 12
    # Node labels start at 'A'
    LABEL_BASE = ord('A')
    LABEL_ALPHABET = 26
    # Raw tokens that never declare a connection
    NO_CONNECTION_VALUE = -1
    EMPTY_CELL = ""


# Format names
class FormatNames:
    """Registered format names, in display order."""
    JSON = 'JSON'
    LATEX = 'LaTeX'
    DOT = 'Dot'
    GRAPHML = 'GraphML'
    CSV = 'CSV'
    GML = 'GML'

    ORDER = [JSON, LATEX, DOT, GRAPHML, CSV, GML]


# Display strings
class Symbols:
    """Symbols used when rendering results."""
    INFINITY = '∞'
    NONE = '-'
    PATH_SEPARATOR = ' → '
    EDGE_SEPARATOR = ', '


# Default values
class Defaults:
    """Default configuration values."""
    NUM_NODES = 4
    ZERO_AS_NO_EDGE = True
    LOG_LEVEL = 'info'
    FORMAT = FormatNames.JSON
    RANDOM_PROBABILITY = 0.5
    RANDOM_MAX_WEIGHT = 20
