"""MatrixGraph: weighted-graph analysis driven by an adjacency matrix.

Computes shortest paths (Floyd-Warshall and Dijkstra, with traceable
iterations), minimum spanning trees with a uniqueness verdict and structural
properties, and exchanges the matrix with six textual formats
(JSON, LaTeX, Graphviz Dot, GraphML, CSV and GML).
"""

__version__ = "1.0.0"
__author__ = "MatrixGraph Team"

from loguru import logger

# Configure clean logger for CLI (default level, can be overridden)
logger.remove()  # Remove default handler


def _format_record(record):
    level = record["level"].name
    colors = {
        "INFO": "<blue>",
        "DEBUG": "<yellow>",
        "WARNING": "<light-red>",
        "ERROR": "<red>"
    }
    color = colors.get(level, "<white>")

    return (
        f"<green>{record['time']:YYYY-MM-DD HH:mm:ss}</green> | "
        f"{color}{level: <8}</> | "
        "{message}"
    )


logger.add(
    lambda msg: print(msg),
    level="INFO",
    format=_format_record,
    colorize=True,
)


def configure_logging(log_level: str = "info"):
    """Configure logger level based on config."""
    logger.remove()  # Remove all handlers
    logger.add(
        lambda msg: print(msg),
        level=log_level.upper(),
        format=_format_record,
        colorize=True,
    )


__all__ = ["__version__", "__author__", "logger", "configure_logging"]
