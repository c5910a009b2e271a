"""Text formats for MatrixGraph.

Each format is a GraphFormat subclass registered by name. All format
modules in this package are discovered and registered on import.

Quick Start:
    from matrixgraph.formats import FormatCodec
    from matrixgraph.core.graph import GraphModel

    codec = FormatCodec(GraphModel(3))
    text = codec.serialize("JSON")
    codec.parse("CSV", ",A,B\\nA,0,6\\nB,6,0")
"""

import importlib
from pathlib import Path

from loguru import logger

from .base import GraphFormat
from .registry import register_format, get_format, list_formats, get_format_by_extension
from .codec import FormatCodec, FORMAT_ORDER

# Auto-import all format modules to trigger decorator registration
current_dir = Path(__file__).parent

for file_path in current_dir.glob("*.py"):
    module_name = file_path.stem

    if module_name in ['__init__', 'base', 'registry', 'codec']:
        continue

    try:
        importlib.import_module(f'.{module_name}', package='matrixgraph.formats')
    except ImportError as e:
        logger.warning(f"Could not import format module {module_name}: {e}")

__all__ = [
    'GraphFormat',
    'FormatCodec',
    'FORMAT_ORDER',
    'register_format',
    'get_format',
    'list_formats',
    'get_format_by_extension',
]
