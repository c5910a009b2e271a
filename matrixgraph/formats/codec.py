"""FormatCodec: every registered format bound to one GraphModel."""

from typing import List, Optional

from loguru import logger

from ..core.constants import FormatNames
from ..core.graph import GraphModel
from .base import GraphFormat
from .registry import get_format, get_format_by_extension, list_formats


FORMAT_ORDER = list(FormatNames.ORDER)


class FormatCodec:
    """Serializes the model's current snapshot and parses text back into it.

    Attributes:
        model: Model that parse() replaces on success
    """

    def __init__(self, model: GraphModel):
        self.model = model

    @property
    def formats(self) -> List[str]:
        """Registered format names in display order."""
        return list_formats()

    def get(self, name: str) -> GraphFormat:
        """Get a format instance by name.

        Raises:
            KeyError: If the format is not registered
        """
        return get_format(name)

    def serialize(self, name: str) -> str:
        """Render the model's current state in the named format."""
        graph = self.model.snapshot()
        logger.debug(f"Exporting {graph.n} nodes as {name}")
        return self.get(name).serialize(graph)

    def parse(self, name: str, text: str) -> bool:
        """Parse text in the named format into the model.

        Returns:
            True on success; False with the model unchanged otherwise
        """
        return self.get(name).parse(self.model, text)

    @staticmethod
    def format_for(filename: str, default: Optional[str] = None) -> Optional[str]:
        """Resolve a file name to a format name, falling back to default."""
        return get_format_by_extension(filename) or default


__all__ = ['FormatCodec', 'FORMAT_ORDER', 'get_format_by_extension']
