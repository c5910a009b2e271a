"""Registry for text formats with decorator-based registration."""

from typing import Dict, List, Optional, Type

from ..core.constants import FormatNames
from .base import GraphFormat


class FormatRegistry:
    """Registry for format classes."""

    def __init__(self):
        self._formats: Dict[str, Type[GraphFormat]] = {}

    def register(self, name: str, format_class: Type[GraphFormat]) -> None:
        """Register a format class.

        Args:
            name: Unique name for the format
            format_class: Format class to register
        """
        if not issubclass(format_class, GraphFormat):
            raise ValueError("Format class must inherit from GraphFormat")

        format_class._registry_name = name
        self._formats[name] = format_class

    def get(self, name: str) -> Type[GraphFormat]:
        """Get a registered format class by name.

        Raises:
            KeyError: If format not found
        """
        if name not in self._formats:
            available = self.list_formats()
            raise KeyError(f"Format '{name}' not found. Available: {available}")

        return self._formats[name]

    def list_formats(self) -> List[str]:
        """List registered format names in display order."""
        ordered = [name for name in FormatNames.ORDER if name in self._formats]
        extra = [name for name in self._formats if name not in ordered]
        return ordered + extra

    def by_extension(self, filename: str) -> Optional[str]:
        """Find the format accepting the extension of a file name."""
        if '.' not in filename:
            return None
        ext = filename.rsplit('.', 1)[-1].lower()
        for name in self.list_formats():
            if ext in self._formats[name]().extensions:
                return name
        return None


# Global registry instance
_registry = FormatRegistry()


def register_format(name: str):
    """Decorator to register format classes.

    Args:
        name: Unique name for the format

    Example:
        @register_format("CSV")
        class CsvFormat(GraphFormat):
            ...
    """
    def decorator(format_class: Type[GraphFormat]) -> Type[GraphFormat]:
        _registry.register(name, format_class)
        return format_class
    return decorator


def get_format(name: str) -> GraphFormat:
    """Get an instance of a registered format."""
    return _registry.get(name)()


def list_formats() -> List[str]:
    """List all registered format names."""
    return _registry.list_formats()


def get_format_by_extension(filename: str) -> Optional[str]:
    """Resolve a file name to a format name, or None."""
    return _registry.by_extension(filename)
