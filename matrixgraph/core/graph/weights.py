"""Edge weights and the NoEdge sentinel.

Weights are plain numbers; the absence of an edge (and, for distances, an
unreachable pair) is the NO_EDGE singleton. Arithmetic and ordering go
through the helpers below so that NO_EDGE behaves like an absorbing
"infinitely far" value without relying on float infinity.
"""

import math
from typing import Any, Optional, Union


class NoEdge:
    """Singleton marking a missing edge or an unreachable distance."""

    _instance: Optional['NoEdge'] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NO_EDGE"

    def __reduce__(self):
        return (NoEdge, ())


NO_EDGE = NoEdge()

Number = Union[int, float]
Weight = Union[int, float, NoEdge]


def is_edge(weight: Weight) -> bool:
    """Check whether a weight denotes an actual edge (or reachable distance)."""
    return weight is not NO_EDGE


def add_weights(a: Weight, b: Weight) -> Weight:
    """Add two weights; NO_EDGE absorbs."""
    if a is NO_EDGE or b is NO_EDGE:
        return NO_EDGE
    return a + b


def is_shorter(candidate: Weight, current: Weight) -> bool:
    """Check whether candidate is strictly shorter than current."""
    if candidate is NO_EDGE:
        return False
    if current is NO_EDGE:
        return True
    return candidate < current


def to_float(weight: Weight) -> float:
    """Convert to float with NO_EDGE mapped to infinity, for numeric export."""
    return math.inf if weight is NO_EDGE else float(weight)


def parse_number(value: Any) -> Optional[Number]:
    """Parse a raw cell token into a finite number.

    Integral values come back as int so that they render without a
    decimal part.

    Args:
        value: Raw token (number or string)

    Returns:
        The number, or None if the token is empty, non-numeric or not finite
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None

    if not math.isfinite(number):
        return None
    if number.is_integer():
        return int(number)
    return number


def format_weight(weight: Weight) -> str:
    """Render a weight as text; integral values without a decimal part."""
    if weight is NO_EDGE:
        return ""
    if isinstance(weight, float) and weight.is_integer():
        return str(int(weight))
    return str(weight)
