"""Position component.

Immutable integer grid coordinates. ``x`` selects the row and ``y`` the
column, so moving *down* increases ``x`` and moving *right* increases ``y``.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        x: Row index (0 at top).
        y: Column index (0 at left).
    """

    x: int
    y: int

    def offset(self, delta: Tuple[int, int]) -> "Position":
        """Return a new position shifted by ``(dx, dy)``."""
        dx, dy = delta
        return Position(self.x + dx, self.y + dy)
