"""Player component.

The player is named once at startup and then only ever replaced by a copy
with a different :class:`Position` (see :func:`textgame.utils.grid.place`).
"""

from dataclasses import dataclass, replace

from .position import Position

ORIGIN = Position(0, 0)


@dataclass(frozen=True)
class Player:
    """Named player entity.

    Attributes:
        name: Display name entered at startup.
        position: Current grid cell.
    """

    name: str
    position: Position = ORIGIN

    @classmethod
    def begin(cls, name: str) -> "Player":
        """Create a player standing at the origin."""
        return cls(name=name, position=ORIGIN)

    def moved_to(self, position: Position) -> "Player":
        """Return a copy of this player at ``position``."""
        return replace(self, position=position)
