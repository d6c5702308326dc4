"""Immutable ``World`` dataclass.

The :class:`World` is the single unit of state carried through the game
loop. Every successful move produces a *new* ``World``; nothing is mutated
in place and there is no process-wide game state.

Invariant: the player's position always lies inside the grid. Construction
rejects an out-of-bounds player outright; moves go through
:func:`textgame.utils.grid.place`, which reports them as
:class:`textgame.errors.InvalidDirection` instead.
"""

from dataclasses import dataclass

from textgame.components import Player
from textgame.grid import DEFAULT_GRID_SIZE, EMPTY_MARKER, Grid


@dataclass(frozen=True)
class World:
    """Player plus grid snapshot.

    Attributes:
        player (Player): The named player and its position.
        grid (Grid): The fixed-size playing field.

    Raises:
        ValueError: If the player's position lies outside the grid.
    """

    player: Player
    grid: Grid

    def __post_init__(self) -> None:
        pos = self.player.position
        size = self.grid.size
        if not (0 <= pos.x < size and 0 <= pos.y < size):
            raise ValueError(
                f"Player position ({pos.x}, {pos.y}) is outside the {size}x{size} grid"
            )

    @classmethod
    def begin(
        cls, name: str, size: int = DEFAULT_GRID_SIZE, marker: str = EMPTY_MARKER
    ) -> "World":
        """Fresh world: player ``name`` at the origin of a new square grid."""
        return cls(player=Player.begin(name), grid=Grid.square(size, marker))
