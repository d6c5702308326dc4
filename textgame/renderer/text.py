"""Plain-text grid renderer.

The output is bracketed by line separators: a leading separator, one line
per grid row (markers joined by single spaces) and a trailing separator.
The player's cell shows ``player_marker``; every other cell shows the
grid's own marker.
"""

import os

from textgame.state import World

DEFAULT_PLAYER_MARKER = "x"


def render(
    world: World,
    line_separator: str = os.linesep,
    player_marker: str = DEFAULT_PLAYER_MARKER,
) -> str:
    """Render ``world`` as a multi-line string.

    Args:
        world (World): Snapshot to draw.
        line_separator (str): Separator placed between and around rows.
        player_marker (str): Marker drawn at the player's cell.

    Returns:
        str: The rendered grid.
    """
    pos = world.player.position
    cells = world.grid.cells
    cells = cells.set(pos.x, cells[pos.x].set(pos.y, player_marker))
    rows = [" ".join(row) for row in cells]
    return line_separator + line_separator.join(rows) + line_separator


class TextRenderer:
    """Renderer bound to fixed formatting parameters."""

    def __init__(
        self,
        line_separator: str = os.linesep,
        player_marker: str = DEFAULT_PLAYER_MARKER,
    ) -> None:
        self.line_separator = line_separator
        self.player_marker = player_marker

    def render(self, world: World) -> str:
        return render(world, self.line_separator, self.player_marker)
