"""Game configuration.

:class:`GameConfig` gathers the few formatting and sizing knobs of a run.
Defaults reproduce the classic game (20x20 grid, ``-`` and ``x`` markers,
platform line separator). No environment variables are required;
``TEXTGAME_GRID_SIZE`` may override the grid size.
"""

import logging
import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from textgame.grid import DEFAULT_GRID_SIZE, EMPTY_MARKER
from textgame.renderer.text import DEFAULT_PLAYER_MARKER

logger = logging.getLogger(__name__)

GRID_SIZE_ENV = "TEXTGAME_GRID_SIZE"


@dataclass(frozen=True)
class GameConfig:
    """Run configuration.

    Attributes:
        grid_size (int): Side length of the square grid.
        empty_marker (str): Marker drawn for empty cells.
        player_marker (str): Marker drawn at the player's cell.
        line_separator (str): Separator used by ``help`` and ``show`` output.
    """

    grid_size: int = DEFAULT_GRID_SIZE
    empty_marker: str = EMPTY_MARKER
    player_marker: str = DEFAULT_PLAYER_MARKER
    line_separator: str = os.linesep

    def __post_init__(self) -> None:
        if self.grid_size <= 0:
            raise ValueError(f"grid_size must be positive, got {self.grid_size}")
        for name in ("empty_marker", "player_marker"):
            marker = getattr(self, name)
            if len(marker) != 1 or marker.isspace():
                raise ValueError(f"{name} must be a single visible character, got {marker!r}")
        if self.empty_marker == self.player_marker:
            raise ValueError("empty_marker and player_marker must differ")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "GameConfig":
        """Build a config, applying overrides found in ``environ``.

        Raises:
            ValueError: If an override is present but not an integer.
        """
        environ = os.environ if environ is None else environ
        config = cls()
        raw = environ.get(GRID_SIZE_ENV)
        if raw is not None and raw.strip():
            try:
                size = int(raw)
            except ValueError:
                raise ValueError(f"{GRID_SIZE_ENV} must be an integer, got {raw!r}") from None
            logger.debug("Grid size overridden by %s=%d", GRID_SIZE_ENV, size)
            config = replace(config, grid_size=size)
        return config
