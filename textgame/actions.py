"""Command and direction enumerations.

:class:`Direction` is the string enum of the four grid-aligned moves, each
carrying its ``(dx, dy)`` delta. The ``Command`` variants are the closed set
of things one input line can mean; the parser produces exactly one of them
for every non-blank line.
"""

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Dict, Tuple, Union


class Direction(StrEnum):
    """Movement directions.

    ``x`` is the row index, so ``UP`` decreases ``x`` and ``LEFT`` decreases
    ``y``.
    """

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()

    @property
    def delta(self) -> Tuple[int, int]:
        return DIRECTION_DELTAS[self]


DIRECTION_DELTAS: Dict[Direction, Tuple[int, int]] = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}


@dataclass(frozen=True)
class Help:
    """List the valid commands."""


@dataclass(frozen=True)
class Show:
    """Render the grid with the player's position."""


@dataclass(frozen=True)
class Quit:
    """Say goodbye and stop the loop."""


@dataclass(frozen=True)
class Move:
    """Move the player one cell in ``direction``."""

    direction: Direction


@dataclass(frozen=True)
class MissingDirection:
    """``move`` without a direction token."""


@dataclass(frozen=True)
class UnknownDirection:
    """``move`` followed by something that is not a direction."""


@dataclass(frozen=True)
class UnknownCommand:
    """First token is not a known command."""


Command = Union[
    Help,
    Show,
    Quit,
    Move,
    MissingDirection,
    UnknownDirection,
    UnknownCommand,
]
