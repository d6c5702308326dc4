"""Step outcomes.

Each call to :func:`textgame.step.step` returns exactly one of these. The
loop driver dispatches on the type: ``Continue`` replaces the carried world,
``ContinueWithMessage`` prints and keeps the world, ``Stop`` prints and ends
the loop.
"""

from dataclasses import dataclass
from typing import Union

from textgame.state import World


@dataclass(frozen=True)
class Continue:
    world: World


@dataclass(frozen=True)
class ContinueWithMessage:
    message: str


@dataclass(frozen=True)
class Stop:
    message: str


StepOutcome = Union[Continue, ContinueWithMessage, Stop]
