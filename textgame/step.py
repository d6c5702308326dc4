"""Step reducer.

:func:`step` is the only place where a command meets the world. It is pure:
it never reads input or prints, it just returns a
:data:`textgame.outcomes.StepOutcome` for the driver to act on.

Movement failures are not fatal. :func:`textgame.utils.grid.place` raises
:class:`textgame.errors.InvalidDirection` for out-of-bounds moves, and the
reducer turns that into a message while keeping the world unchanged.
"""

import logging
from typing import Optional

from textgame.actions import (
    Command,
    Help,
    MissingDirection,
    Move,
    Quit,
    Show,
    UnknownCommand,
    UnknownDirection,
)
from textgame.config import GameConfig
from textgame.errors import InvalidDirection
from textgame.outcomes import Continue, ContinueWithMessage, Stop, StepOutcome
from textgame.renderer.text import TextRenderer
from textgame.state import World
from textgame.utils.grid import place

logger = logging.getLogger(__name__)

HELP_LINES = [
    "",
    "Valid commands:",
    "",
    " help",
    " show",
    " move <up|down|left|right>",
    " quit",
    "",
]

MISSING_DIRECTION = "Missing direction"
UNKNOWN_DIRECTION = "Unknown direction"
UNKNOWN_COMMAND = "Unknown command"


def help_message(line_separator: str = "\n") -> str:
    """Text listing the valid commands, bracketed by blank lines."""
    return line_separator.join(HELP_LINES)


def farewell_message(world: World) -> str:
    return f"Bye bye {world.player.name}!"


def step(
    world: World, command: Command, config: Optional[GameConfig] = None
) -> StepOutcome:
    """Apply one command to ``world``.

    Args:
        world (World): Current world snapshot.
        command (Command): Parsed command.
        config (GameConfig | None): Formatting parameters for ``help`` and
            ``show``. Defaults to :class:`GameConfig`.

    Returns:
        StepOutcome: ``Continue`` with a new world after a successful move,
            ``Stop`` for ``quit``, otherwise ``ContinueWithMessage``.

    Raises:
        ValueError: If ``command`` is not a known command type.
    """
    config = config if config is not None else GameConfig()
    logger.debug("Step %s for %s", command, world.player.name)

    if isinstance(command, Help):
        return ContinueWithMessage(help_message(config.line_separator))
    if isinstance(command, Show):
        renderer = TextRenderer(config.line_separator, config.player_marker)
        return ContinueWithMessage(renderer.render(world))
    if isinstance(command, Move):
        return _step_move(world, command)
    if isinstance(command, MissingDirection):
        return ContinueWithMessage(MISSING_DIRECTION)
    if isinstance(command, UnknownDirection):
        return ContinueWithMessage(UNKNOWN_DIRECTION)
    if isinstance(command, UnknownCommand):
        return ContinueWithMessage(UNKNOWN_COMMAND)
    if isinstance(command, Quit):
        return Stop(farewell_message(world))
    raise ValueError(f"Command is not valid: {command!r}")


def _step_move(world: World, command: Move) -> StepOutcome:
    """Move the player one cell, reporting out-of-bounds moves as a message."""
    player = world.player
    candidate = player.moved_to(player.position.offset(command.direction.delta))
    try:
        return Continue(place(world, candidate))
    except InvalidDirection as exc:
        return ContinueWithMessage(str(exc))
