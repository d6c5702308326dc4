"""Game loop driver.

Orchestrates read -> parse -> step -> output, one command per iteration,
until ``quit`` is entered or input runs out. The world is threaded through
the loop explicitly; the driver is the only module that performs I/O, and
it does so through the injected ``read_line`` / ``write_line`` callables.

End of input terminates the loop silently, exactly like the name prompt.
"""

import logging
from typing import Optional

from textgame.config import GameConfig
from textgame.outcomes import Continue, ContinueWithMessage, Stop
from textgame.parser import parse_line
from textgame.state import World
from textgame.step import step
from textgame.types import ReadLine, WriteLine

logger = logging.getLogger(__name__)

NAME_PROMPT = "What is your name?"
BANNER = "Use commands to play"


def greeting(name: str) -> str:
    return f"Hello, {name}, welcome to the game!"


def ask_name(read_line: ReadLine, write_line: WriteLine) -> Optional[str]:
    """Prompt for the player's name and greet them.

    Returns:
        str | None: The trimmed name, or ``None`` if input is exhausted.
    """
    write_line(NAME_PROMPT)
    line = read_line()
    if line is None:
        logger.debug("Input ended before a name was entered")
        return None
    name = line.strip()
    write_line(greeting(name))
    return name


def init_world(name: str, config: GameConfig, write_line: WriteLine) -> World:
    """Build the starting world and print the banner."""
    world = World.begin(name, config.grid_size, config.empty_marker)
    write_line(BANNER)
    return world


def game_loop(
    world: World,
    read_line: ReadLine,
    write_line: WriteLine,
    config: Optional[GameConfig] = None,
) -> World:
    """Run commands against ``world`` until ``quit`` or end of input.

    Args:
        world (World): Starting world.
        read_line (ReadLine): Returns the next line, or ``None`` at end of input.
        write_line (WriteLine): Prints one line of output.
        config (GameConfig | None): Formatting parameters passed to the reducer.

    Returns:
        World: The world as it stood when the loop stopped.
    """
    config = config if config is not None else GameConfig()
    while True:
        line = read_line()
        if line is None:
            logger.debug("Input exhausted; stopping")
            return world
        command = parse_line(line)
        if command is None:
            continue
        outcome = step(world, command, config)
        if isinstance(outcome, Continue):
            world = outcome.world
        elif isinstance(outcome, ContinueWithMessage):
            write_line(outcome.message)
        elif isinstance(outcome, Stop):
            write_line(outcome.message)
            logger.debug("Stopped by %s", command)
            return world
        else:
            raise ValueError(f"Unexpected step outcome: {outcome!r}")


def run(
    read_line: ReadLine,
    write_line: WriteLine,
    config: Optional[GameConfig] = None,
) -> Optional[World]:
    """Startup sequence followed by the game loop.

    Returns:
        World | None: Final world, or ``None`` if input ended at the name prompt.
    """
    config = config if config is not None else GameConfig()
    name = ask_name(read_line, write_line)
    if name is None:
        return None
    world = init_world(name, config, write_line)
    return game_loop(world, read_line, write_line, config)
