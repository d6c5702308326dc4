"""Input line parser.

Turns one raw line into a :data:`textgame.actions.Command`. Matching is
case-insensitive and tokens are split on runs of whitespace. The parser is
total: every line maps to exactly one command, except blank lines, which
:func:`parse_line` reports as ``None`` so the loop can simply re-prompt.
"""

from typing import Dict, Optional

from textgame.actions import (
    Command,
    Direction,
    Help,
    MissingDirection,
    Move,
    Quit,
    Show,
    UnknownCommand,
    UnknownDirection,
)

COMMANDS: Dict[str, Command] = {
    "help": Help(),
    "show": Show(),
    "quit": Quit(),
}

DIRECTIONS: Dict[str, Direction] = {direction.value: direction for direction in Direction}


def parse_line(line: str) -> Optional[Command]:
    """Parse a line, returning ``None`` if it is blank."""
    if len(line.strip()) == 0:
        return None
    return parse_command(line)


def parse_command(line: str) -> Command:
    """Classify ``line`` into a command.

    Only the first two tokens matter; anything after the direction of a
    ``move`` is ignored.
    """
    tokens = line.strip().lower().split()
    if not tokens:
        return UnknownCommand()
    head = tokens[0]
    if head == "move":
        if len(tokens) < 2:
            return MissingDirection()
        return parse_direction(tokens[1])
    return COMMANDS.get(head, UnknownCommand())


def parse_direction(token: str) -> Command:
    """Map a direction token to ``Move`` or ``UnknownDirection``."""
    direction = DIRECTIONS.get(token.lower())
    if direction is None:
        return UnknownDirection()
    return Move(direction)
