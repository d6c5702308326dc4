"""Turn-based text game on a bounded grid.

Public surface::

    from textgame import World, parse_line, step, run
"""

from textgame.actions import Command, Direction
from textgame.config import GameConfig
from textgame.errors import InvalidDirection, TextGameError
from textgame.loop import game_loop, run
from textgame.outcomes import Continue, ContinueWithMessage, Stop, StepOutcome
from textgame.parser import parse_command, parse_line
from textgame.renderer.text import render
from textgame.state import World
from textgame.step import step

__all__ = [
    "Command",
    "Continue",
    "ContinueWithMessage",
    "Direction",
    "GameConfig",
    "InvalidDirection",
    "StepOutcome",
    "Stop",
    "TextGameError",
    "World",
    "game_loop",
    "parse_command",
    "parse_line",
    "render",
    "run",
    "step",
]
