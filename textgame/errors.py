"""Domain exceptions."""


class TextGameError(Exception):
    """Base class for errors raised by the game engine."""


class InvalidDirection(TextGameError):
    """A move would leave the grid.

    Raised by :func:`textgame.utils.grid.place` and recovered by the step
    reducer, which reports it to the player as a message.
    """

    def __init__(self, message: str = "Invalid direction") -> None:
        super().__init__(message)
