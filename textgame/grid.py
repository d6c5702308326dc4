"""Bounded square grid.

The grid is a persistent matrix of cell markers (``cells[x][y]``). It never
changes during a run: there are no obstacles or other entities, so the only
questions asked of it are its size and what an empty cell looks like.
"""

from dataclasses import dataclass

from pyrsistent import pvector
from pyrsistent.typing import PVector

DEFAULT_GRID_SIZE = 20
EMPTY_MARKER = "-"


@dataclass(frozen=True)
class Grid:
    """Immutable square matrix of cell markers.

    Attributes:
        cells (PVector[PVector[str]]): Rows of markers, indexed ``cells[x][y]``.
    """

    cells: PVector[PVector[str]]

    @classmethod
    def square(cls, size: int = DEFAULT_GRID_SIZE, marker: str = EMPTY_MARKER) -> "Grid":
        """Build a ``size`` x ``size`` grid filled with ``marker``.

        Raises:
            ValueError: If ``size`` is not positive.
        """
        if size <= 0:
            raise ValueError(f"Grid size must be positive, got {size}")
        row = pvector([marker] * size)
        return cls(cells=pvector([row] * size))

    @property
    def size(self) -> int:
        return len(self.cells)
