from dataclasses import dataclass
from typing import Tuple

from .config import BOARD_SIZE

Cell = Tuple[int, int]


@dataclass(frozen=True)
class Board:
    """Square grid with a one-cell frame reserved around the playable area."""
    size: int = BOARD_SIZE

    def is_in_bounds(self, cell: Cell) -> bool:
        x, y = cell
        return 1 <= x < self.size - 1 and 1 <= y < self.size - 1

    def wrap(self, cell: Cell) -> Cell:
        """Fold any coordinate back into 0..size-1 (used by god mode)."""
        x, y = cell
        return (x % self.size, y % self.size)

    @property
    def center(self) -> Cell:
        return (self.size // 2, self.size // 2)
