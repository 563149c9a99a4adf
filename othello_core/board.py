from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional, Sequence, Set, Tuple

SIZE = 8

Coord = Tuple[int, int]


class Cell(str, Enum):
    """Occupancy of a single square. Values double as the JSON wire symbols."""
    EMPTY = '.'
    BLACK = 'B'
    WHITE = 'W'


# A Player is a Cell restricted to BLACK or WHITE.
Player = Cell

DIRECTIONS: Tuple[Coord, ...] = (
    (-1, 0), (1, 0), (0, -1), (0, 1),
    (-1, -1), (-1, 1), (1, -1), (1, 1),
)


def opponent(player: Player) -> Player:
    """Returns the other colour."""
    if player == Cell.BLACK:
        return Cell.WHITE
    if player == Cell.WHITE:
        return Cell.BLACK
    raise ValueError(f'not a player: {player!r}')


def _empty_grid() -> List[Cell]:
    return [Cell.EMPTY] * (SIZE * SIZE)


@dataclass
class Board:
    """The 8x8 grid of cells, stored row-major."""
    grid: List[Cell] = field(default_factory=_empty_grid)

    def __post_init__(self) -> None:
        if len(self.grid) != SIZE * SIZE:
            raise ValueError(f'expected {SIZE * SIZE} cells, got {len(self.grid)}')

    @classmethod
    def initial(cls) -> 'Board':
        """Standard opening: two White discs on one diagonal, two Black on the other."""
        board = cls()
        mid = SIZE // 2
        board.place(mid - 1, mid - 1, Cell.WHITE)
        board.place(mid, mid, Cell.WHITE)
        board.place(mid - 1, mid, Cell.BLACK)
        board.place(mid, mid - 1, Cell.BLACK)
        return board

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[str]]) -> 'Board':
        """Builds a board from 8 rows of '.', 'B', 'W' symbols (strings or lists)."""
        if len(rows) != SIZE:
            raise ValueError(f'expected {SIZE} rows, got {len(rows)}')
        grid: List[Cell] = []
        for r, row in enumerate(rows):
            if len(row) != SIZE:
                raise ValueError(f'row {r} has {len(row)} cells, expected {SIZE}')
            for sym in row:
                grid.append(Cell(sym))
        return cls(grid)

    @staticmethod
    def in_bounds(r: int, c: int) -> bool:
        return 0 <= r < SIZE and 0 <= c < SIZE

    def index(self, r: int, c: int) -> int:
        """Calculates the 1D index for a given row and column."""
        return r * SIZE + c

    def at(self, r: int, c: int) -> Cell:
        return self.grid[self.index(r, c)]

    def place(self, r: int, c: int, cell: Cell) -> None:
        self.grid[self.index(r, c)] = cell

    def is_empty(self, r: int, c: int) -> bool:
        return self.at(r, c) == Cell.EMPTY

    def coords(self) -> Iterable[Coord]:
        """Iterates over all coordinates on the board."""
        for r in range(SIZE):
            for c in range(SIZE):
                yield (r, c)

    def count(self, cell: Cell) -> int:
        return sum(1 for x in self.grid if x == cell)

    def occupied(self) -> int:
        return len(self.grid) - self.count(Cell.EMPTY)

    def copy(self) -> 'Board':
        return Board(list(self.grid))

    def rows(self) -> Tuple[Tuple[Cell, ...], ...]:
        """Read-only snapshot of the grid, one tuple per row."""
        return tuple(tuple(self.grid[r * SIZE:(r + 1) * SIZE]) for r in range(SIZE))

    def pretty(self, marks: Optional[Set[Coord]] = None) -> str:
        """Generates a human-readable rendering; marked empty cells show as '*'."""
        mset = marks or set()
        lines: List[str] = ['  ' + ' '.join('abcdefgh'[:SIZE])]
        for r in range(SIZE):
            row: List[str] = []
            for c in range(SIZE):
                cell = self.at(r, c)
                if cell == Cell.EMPTY and (r, c) in mset:
                    row.append('*')
                else:
                    row.append(cell.value)
            lines.append(f"{r + 1} " + ' '.join(row))
        return '\n'.join(lines)
