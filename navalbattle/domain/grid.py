from typing import Dict, Iterable, List, Tuple

from .config import BLOCKED_SYMBOL, BOARD_SIZE, EMPTY_SYMBOL, OCCUPIED_SYMBOL
from .errors import GridFrozenError, InvalidFleetError, OutOfBoundsError
from .types import Cell, CellType

CELL_SYMBOLS: Dict[CellType, str] = {
    CellType.EMPTY: EMPTY_SYMBOL,
    CellType.BLOCKED: BLOCKED_SYMBOL,
    CellType.OCCUPIED: OCCUPIED_SYMBOL,
}
SYMBOL_CELLS: Dict[str, CellType] = {sym: cell for cell, sym in CELL_SYMBOLS.items()}


class Grid:
    """N x N board of cell states addressed by zero-based (x, y) = (column, row)."""

    def __init__(self, size: int = BOARD_SIZE):
        if size <= 0:
            raise InvalidFleetError([f"board_size must be positive, got {size}"])
        self.size = size
        self._cells: List[List[CellType]] = [[CellType.EMPTY for _ in range(size)] for _ in range(size)]
        self._frozen = False

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def _check(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(x, y, self.size)

    def get(self, x: int, y: int) -> CellType:
        self._check(x, y)
        return self._cells[y][x]

    def set(self, x: int, y: int, value: CellType) -> None:
        if self._frozen:
            raise GridFrozenError("grid is read-only once generation has completed")
        self._check(x, y)
        self._cells[y][x] = value

    def freeze(self) -> "Grid":
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def rows(self) -> List[Tuple[CellType, ...]]:
        return [tuple(row) for row in self._cells]

    def count(self, value: CellType) -> int:
        return sum(row.count(value) for row in self._cells)

    def occupied_cells(self) -> List[Cell]:
        return [
            (x, y)
            for y in range(self.size)
            for x in range(self.size)
            if self._cells[y][x] == CellType.OCCUPIED
        ]

    def to_lines(self) -> List[str]:
        return ["".join(CELL_SYMBOLS[cell] for cell in row) for row in self._cells]

    def to_text(self) -> str:
        return "\n".join(self.to_lines())

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "Grid":
        rows = [line.strip() for line in lines if line.strip()]
        grid = cls(len(rows))
        for y, line in enumerate(rows):
            if len(line) != grid.size:
                raise ValueError(f"row {y} has {len(line)} cells, expected {grid.size}")
            for x, sym in enumerate(line):
                if sym not in SYMBOL_CELLS:
                    raise ValueError(f"unknown cell symbol {sym!r} at ({x}, {y})")
                grid._cells[y][x] = SYMBOL_CELLS[sym]
        return grid

    @classmethod
    def from_text(cls, text: str) -> "Grid":
        return cls.from_lines(text.splitlines())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.size == other.size and self._cells == other._cells

    def __repr__(self) -> str:
        return f"Grid(size={self.size}, occupied={self.count(CellType.OCCUPIED)})"

    def __str__(self) -> str:
        return self.to_text()
