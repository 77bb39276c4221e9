from typing import List

from navalbattle.domain.config import NEIGHBORHOOD
from navalbattle.domain.grid import Grid
from navalbattle.domain.types import Cell, CellType, Ship, ShipShape


def can_place_ship(grid: Grid, ship: Ship) -> bool:
    # I. Exclusion zone: no occupied cell may touch the ship, diagonals included.
    for x, y in ship.cells():
        for dx, dy in NEIGHBORHOOD:
            nx = x + dx
            ny = y + dy
            if not grid.in_bounds(nx, ny):
                continue
            if grid.get(nx, ny) == CellType.OCCUPIED:
                return False

    # II. Containment: every ship cell is on the board and still empty.
    for x, y in ship.cells():
        if not grid.in_bounds(x, y):
            return False
        if grid.get(x, y) != CellType.EMPTY:
            return False
    return True


def available_origins(grid: Grid, shape: ShipShape) -> List[Cell]:
    return [
        (x, y)
        for x in range(grid.size)
        for y in range(grid.size)
        if can_place_ship(grid, Ship(x, y, shape))
    ]


def stamp_ship(grid: Grid, ship: Ship) -> None:
    for x, y in ship.cells():
        grid.set(x, y, CellType.OCCUPIED)
