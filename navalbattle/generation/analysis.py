from collections import Counter
from typing import List, Sequence, Set

from navalbattle.domain.config import NEIGHBORHOOD
from navalbattle.domain.grid import Grid
from navalbattle.domain.types import Cell, CellType


def ship_runs(grid: Grid) -> List[List[Cell]]:
    """Group occupied cells into 8-connected components.

    With the one-cell gap rule in force every component is exactly one ship.
    """
    seen: Set[Cell] = set()
    runs: List[List[Cell]] = []
    for start in grid.occupied_cells():
        if start in seen:
            continue
        seen.add(start)
        stack = [start]
        component: List[Cell] = []
        while stack:
            x, y = stack.pop()
            component.append((x, y))
            for dx, dy in NEIGHBORHOOD:
                nx = x + dx
                ny = y + dy
                if (nx, ny) in seen or not grid.in_bounds(nx, ny):
                    continue
                if grid.get(nx, ny) == CellType.OCCUPIED:
                    seen.add((nx, ny))
                    stack.append((nx, ny))
        runs.append(sorted(component))
    return runs


def is_straight_run(cells: Sequence[Cell]) -> bool:
    xs = {x for x, _ in cells}
    ys = {y for _, y in cells}
    if len(xs) == 1:
        span = max(ys) - min(ys) + 1
    elif len(ys) == 1:
        span = max(xs) - min(xs) + 1
    else:
        return False
    return span == len(cells)


def run_lengths(grid: Grid) -> List[int]:
    return sorted((len(run) for run in ship_runs(grid)), reverse=True)


def is_valid_fleet_layout(grid: Grid, lengths: Sequence[int]) -> bool:
    runs = ship_runs(grid)
    if not all(is_straight_run(run) for run in runs):
        return False
    return Counter(len(run) for run in runs) == Counter(lengths)
