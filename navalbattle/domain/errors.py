from typing import List, Sequence


class GenerationFailed(Exception):
    """No legal origin was left for the next ship of the fleet."""

    def __init__(self, ship_index: int, length: int, orientation=None):
        self.ship_index = ship_index
        self.length = length
        self.orientation = orientation
        where = f" ({orientation.name.lower()})" if orientation is not None else ""
        super().__init__(f"no legal placement for ship #{ship_index} of length {length}{where}")


class OutOfBoundsError(IndexError):
    def __init__(self, x: int, y: int, size: int):
        self.x = x
        self.y = y
        self.size = size
        super().__init__(f"cell ({x}, {y}) is outside a {size}x{size} grid")


class InvalidFleetError(ValueError):
    def __init__(self, errors: Sequence[str]):
        self.errors: List[str] = list(errors)
        super().__init__("; ".join(self.errors) or "invalid fleet")


class GridFrozenError(RuntimeError):
    pass
