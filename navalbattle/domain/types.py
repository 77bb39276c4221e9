from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Tuple

Cell = Tuple[int, int]


class CellType(Enum):
    EMPTY = "empty"
    BLOCKED = "blocked"
    OCCUPIED = "occupied"


class Orientation(Enum):
    HORIZONTAL = (1, 0)
    VERTICAL = (0, 1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


@dataclass(frozen=True)
class ShipShape:
    orientation: Orientation
    length: int


@dataclass(frozen=True)
class Ship:
    x: int
    y: int
    shape: ShipShape

    def cells(self) -> Iterator[Cell]:
        """Yield the covered cells from the origin along the orientation.

        No bounds checking happens here; consumers check bounds.
        """
        dx = self.shape.orientation.dx
        dy = self.shape.orientation.dy
        for k in range(self.shape.length):
            yield self.x + k * dx, self.y + k * dy
