import random
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from navalbattle.domain.config import STRATEGY_COIN_FLIP, STRATEGY_UNIFORM
from navalbattle.domain.grid import Grid
from navalbattle.domain.types import Orientation, Ship, ShipShape
from navalbattle.layouts.placements import available_origins


@dataclass(frozen=True)
class Selection:
    """Outcome of one selection step.

    ``ship`` is None when no legal placement was found; ``orientation`` is the
    orientation that was tried (None when both were considered).
    """

    ship: Optional[Ship]
    orientation: Optional[Orientation]
    candidates: int


Selector = Callable[[Grid, int, random.Random], Selection]


def coin_flip_selector(grid: Grid, length: int, rng: random.Random) -> Selection:
    # Flip a coin for the orientation, then pick among that orientation only.
    orientation = Orientation.HORIZONTAL if rng.random() < 0.5 else Orientation.VERTICAL
    shape = ShipShape(orientation, length)
    origins = available_origins(grid, shape)
    if not origins:
        return Selection(None, orientation, 0)
    x, y = rng.choice(origins)
    return Selection(Ship(x, y, shape), orientation, len(origins))


def uniform_selector(grid: Grid, length: int, rng: random.Random) -> Selection:
    # A single cell covers the same square either way, so count it once.
    orientations = [Orientation.HORIZONTAL] if length == 1 else list(Orientation)
    candidates: List[Tuple[int, int, ShipShape]] = []
    for orientation in orientations:
        shape = ShipShape(orientation, length)
        candidates.extend((x, y, shape) for x, y in available_origins(grid, shape))
    if not candidates:
        return Selection(None, None, 0)
    x, y, shape = rng.choice(candidates)
    return Selection(Ship(x, y, shape), shape.orientation, len(candidates))


SELECTORS: Dict[str, Selector] = {
    STRATEGY_COIN_FLIP: coin_flip_selector,
    STRATEGY_UNIFORM: uniform_selector,
}


def get_selector(name: str) -> Selector:
    key = (name or STRATEGY_COIN_FLIP).strip().lower()
    if key not in SELECTORS:
        raise ValueError(f"Unknown strategy '{name}'. Use one of: {', '.join(sorted(SELECTORS))}.")
    return SELECTORS[key]
