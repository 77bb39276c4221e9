import hashlib
import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

from navalbattle.domain.config import DEFAULT_MAX_ATTEMPTS
from navalbattle.domain.errors import GenerationFailed, InvalidFleetError
from navalbattle.domain.grid import Grid
from navalbattle.layouts.definition import FleetDefinition
from navalbattle.layouts.placements import stamp_ship
from navalbattle.layouts.validation import validate_fleet
from navalbattle.utils.debug import debug_log

from .selector import Selector, coin_flip_selector


@dataclass(frozen=True)
class GenerationOutcome:
    grid: Grid
    attempts: int


def new_rng(seed: Optional[int] = None) -> random.Random:
    """Seeded generator for reproducible boards, OS-seeded when seed is None."""
    return random.Random(seed)


def generate_fleet(
    fleet: FleetDefinition,
    rng: random.Random,
    selector: Selector = coin_flip_selector,
) -> Grid:
    """Place every ship of ``fleet`` in order on a fresh grid.

    Raises InvalidFleetError before touching any grid when the fleet is
    malformed, and GenerationFailed as soon as a ship has no legal placement.
    A ship longer than the board side counts as malformed: it is reported by
    validate_fleet as InvalidFleetError rather than as GenerationFailed.
    There is no backtracking: earlier ships are never moved. The returned grid
    is frozen.
    """
    errors = validate_fleet(fleet)
    if errors:
        raise InvalidFleetError(errors)

    grid = Grid(fleet.board_size)
    for index, length in enumerate(fleet.lengths):
        selection = selector(grid, length, rng)
        if selection.ship is None:
            raise GenerationFailed(index, length, selection.orientation)
        stamp_ship(grid, selection.ship)
    return grid.freeze()


def generate_with_retries(
    fleet: FleetDefinition,
    rng: random.Random,
    selector: Selector = coin_flip_selector,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> GenerationOutcome:
    if max_attempts < 1:
        raise ValueError("max_attempts must be at least 1")

    attempt = 1
    while True:
        try:
            grid = generate_fleet(fleet, rng, selector)
        except GenerationFailed as exc:
            debug_log(f"{fleet.fleet_id}: attempt {attempt}/{max_attempts} failed: {exc}")
            if attempt >= max_attempts:
                raise
            attempt += 1
            continue
        if attempt > 1:
            debug_log(f"{fleet.fleet_id}: generated after {attempt} attempts")
        return GenerationOutcome(grid, attempt)


def stable_seed(*parts) -> int:
    payload = "|".join(str(p) for p in parts).encode("utf-8")
    digest = hashlib.blake2b(payload, digest_size=8).digest()
    return int.from_bytes(digest, "little") & 0x7FFFFFFF


def board_seed(seed: Optional[int], index: int) -> Optional[int]:
    """Seed for the ``index``-th board of a session started from ``seed``.

    Board 0 uses ``seed`` itself, so a single board is rebuilt by
    ``new_rng(seed)``. Later boards get their own derived seed. An OS-seeded
    session (``seed`` None) stays OS-seeded.
    """
    if seed is None or index == 0:
        return seed
    return stable_seed(seed, "board", index)


def generate_boards(
    fleet: FleetDefinition,
    seed: Optional[int],
    count: int,
    selector: Selector = coin_flip_selector,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> List[Tuple[Optional[int], GenerationOutcome]]:
    """Generate ``count`` independent boards, each from its own seed.

    Returns (seed, outcome) pairs; regenerating with ``new_rng(seed)`` and the
    same fleet, selector and attempt limit yields the same grid.
    """
    boards: List[Tuple[Optional[int], GenerationOutcome]] = []
    for index in range(count):
        own_seed = board_seed(seed, index)
        boards.append((own_seed, generate_with_retries(fleet, new_rng(own_seed), selector, max_attempts)))
    return boards
