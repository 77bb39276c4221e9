from .analysis import is_valid_fleet_layout, run_lengths, ship_runs
from .generator import (
    GenerationOutcome,
    board_seed,
    generate_boards,
    generate_fleet,
    generate_with_retries,
    new_rng,
    stable_seed,
)
from .selector import SELECTORS, Selection, coin_flip_selector, get_selector, uniform_selector

__all__ = [
    "GenerationOutcome",
    "Selection",
    "SELECTORS",
    "coin_flip_selector",
    "uniform_selector",
    "get_selector",
    "generate_fleet",
    "generate_with_retries",
    "new_rng",
    "board_seed",
    "generate_boards",
    "stable_seed",
    "ship_runs",
    "run_lengths",
    "is_valid_fleet_layout",
]
