#!/usr/bin/env python3
import argparse
import os
import sys
from typing import List, Optional

from navalbattle.domain.config import DEFAULT_MAX_ATTEMPTS, DEFAULT_STRATEGY
from navalbattle.domain.errors import GenerationFailed, InvalidFleetError
from navalbattle.generation import SELECTORS, generate_boards, get_selector, is_valid_fleet_layout
from navalbattle.layouts import builtin_fleets, find_fleet
from navalbattle.persistence.boards_store import append_board
from navalbattle.protocol.messages import InitializeMessage, encode_message
from navalbattle.utils import debug


def _positive_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {raw!r}")
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a random naval battle fleet layout.")
    parser.add_argument(
        "--fleet",
        default="reference",
        choices=[f.fleet_id for f in builtin_fleets()],
        help="Built-in fleet to place (default: reference).",
    )
    parser.add_argument("--seed", type=int, default=None, help="RNG seed; omit for an OS-seeded board.")
    parser.add_argument("--strategy", default=DEFAULT_STRATEGY, choices=sorted(SELECTORS))
    parser.add_argument("--attempts", type=_positive_int, default=DEFAULT_MAX_ATTEMPTS, help="Whole-board retries.")
    parser.add_argument("--boards", type=int, default=1, choices=(1, 2), help="Boards per session (1 or 2).")
    parser.add_argument("--json", action="store_true", help="Print an initialize message instead of text.")
    parser.add_argument("--save", metavar="PATH", default=None, help="Append the board(s) to a JSON store.")
    parser.add_argument("--check", action="store_true", help="Verify the fleet rules on the result.")
    parser.add_argument("--debug", action="store_true")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    if args.debug or debug.env_debug_enabled(os.environ):
        debug.DEBUG_ENABLED = True

    fleet = find_fleet(args.fleet)
    selector = get_selector(args.strategy)

    try:
        boards = generate_boards(fleet, args.seed, args.boards, selector, args.attempts)
    except (GenerationFailed, InvalidFleetError) as exc:
        print(f"Generation failed: {exc}", file=sys.stderr)
        return 1
    grids = [outcome.grid for _, outcome in boards]

    if args.check:
        for grid in grids:
            if not is_valid_fleet_layout(grid, fleet.lengths):
                print("Generated board violates the fleet rules.", file=sys.stderr)
                return 2

    if args.save:
        # Each board is stored with the seed that rebuilds it.
        for board_seed, outcome in boards:
            append_board(outcome.grid, fleet, board_seed, args.strategy, args.save)

    if args.json:
        opponent = grids[1] if len(grids) > 1 else None
        print(encode_message(InitializeMessage(grids[0], opponent)))
    else:
        print("\n\n".join(grid.to_text() for grid in grids))
    return 0


if __name__ == "__main__":
    sys.exit(main())
