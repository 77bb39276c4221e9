from typing import List

from .definition import FleetDefinition


def validate_fleet(fleet: FleetDefinition) -> List[str]:
    errors: List[str] = []

    board_size = fleet.board_size
    if not isinstance(board_size, int) or isinstance(board_size, bool) or board_size <= 0:
        errors.append("board_size must be positive")
        board_size = 0

    if not fleet.lengths:
        errors.append("fleet must define at least one ship")

    for index, length in enumerate(fleet.lengths):
        _validate_length(index, length, board_size, errors)

    return errors


def _validate_length(index: int, length, board_size: int, errors: List[str]) -> None:
    if not isinstance(length, int) or isinstance(length, bool):
        errors.append(f"ship #{index} has non-integer length: {length!r}")
    elif length <= 0:
        errors.append(f"ship #{index} must have length > 0")
    elif board_size and length > board_size:
        errors.append(f"ship #{index} of length {length} does not fit a {board_size}x{board_size} board")
