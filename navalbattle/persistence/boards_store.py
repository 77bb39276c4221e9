import json
import os
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from navalbattle.domain.grid import Grid
from navalbattle.layouts.definition import FleetDefinition


BOARDS_PATH = "navalbattle_boards.json"


@dataclass(frozen=True)
class SavedBoard:
    fleet_id: str
    fleet_hash: str
    seed: Optional[int]
    strategy: str
    grid: Grid


def serialize_board(board: SavedBoard) -> Dict[str, Any]:
    return {
        "fleet_id": board.fleet_id,
        "fleet_hash": board.fleet_hash,
        "board_size": int(board.grid.size),
        "seed": board.seed,
        "strategy": board.strategy,
        "rows": board.grid.to_lines(),
    }


def make_saved_board(grid: Grid, fleet: FleetDefinition, seed: Optional[int], strategy: str) -> SavedBoard:
    return SavedBoard(fleet.fleet_id, fleet.fleet_hash, seed, strategy, grid)


def deserialize_board(data: Dict[str, Any]) -> Optional[SavedBoard]:
    fleet_id = str(data.get("fleet_id", "")).strip()
    fleet_hash = str(data.get("fleet_hash", "")).strip()
    strategy = str(data.get("strategy", "")).strip()
    rows = data.get("rows")
    seed = data.get("seed")
    if not fleet_id or not isinstance(rows, list):
        return None
    if seed is not None and not isinstance(seed, int):
        return None
    try:
        grid = Grid.from_lines(str(row) for row in rows)
    except ValueError:
        return None
    if data.get("board_size", grid.size) != grid.size:
        return None
    return SavedBoard(fleet_id, fleet_hash, seed, strategy, grid.freeze())


def load_boards(path: str = BOARDS_PATH) -> List[SavedBoard]:
    if not os.path.exists(path):
        return []
    try:
        with open(path, "r") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError):
        return []

    boards_raw = data.get("boards") if isinstance(data, dict) else None
    if not isinstance(boards_raw, list):
        return []

    out: List[SavedBoard] = []
    for item in boards_raw:
        if not isinstance(item, dict):
            continue
        board = deserialize_board(item)
        if board is not None:
            out.append(board)
    return out


def append_board(
    grid: Grid,
    fleet: FleetDefinition,
    seed: Optional[int],
    strategy: str,
    path: str = BOARDS_PATH,
) -> None:
    boards = [serialize_board(b) for b in load_boards(path)]
    boards.append(serialize_board(make_saved_board(grid, fleet, seed, strategy)))
    save_boards(boards, path)


def save_boards(boards: List[Dict[str, Any]], path: str = BOARDS_PATH) -> None:
    data = {
        "schema": 1,
        "boards": boards,
    }
    tmp_path = f"{path}.tmp"
    try:
        with open(tmp_path, "w") as f:
            json.dump(data, f)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_path, path)
    except OSError:
        try:
            os.remove(tmp_path)
        except OSError:
            pass
