import hashlib
import json
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class FleetDefinition:
    fleet_id: str
    name: str
    board_size: int
    lengths: Tuple[int, ...]
    fleet_version: int = 1

    @property
    def total_cells(self) -> int:
        return sum(int(n) for n in self.lengths)

    def normalized(self) -> dict:
        # Placement order matters, so lengths are kept in fleet order.
        return {
            "fleet_id": self.fleet_id,
            "name": self.name,
            "board_size": int(self.board_size),
            "lengths": [int(n) for n in self.lengths],
        }

    @property
    def fleet_hash(self) -> str:
        payload = json.dumps(self.normalized(), sort_keys=True, separators=(",", ":"))
        return hashlib.sha256(payload.encode("utf-8")).hexdigest()[:16]
