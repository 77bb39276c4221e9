from typing import Tuple

from navalbattle.domain.config import BOARD_SIZE, REFERENCE_FLEET

from .definition import FleetDefinition


def reference_fleet() -> FleetDefinition:
    return FleetDefinition(
        fleet_id="reference",
        name="Reference (10x10, 4-3-3-2-2-2-1-1-1-1)",
        board_size=BOARD_SIZE,
        lengths=REFERENCE_FLEET,
    )


def small_fleet() -> FleetDefinition:
    return FleetDefinition(
        fleet_id="small",
        name="Small (6x6, 3-2-1-1)",
        board_size=6,
        lengths=(3, 2, 1, 1),
    )


def builtin_fleets() -> Tuple[FleetDefinition, ...]:
    return (reference_fleet(), small_fleet())


def find_fleet(fleet_id: str) -> FleetDefinition:
    key = (fleet_id or "reference").strip().lower()
    for fleet in builtin_fleets():
        if fleet.fleet_id == key:
            return fleet
    known = ", ".join(f.fleet_id for f in builtin_fleets())
    raise ValueError(f"Unknown fleet '{fleet_id}'. Use one of: {known}.")
