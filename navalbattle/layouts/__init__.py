from .builtins import builtin_fleets, find_fleet, reference_fleet, small_fleet
from .definition import FleetDefinition
from .placements import available_origins, can_place_ship, stamp_ship
from .validation import validate_fleet

__all__ = [
    "FleetDefinition",
    "reference_fleet",
    "small_fleet",
    "builtin_fleets",
    "find_fleet",
    "available_origins",
    "can_place_ship",
    "stamp_ship",
    "validate_fleet",
]
