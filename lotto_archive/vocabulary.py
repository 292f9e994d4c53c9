from enum import IntEnum
from typing import Dict, Tuple


class Location(IntEnum):
    """Draw locations ("ruote"). Values are the 4-bit codes stored on disk."""
    NAZIONALE = 0
    BARI = 1
    CAGLIARI = 2
    FIRENZE = 3
    GENOVA = 4
    MILANO = 5
    NAPOLI = 6
    PALERMO = 7
    ROMA = 8
    TORINO = 9
    VENEZIA = 10
    ALL = 11
    UNKNOWN = 12


class Month(IntEnum):
    """Months as numbered on disk; NULL only ever appears while parsing."""
    NULL = 0
    GEN = 1
    FEB = 2
    MAR = 3
    APR = 4
    MAG = 5
    GIU = 6
    LUG = 7
    AGO = 8
    SET = 9
    OTT = 10
    NOV = 11
    DIC = 12


# Locations a persisted draw may carry
NAMED_LOCATIONS: Tuple[Location, ...] = tuple(
    loc for loc in Location if loc not in (Location.ALL, Location.UNKNOWN)
)

_LOCATION_NAMES: Dict[Location, str] = {loc: loc.name for loc in NAMED_LOCATIONS}
_LOCATION_NAMES[Location.ALL] = "TUTTE"

_LOCATIONS_BY_NAME: Dict[str, Location] = {name: loc for loc, name in _LOCATION_NAMES.items()}
_LOCATIONS_BY_NAME["ALL"] = Location.ALL

_MONTH_NAMES: Dict[Month, str] = {m: m.name for m in Month if m is not Month.NULL}
_MONTHS_BY_NAME: Dict[str, Month] = {name: m for m, name in _MONTH_NAMES.items()}


def location_to_string(location) -> str:
    try:
        return _LOCATION_NAMES.get(Location(location), "UNKNOWN")
    except ValueError:
        return "UNKNOWN"


def string_to_location(name: str) -> Location:
    """Case-insensitive lookup; anything unrecognised maps to Location.UNKNOWN."""
    return _LOCATIONS_BY_NAME.get(name.upper(), Location.UNKNOWN)


def month_to_string(month) -> str:
    try:
        return _MONTH_NAMES.get(Month(month), "UNKNOWN")
    except ValueError:
        return "UNKNOWN"


def string_to_month(name: str) -> Month:
    """Case-insensitive lookup; anything unrecognised maps to Month.NULL."""
    return _MONTHS_BY_NAME.get(name.upper(), Month.NULL)
