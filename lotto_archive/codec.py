import numpy as np
from typing import List, NamedTuple, Sequence, Tuple

from .vocabulary import Location, Month


class Draw(NamedTuple):
    """One location's five numbers for a given date."""
    location: int
    day: int
    month: int
    year: int
    n1: int
    n2: int
    n3: int
    n4: int
    n5: int


# (field, shift, width) from the least significant bit upwards; widths add up to 64
FIELD_LAYOUT: Tuple[Tuple[str, int, int], ...] = (
    ("location", 0, 4),
    ("n1", 4, 7),
    ("n2", 11, 7),
    ("n3", 18, 7),
    ("n4", 25, 7),
    ("n5", 32, 7),
    ("day", 39, 5),
    ("month", 44, 4),
    ("year", 48, 16),
)

# Order used when dumping a record for diagnostics
_DESCRIBE_ORDER = ("year", "month", "day", "n1", "n2", "n3", "n4", "n5", "location")


def _mask(width: int) -> int:
    return (1 << width) - 1


def _as_enum(enum_cls, value: int):
    try:
        return enum_cls(value)
    except ValueError:
        return value


def encode(draw: Draw) -> int:
    """Pack a draw into its 64-bit record. Values must already be in range."""
    raw = 0
    for name, shift, width in FIELD_LAYOUT:
        raw |= (int(getattr(draw, name)) & _mask(width)) << shift
    return raw


def _from_fields(fields: dict) -> Draw:
    fields["location"] = _as_enum(Location, fields["location"])
    fields["month"] = _as_enum(Month, fields["month"])
    return Draw(**fields)


def decode(raw: int) -> Draw:
    """Unpack any 64-bit value into a draw; codes with no enum member stay plain ints."""
    raw = int(raw)
    return _from_fields({name: (raw >> shift) & _mask(width) for name, shift, width in FIELD_LAYOUT})


def encode_many(draws: Sequence[Draw]) -> np.ndarray:
    """Vectorised encode; returns a native-order uint64 array."""
    raw = np.zeros(len(draws), dtype=np.uint64)
    if not len(draws):
        return raw

    columns = np.array([[int(v) for v in d] for d in draws], dtype=np.uint64)
    for name, shift, width in FIELD_LAYOUT:
        col = columns[:, Draw._fields.index(name)]
        raw |= (col & np.uint64(_mask(width))) << np.uint64(shift)
    return raw


def decode_many(raw: np.ndarray) -> List[Draw]:
    """Vectorised decode of an array of 64-bit records."""
    raw = np.asarray(raw).astype(np.uint64)
    columns = {
        name: ((raw >> np.uint64(shift)) & np.uint64(_mask(width))).tolist()
        for name, shift, width in FIELD_LAYOUT
    }
    return [_from_fields({name: values[i] for name, values in columns.items()}) for i in range(len(raw))]


def describe(draw: Draw) -> str:
    """Multi-line field dump used in verification failures."""
    return "\n".join(f"   {name + ':':<10} {int(getattr(draw, name))}" for name in _DESCRIBE_ORDER)
