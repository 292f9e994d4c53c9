import numpy as np
import pytest

from lotto_archive.codec import FIELD_LAYOUT, Draw, decode, decode_many, describe, encode, encode_many
from lotto_archive.vocabulary import Location, Month


@pytest.fixture
def draw():
    return Draw(Location.VENEZIA, 31, Month.DIC, 2020, 90, 1, 45, 0, 77)


def test_layout_covers_64_bits_without_gaps():
    position = 0
    for _, shift, width in FIELD_LAYOUT:
        assert shift == position
        position += width
    assert position == 64


def test_encode_known_value():
    d = Draw(Location.BARI, 5, Month.GEN, 1985, 12, 34, 56, 78, 90)
    expected = (
        1
        | 12 << 4
        | 34 << 11
        | 56 << 18
        | 78 << 25
        | 90 << 32
        | 5 << 39
        | 1 << 44
        | 1985 << 48
    )
    assert encode(d) == expected


def test_decode_inverts_encode(draw):
    decoded = decode(encode(draw))
    assert decoded == draw
    assert decoded.location is Location.VENEZIA
    assert decoded.month is Month.DIC


def test_max_values_fill_the_record():
    d = Draw(15, 31, 15, 65535, 127, 127, 127, 127, 127)
    assert encode(d) == (1 << 64) - 1


def test_decode_is_total():
    d = decode((1 << 64) - 1)
    assert d.location == 15
    assert d.month == 15
    assert d.year == 65535
    assert decode(0) == Draw(Location.NAZIONALE, 0, Month.NULL, 0, 0, 0, 0, 0, 0)


@pytest.mark.parametrize("name, value", [
    ("location", Location.NAZIONALE),
    ("n1", 3),
    ("n2", 89),
    ("n3", 0),
    ("n4", 64),
    ("n5", 12),
    ("day", 1),
    ("month", Month.MAR),
    ("year", 1871),
])
def test_changing_one_field_touches_only_its_bits(draw, name, value):
    _, shift, width = next(f for f in FIELD_LAYOUT if f[0] == name)
    field_mask = ((1 << width) - 1) << shift

    before = encode(draw)
    after = encode(draw._replace(**{name: value}))

    assert (before ^ after) & ~field_mask == 0
    assert (after & field_mask) >> shift == value


def test_vectorised_codec_matches_scalar(draw):
    draws = [
        draw,
        Draw(Location.NAZIONALE, 1, Month.GEN, 1871, 1, 0, 0, 0, 0),
        Draw(Location.ROMA, 15, Month.AGO, 1999, 5, 6, 7, 8, 9),
    ]
    raw = encode_many(draws)
    assert raw.dtype == np.uint64
    assert [int(v) for v in raw] == [encode(d) for d in draws]
    assert decode_many(raw) == draws


def test_vectorised_codec_empty():
    assert encode_many([]).size == 0
    assert decode_many(np.zeros(0, dtype=np.uint64)) == []


def test_describe_lists_every_field(draw):
    text = describe(draw)
    assert "year:" in text and "2020" in text
    assert "location:" in text and "10" in text
    assert len(text.splitlines()) == 9
