import pytest

from lotto_archive.errors import HeaderParseError, MalformedNumber
from lotto_archive.fields import parse_number_slot, parse_two_digit_number, parse_year_token


@pytest.mark.parametrize("token, expected", [
    ("01", 1),
    ("09", 9),
    ("10", 10),
    ("31", 31),
    ("90", 90),
    ("99", 99),  # range is the caller's business
])
def test_parse_two_digit_number(token, expected):
    assert parse_two_digit_number(token) == expected


@pytest.mark.parametrize("token", ["00", "0", "1", "123", "", "--", "ab", "0a", "-1"])
def test_parse_two_digit_number_rejects(token):
    with pytest.raises(MalformedNumber) as exc:
        parse_two_digit_number(token)
    assert exc.value.token == token


def test_parse_two_digit_number_reads_digit_prefix():
    assert parse_two_digit_number("7x") == 7


def test_number_slot_placeholder_is_zero():
    assert parse_number_slot("--") == 0
    assert parse_number_slot("45") == 45


@pytest.mark.parametrize("token", ["91", "99", "00", "-"])
def test_number_slot_rejects_out_of_range(token):
    with pytest.raises(MalformedNumber):
        parse_number_slot(token)


def test_parse_year_token():
    assert parse_year_token("1986") == 1986
    assert parse_year_token("0") == 0
    with pytest.raises(HeaderParseError):
        parse_year_token("BARY")


def test_parse_two_digit_number_accepts_plus_sign():
    assert parse_two_digit_number("+5") == 5
    with pytest.raises(MalformedNumber):
        parse_two_digit_number("+0")


@pytest.mark.parametrize("token", ["1é", "é1", "0é", "٣٣"])
def test_parse_two_digit_number_counts_bytes(token):
    with pytest.raises(MalformedNumber):
        parse_two_digit_number(token)


def test_parse_year_token_accepts_plus_sign():
    assert parse_year_token("+1986") == 1986
    with pytest.raises(HeaderParseError):
        parse_year_token("+")
