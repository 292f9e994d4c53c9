import re

from .config import BLANK_NUMBER, MAX_NUMBER
from .errors import HeaderParseError, MalformedNumber

_DIGITS = re.compile(r"\+?([0-9]+)")


def _parse_unsigned_prefix(text: str):
    """Value of a leading run of decimal digits, optionally signed with '+'; None if there is none."""
    match = _DIGITS.match(text)
    if match is None:
        return None
    return int(match.group(1))


def parse_two_digit_number(token: str) -> int:
    """
    Parse a two-character numeric token such as "07" or "45".

    A leading '0' is dropped before parsing. Zero is reserved for "no number",
    so "00" is rejected like any other malformed token. Range checks are left
    to the caller.
    """
    # Two bytes, not two characters
    if len(token.encode()) != 2:
        raise MalformedNumber("invalid number", token=token)

    digits = token[1:] if token[0] == "0" else token
    value = _parse_unsigned_prefix(digits)
    if value is None or value == 0:
        raise MalformedNumber("invalid number", token=token)
    return value


def parse_number_slot(token: str) -> int:
    """Parse one of the five number slots of a draw; "--" means not drawn (0)."""
    if token == BLANK_NUMBER:
        return 0
    number = parse_two_digit_number(token)
    if number > MAX_NUMBER:
        raise MalformedNumber(f"number {number} out of range 1-{MAX_NUMBER}", token=token)
    return number


def parse_year_token(token: str) -> int:
    """Parse the year found in a header line."""
    year = _parse_unsigned_prefix(token)
    if year is None:
        raise HeaderParseError("not a valid current year", token=token)
    return year
