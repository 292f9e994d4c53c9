import logging
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

import pandas as pd

from .codec import Draw
from .config import DATA_DIR, END_MARKER, INPUT_ENCODING, INPUT_FILENAME, MAX_DAY, NUMBERS_PER_DRAW
from .errors import HeaderParseError, InputFileError, InvalidMonth, LottoArchiveError, MalformedNumber, MalformedRecord, YearMismatch
from .fields import parse_number_slot, parse_two_digit_number, parse_year_token
from .vocabulary import NAMED_LOCATIONS, Location, Month, location_to_string, string_to_location, string_to_month

logger = logging.getLogger(__name__)


def _check_year(token: str, year: int) -> None:
    current_year = parse_year_token(token)
    if current_year != year:
        raise YearMismatch(f"current year {current_year} does not match asked year {year}", token=token)


def parse_header(header: str, year: int) -> List[Location]:
    """
    Parse the first line of a yearly file.

    The line is "<year> <location>... [<year>]". Returns the locations in the
    order their number groups appear on every record line of that year.
    """
    tokens = header.split()
    if not tokens:
        raise HeaderParseError("empty header", year=year, line=1)

    try:
        _check_year(tokens[0], year)
        locations = []
        for token in tokens[1:]:
            location = string_to_location(token)
            if location in NAMED_LOCATIONS:
                locations.append(location)
            else:
                # Only a repeated year may sit among the locations
                _check_year(token, year)
    except LottoArchiveError as e:
        e.with_context(year=year, line=1)
        raise

    if not locations:
        raise HeaderParseError("header declares no locations", year=year, line=1)
    return locations


def expected_token_count(locations: Sequence[Location]) -> int:
    """Day, month, five numbers per location, and one trailing token."""
    return 2 + NUMBERS_PER_DRAW * len(locations) + 1


def parse_record(tokens: Sequence[str], locations: Sequence[Location], year: int) -> List[Draw]:
    """Turn one tokenised record line into the draws it holds."""
    expected = expected_token_count(locations)
    if len(tokens) != expected:
        raise MalformedRecord(f"ill formed record, {len(tokens)} tokens, requested {expected}")

    day = parse_two_digit_number(tokens[0])
    if day > MAX_DAY:
        raise MalformedNumber(f"day {day} out of range 1-{MAX_DAY}", token=tokens[0])

    month = string_to_month(tokens[1])
    if month is Month.NULL:
        raise InvalidMonth("invalid month", token=tokens[1])

    draws = []
    # The trailing token is counted above but carries nothing we store
    for index, location in enumerate(locations):
        start = 2 + index * NUMBERS_PER_DRAW
        numbers = [parse_number_slot(t) for t in tokens[start:start + NUMBERS_PER_DRAW]]
        # A location with no first number was not drawn that day
        if numbers[0] == 0:
            continue
        draws.append(Draw(location, day, month, year, *numbers))
    return draws


def parse_year(lines: Iterable[str], year: int, draws: Optional[List[Draw]] = None) -> List[Draw]:
    """
    Parse every line of one yearly file, appending its draws to `draws`.

    Parsing stops at a line holding only END or at the end of input. Any
    malformed line raises; nothing is skipped.
    """
    if draws is None:
        draws = []

    lines = iter(lines)
    header = next(lines, None)
    if header is None:
        raise HeaderParseError("missing header", year=year, line=1)
    locations = parse_header(header, year)
    logger.debug(f"Year {year} locations: {[location_to_string(loc) for loc in locations]}")

    for line_number, line in enumerate(lines, start=2):
        tokens = line.split()
        if tokens == [END_MARKER]:
            logger.info(f"End of file at line {line_number}")
            break
        try:
            draws.extend(parse_record(tokens, locations, year))
        except LottoArchiveError as e:
            e.with_context(year=year, line=line_number)
            raise

    return draws


class LottoArchiveManager:
    """Locates and parses the yearly text files of the archive."""

    def __init__(self, data_dir: Path = DATA_DIR):
        self.data_dir = Path(data_dir)

    def input_path(self, year: int) -> Path:
        return self.data_dir / INPUT_FILENAME.format(year=year)

    def load_year(self, year: int, draws: List[Draw]) -> List[Draw]:
        """Parse one yearly file into `draws`."""
        path = self.input_path(year)
        if not path.is_file():
            raise InputFileError(f"not found file: {path.name}", year=year)
        logger.info(f"... found file: {path.name}")

        before = len(draws)
        try:
            with open(path, "r", encoding=INPUT_ENCODING) as f:
                parse_year(f, year, draws)
        except UnicodeDecodeError as e:
            raise InputFileError(f"file {path.name} is not valid {INPUT_ENCODING} text: {e}", year=year) from e
        except OSError as e:
            raise InputFileError(f"could not read file {path.name}: {e}", year=year) from e

        logger.info(f"Year {year}: {len(draws) - before} draws")
        return draws

    def load_years(self, start_year: int, end_year: int) -> List[Draw]:
        """Parse every year from start_year to end_year inclusive, stopping at the first failure."""
        draws: List[Draw] = []
        for year in range(start_year, end_year + 1):
            logger.info(f"... processing year: {year}")
            self.load_year(year, draws)
        logger.info(f"Successfully loaded {len(draws)} draws.")
        return draws


def to_frame(draws: Sequence[Draw]) -> pd.DataFrame:
    """Tabular view of a draw sequence, one row per draw."""
    df = pd.DataFrame(list(draws), columns=list(Draw._fields))
    df["location"] = df["location"].map(location_to_string)
    for column in Draw._fields[1:]:
        df[column] = df[column].astype(int)
    return df


def summarize(draws: Sequence[Draw]) -> pd.DataFrame:
    """Draw counts per location (rows) and year (columns)."""
    df = to_frame(draws)
    if df.empty:
        return pd.DataFrame()
    return df.pivot_table(index="location", columns="year", values="day", aggfunc="count", fill_value=0)
