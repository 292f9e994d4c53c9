import os
from dataclasses import dataclass
from pathlib import Path

from .errors import ConfigError

# Archive Rules
LOTTO_START_YEAR = 1871
LOTTO_END_YEAR = 2020
NUMBERS_PER_DRAW = 5
MAX_DAY = 31
MAX_NUMBER = 90

# Text Format
END_MARKER = "END"
BLANK_NUMBER = "--"
INPUT_FILENAME = "{year:04d}.txt"
INPUT_ENCODING = "utf-8"

# Binary Format
RECORD_SIZE = 8
RECORD_DTYPE = ">u8"  # big-endian, most significant byte first

# File Paths
PROJECT_ROOT = Path(__file__).parent.parent.absolute()
DATA_DIR = Path(os.environ.get("LOTTO_ARCHIVE_DATA_DIR", PROJECT_ROOT / "lotto_data"))
LOGS_DIR = PROJECT_ROOT / "logs"
LOG_FILE = LOGS_DIR / "lotto_importer.log"
LOG_LEVEL = os.environ.get("LOTTO_ARCHIVE_LOG_LEVEL", "INFO")


@dataclass
class ImportConfig:
    """Parameters of a single import run."""
    start_year: int
    end_year: int
    output_path: Path
    data_dir: Path = DATA_DIR

    def validate(self) -> bool:
        """Validate year bounds and the output location."""
        for label, year in (("start", self.start_year), ("end", self.end_year)):
            if year < LOTTO_START_YEAR or year > LOTTO_END_YEAR:
                raise ConfigError(
                    f"{label} year out of bounds, {label} year = {year} "
                    f"lower bound = {LOTTO_START_YEAR} upper bound = {LOTTO_END_YEAR}"
                )
        if self.start_year > self.end_year:
            raise ConfigError(f"start year {self.start_year} is after end year {self.end_year}")

        output_path = Path(self.output_path)
        if output_path.exists():
            kind = "a regular file" if output_path.is_file() else "not a regular file"
            raise ConfigError(f"file {output_path} does exist and is {kind}")
        return True
