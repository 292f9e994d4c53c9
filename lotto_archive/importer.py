import logging
from pathlib import Path
from typing import List, NamedTuple

from .codec import Draw
from .config import ImportConfig
from .data import LottoArchiveManager
from .storage import verify_db, write_db

logger = logging.getLogger(__name__)


class ImportResult(NamedTuple):
    draws: List[Draw]
    bytes_written: int
    output_path: Path


class LottoImporter:
    """Runs the whole import: parse every year, write the database, verify it."""

    def __init__(self, config: ImportConfig):
        self.config = config
        self.dm = LottoArchiveManager(config.data_dir)

    def run(self) -> ImportResult:
        self.config.validate()
        output_path = Path(self.config.output_path)

        logger.info("Processing with following info:")
        logger.info(f"path to db: {output_path}")
        logger.info(f"start year: {self.config.start_year}")
        logger.info(f"end   year: {self.config.end_year}")

        # 1. Parse (any failing year aborts the run)
        draws = self.dm.load_years(self.config.start_year, self.config.end_year)

        # 2. Save
        bytes_written = write_db(draws, output_path)

        # 3. Read back and compare
        verify_db(draws, output_path)

        return ImportResult(draws, bytes_written, output_path)
