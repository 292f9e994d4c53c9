import argparse
import logging
import sys
from pathlib import Path

from lotto_archive.config import DATA_DIR, LOG_FILE, LOG_LEVEL, LOGS_DIR, LOTTO_END_YEAR, LOTTO_START_YEAR, ImportConfig
from lotto_archive.data import summarize
from lotto_archive.errors import LottoArchiveError, RecordMismatch
from lotto_archive.importer import LottoImporter

logger = logging.getLogger(__name__)


def setup_logging(level: str = LOG_LEVEL) -> None:
    LOGS_DIR.mkdir(exist_ok=True)
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler(LOG_FILE),
            logging.StreamHandler(sys.stdout)
        ]
    )


def build_parser() -> argparse.ArgumentParser:
    years = f"{LOTTO_START_YEAR}-{LOTTO_END_YEAR}"
    parser = argparse.ArgumentParser(description="Import the Lotto text archive into a binary database")
    parser.add_argument("start_year", type=int, help=f"First year to import ({years})")
    parser.add_argument("end_year", type=int, help=f"Last year to import ({years})")
    parser.add_argument("output", type=Path, help="Database file to create (must not exist)")
    parser.add_argument("--data-dir", type=Path, default=DATA_DIR, help="Directory holding the YYYY.txt files")
    parser.add_argument("--summary", action="store_true", help="Print draw counts per location and year")
    parser.add_argument("--log-level", default=LOG_LEVEL, help="Logging level")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    config = ImportConfig(
        start_year=args.start_year,
        end_year=args.end_year,
        output_path=args.output,
        data_dir=args.data_dir,
    )

    try:
        logger.info("=== this is lotto_importer ===")
        result = LottoImporter(config).run()
    except RecordMismatch as e:
        logger.error(f"Error from verify: {e}\n{e.details()}")
        return 1
    except LottoArchiveError as e:
        logger.error(f"Error: {e}, abort.")
        return 1

    if args.summary:
        print("\n=== Draws per location and year ===")
        print(summarize(result.draws).to_string())

    logger.info(f"Imported {len(result.draws)} draws into {result.output_path} ({result.bytes_written} bytes)")
    logger.info("=== Execution Complete ===")
    return 0


if __name__ == "__main__":
    sys.exit(main())

# python3 main.py 1871 2020 lotto.db --data-dir lotto_data --summary
