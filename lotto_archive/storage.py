import logging
from pathlib import Path
from typing import List, Optional, Sequence

import numpy as np

from .codec import Draw, decode, decode_many, encode_many
from .config import RECORD_DTYPE, RECORD_SIZE
from .errors import InputFileError, OutputFileError, RecordMismatch, TruncatedFile

logger = logging.getLogger(__name__)


def serialize(draws: Sequence[Draw]) -> bytes:
    """Encode every draw as 8 big-endian bytes. No header, no footer."""
    return encode_many(draws).astype(RECORD_DTYPE).tobytes()


def verify(draws: Sequence[Draw], data: bytes, source: Optional[str] = None) -> int:
    """
    Check `data` against the in-memory draws, record by record.

    Raises RecordMismatch at the first differing record (1-based index) and
    TruncatedFile when the data ends before the last expected record.
    Returns the number of verified records.
    """
    expected = encode_many(draws)
    available = min(len(data) // RECORD_SIZE, len(expected))
    found = np.zeros(0, dtype=np.uint64)
    if available:
        found = np.frombuffer(data, dtype=RECORD_DTYPE, count=available).astype(np.uint64)

    mismatches = np.flatnonzero(found != expected[:available])
    if mismatches.size:
        i = int(mismatches[0])
        raise RecordMismatch(i + 1, decode(int(expected[i])), decode(int(found[i])), path=source)

    if available < len(expected):
        raise TruncatedFile(
            f"inconsistent read, expected {len(expected) * RECORD_SIZE} bytes, "
            f"found {len(data)} (record {available + 1} of {len(expected)})"
        )

    trailing = len(data) - len(expected) * RECORD_SIZE
    if trailing:
        logger.warning(f"{trailing} bytes left after the last expected record")
    return len(expected)


def write_db(draws: Sequence[Draw], path: Path) -> int:
    """Write the binary database. Returns the number of bytes written."""
    payload = serialize(draws)
    try:
        with open(path, "wb") as f:
            f.write(payload)
    except OSError as e:
        raise OutputFileError(f"could not open file {path}: {e}") from e

    logger.info(f"Wrote {len(draws)} records ({len(payload)} bytes) to {path}")
    return len(payload)


def _read_bytes(path: Path) -> bytes:
    path = Path(path)
    if not path.is_file():
        raise InputFileError(f"file {path} does not exist or is not a regular file")
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as e:
        raise InputFileError(f"could not open file {path}: {e}") from e


def verify_db(draws: Sequence[Draw], path: Path) -> int:
    """Re-read the database at `path` and compare it with `draws`."""
    count = verify(draws, _read_bytes(path), source=str(path))
    logger.info(f"Verified {count} records in {path}")
    return count


def read_db(path: Path) -> List[Draw]:
    """Decode every complete record of a database file."""
    data = _read_bytes(path)
    if len(data) % RECORD_SIZE:
        raise TruncatedFile(f"file {path} size {len(data)} is not a multiple of {RECORD_SIZE}")
    if not data:
        return []
    return decode_many(np.frombuffer(data, dtype=RECORD_DTYPE))
