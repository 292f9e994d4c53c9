from pathlib import Path

import pytest


def write_year(data_dir: Path, year: int, text: str) -> Path:
    path = data_dir / f"{year:04d}.txt"
    path.write_text(text)
    return path


@pytest.fixture
def data_dir(tmp_path):
    path = tmp_path / "data"
    path.mkdir()
    return path


@pytest.fixture
def archive(data_dir):
    """Two consecutive years of a small archive."""
    write_year(data_dir, 1985, (
        "1985 BARI CAGLIARI\n"
        "05 GEN 12 34 56 78 90 01 02 03 04 05 05\n"
        "12 GEN -- -- -- -- -- 11 22 33 44 -- 12\n"
    ))
    write_year(data_dir, 1986, (
        "1986 NAZIONALE ROMA 1986\n"
        "04 FEB 07 08 09 10 11 -- -- -- -- -- 04\n"
        "END\n"
        "this line is never read\n"
    ))
    return data_dir
