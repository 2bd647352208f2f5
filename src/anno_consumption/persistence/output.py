# ABOUTME: Writes parsed consumption rows as a plain-text dump, one repr per line
# ABOUTME: The output file is recreated on every run

from collections.abc import Iterable
from pathlib import Path


def format_row(row: list[str]) -> str:
    return repr(row)


def write_rows(path: Path, rows: Iterable[list[str]]) -> int:
    """Overwrite ``path`` with one formatted row per line.

    Returns:
        Number of rows written
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    count = 0
    with path.open("w", encoding="utf-8") as handle:
        for row in rows:
            handle.write(format_row(row) + "\n")
            count += 1
    return count
