"""Entry sources — read raw entries from CSV or plain-text files.

CSV rows are ``location,lastmod,changefreq,priority``; trailing columns
may be omitted and a header row whose first cell is ``location`` is
skipped.  Plain-text files hold one location per line; blank lines and
``#`` comments are ignored.

Values are returned raw.  Validation happens in ``EntryCollector.add()``.
"""

from __future__ import annotations

import csv
from dataclasses import dataclass
from pathlib import Path

from sitemapper._errors import SourceError

_COLUMNS = 4


@dataclass(frozen=True, slots=True)
class RawEntry:
    """Unvalidated ``add()`` arguments read from a source file."""

    location: str
    lastmod: str = ""
    changefreq: str = ""
    priority: str = ""


def read_entries(path: Path) -> list[RawEntry]:
    """Read raw entries from ``path``.

    ``.txt`` files are read as one location per line; anything else is
    read as CSV.

    Raises:
        SourceError: If the file cannot be read or a row has too many columns.

    """
    try:
        text = path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"Cannot read entry source {path}: {exc}"
        raise SourceError(msg) from exc

    if path.suffix.lower() == ".txt":
        return _parse_lines(text)
    return _parse_csv(text, path)


def _parse_lines(text: str) -> list[RawEntry]:
    entries: list[RawEntry] = []
    for line in text.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        entries.append(RawEntry(location=stripped))
    return entries


def _parse_csv(text: str, path: Path) -> list[RawEntry]:
    entries: list[RawEntry] = []
    reader = csv.reader(text.splitlines())
    for lineno, row in enumerate(reader, start=1):
        if not row or not any(cell.strip() for cell in row):
            continue
        if lineno == 1 and row[0].strip().lower() == "location":
            continue
        if len(row) > _COLUMNS:
            msg = f"{path}:{lineno}: expected at most {_COLUMNS} columns, got {len(row)}"
            raise SourceError(msg)
        cells = [cell.strip() for cell in row] + [""] * (_COLUMNS - len(row))
        entries.append(RawEntry(*cells))
    return entries
