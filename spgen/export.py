"""
CSV export of a batch of passwords.

The format is deliberately minimal: a header row, then
`<1-based index>,<password>` per line. Passwords are written verbatim;
a password containing a comma is NOT quoted, so naive CSV readers will
split it. Use exclude_ambiguous (which drops ',') when that matters.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Iterable, Optional, Sequence

from .errors import ExportError
from .logging_config import get_logger

logger = get_logger(__name__)

CSV_HEADER = "index,password"


def format_csv(passwords: Sequence[str], header: str = CSV_HEADER) -> str:
    """
    Render passwords as "index,password" rows joined by newlines.
    No trailing newline.
    """
    rows = [header]
    rows.extend(f"{i},{pwd}" for i, pwd in enumerate(passwords, start=1))
    return "\n".join(rows)


def export_filename(day: Optional[date] = None) -> str:
    """passwords_<YYYY-MM-DD>.csv for `day` (today by default)."""
    day = day or date.today()
    return f"passwords_{day.isoformat()}.csv"


def write_csv(
    passwords: Iterable[str],
    directory: Path | str = ".",
    day: Optional[date] = None,
) -> Path:
    """
    Write the CSV for `passwords` into `directory` as UTF-8 and return
    the file path. An existing file with the same name is overwritten;
    a missing or unwritable directory raises ExportError.
    """
    items = list(passwords)
    path = Path(directory) / export_filename(day)
    try:
        path.write_text(format_csv(items), encoding="utf-8")
    except OSError as exc:
        raise ExportError(f"Could not write {path}: {exc.strerror or exc}") from exc
    logger.info("passwords_exported", count=len(items), path=str(path))
    return path
