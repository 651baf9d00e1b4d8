from __future__ import annotations

import datetime as dt
import logging
from pathlib import Path
from typing import Optional

from . import MdpressError
from .dates import DATE_FMT, DateParseError, parse_date

SOURCE_GLOB = "*.md"

logger = logging.getLogger(__name__)


class SourceListingError(MdpressError):
    pass


def list_source_files(source_dir: Path) -> list[Path]:
    if not source_dir.is_dir():
        raise SourceListingError(f"Source directory not found: {source_dir}")
    return sorted(path for path in source_dir.glob(SOURCE_GLOB) if path.is_file())


def dated_name(path: Path, today: dt.date) -> str:
    return f"{today.strftime(DATE_FMT)}-{path.stem}{path.suffix}"


def prepare_filenames(source_dir: Path, today: Optional[dt.date] = None) -> list[Path]:
    """Prefix today's date to every source file whose name carries none.

    Rename failures are logged and the file keeps its name. Returns the new
    paths of the renamed files.
    """
    if today is None:
        today = dt.date.today()
    renamed = []
    for src_file in list_source_files(source_dir):
        try:
            parse_date(src_file.stem)
        except DateParseError:
            pass
        else:
            continue
        target = src_file.with_name(dated_name(src_file, today))
        if target.exists():
            logger.error("Not renaming %s: %s already exists", src_file, target)
            continue
        try:
            src_file.rename(target)
        except OSError as exc:
            logger.error("Unable to rename %s: %s", src_file, exc)
            continue
        logger.debug("Renamed %s to %s", src_file, target)
        renamed.append(target)
    return renamed
