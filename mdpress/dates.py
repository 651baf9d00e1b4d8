from __future__ import annotations

import datetime as dt
import logging
import re
from typing import Optional

from . import MdpressError

DATE_FMT = "%Y-%m-%d"
DATE_LEN = 10
DATE_RE = re.compile(r"(\d{1,4})-(\d{1,2})-(\d{1,2})", re.ASCII)

logger = logging.getLogger(__name__)


class DateParseError(MdpressError):
    """No date could be read from a name.

    ``fallback`` holds the time the parse was attempted, so callers can keep
    going with a usable date.
    """

    def __init__(self, name: str, fallback: dt.datetime, reason: str = "") -> None:
        message = f"Unable to parse date from string: {name}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.name = name
        self.fallback = fallback


def parse_date(name: str, now: Optional[dt.datetime] = None) -> dt.datetime:
    if now is None:
        now = dt.datetime.now()
    match = DATE_RE.search(name)
    if match is None or len(match.group(0)) != DATE_LEN:
        raise DateParseError(name, now)
    try:
        return dt.datetime.strptime(match.group(0), DATE_FMT)
    except ValueError as exc:
        raise DateParseError(name, now, str(exc)) from exc


def date_or_now(name: str) -> dt.datetime:
    try:
        return parse_date(name)
    except DateParseError as exc:
        logger.warning("%s", exc)
        return exc.fallback
