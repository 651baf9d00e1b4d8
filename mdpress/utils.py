from __future__ import annotations

import datetime as dt

from .dates import DATE_FMT


def format_date(value: dt.datetime, fmt: str = DATE_FMT) -> str:
    return value.strftime(fmt)


def rfc822_date(value: dt.datetime) -> str:
    value = value.replace(tzinfo=dt.timezone.utc)
    return value.strftime("%a, %d %b %Y %H:%M:%S %z")


def iso_date(value: dt.datetime) -> str:
    value = value.replace(tzinfo=dt.timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%SZ")
