from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from pathlib import Path

import markdown

from .dates import date_or_now

MARKDOWN_EXTENSIONS = ["fenced_code", "tables", "codehilite", "toc", "smarty", "def_list"]
MARKDOWN_EXTENSION_CONFIGS = {"codehilite": {"guess_lang": False}}


@dataclass
class Post:
    name: str
    title: str
    content: str
    date: dt.datetime


def trim_path(path: Path) -> str:
    """Return the file name of ``path`` without its extension.

    Only the literal suffix is removed, so ``command.md`` gives ``command``.
    """
    return Path(path).stem


def extract_title(text: str) -> str:
    for line in text.split("\n"):
        stripped = line.lstrip(" ")
        if stripped.startswith("#"):
            return stripped.lstrip("#").lstrip(" ").rstrip()
    return ""


def render_markdown(text: str) -> str:
    md = markdown.Markdown(
        extensions=MARKDOWN_EXTENSIONS,
        extension_configs=MARKDOWN_EXTENSION_CONFIGS,
    )
    return md.convert(text)


def parse_source_file(path: Path) -> Post:
    name = trim_path(path)
    date = date_or_now(name)
    text = Path(path).read_text(encoding="utf-8")
    return Post(
        name=name,
        title=extract_title(text),
        content=render_markdown(text),
        date=date,
    )
