from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from . import MdpressError
from .utils import format_date, iso_date, rfc822_date

TEMPLATE_FILTERS = {
    "date": format_date,
    "rfc822": rfc822_date,
    "isodate": iso_date,
}


class RenderError(MdpressError):
    pass


def template_context(data: object) -> dict:
    """Expose ``data`` to a template.

    Dataclass fields and mapping keys become top-level names, a dataclass is
    also bound to ``post`` and any other iterable to ``posts``. The raw value
    is always available as ``data``.
    """
    context = {}
    if dataclasses.is_dataclass(data) and not isinstance(data, type):
        context.update({field.name: getattr(data, field.name) for field in dataclasses.fields(data)})
        context["post"] = data
    elif isinstance(data, Mapping):
        context.update(data)
    elif data is not None and not isinstance(data, (str, bytes)):
        context["posts"] = list(data)
    context["data"] = data
    return context


def make_environment(template_dir: Path) -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(template_dir)),
        undefined=StrictUndefined,
        keep_trailing_newline=True,
        autoescape=False,
        cache_size=0,
    )
    env.filters.update(TEMPLATE_FILTERS)
    return env


def render_template(template_path: Path, data: object) -> bytes:
    template_path = Path(template_path)
    env = make_environment(template_path.parent)
    try:
        template = env.get_template(template_path.name)
        output = template.render(template_context(data))
    except Exception as exc:
        raise RenderError(f"Unable to render {template_path}: {exc}") from exc
    return output.encode("utf-8")


def write_output_file(path: Path, data: bytes) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
