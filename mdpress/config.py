from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from . import MdpressError

try:
    import tomllib as toml
except ImportError:
    try:
        import tomli as toml
    except ImportError:  # pragma: no cover - optional dependency
        toml = None

try:
    import yaml
except ImportError:  # pragma: no cover - optional dependency
    yaml = None

DEFAULT_CONFIG = "config.json"
DEFAULT_SITE_TITLE = "my page"

REQUIRED_KEYS = {
    "source_dir": ("SourceDir", "source_dir"),
    "template_dir": ("TemplateDir", "template_dir"),
    "output_dir": ("OutputDir", "output_dir"),
}
SITE_TITLE_KEYS = ("SiteTitle", "site_title")


class ConfigError(MdpressError):
    pass


@dataclass(frozen=True)
class SiteConfig:
    source_dir: Path
    template_dir: Path
    output_dir: Path
    site_title: str = DEFAULT_SITE_TITLE


def parse_config_text(text: str, suffix: str) -> dict:
    suffix = suffix.lower()
    if suffix == ".toml":
        if toml is None:
            raise ConfigError("TOML config requires tomllib (Python 3.11+) or tomli.")
        try:
            data = toml.loads(text)
        except toml.TOMLDecodeError as exc:
            raise ConfigError(f"Invalid TOML: {exc}") from exc
    elif suffix in {".yml", ".yaml"}:
        if yaml is None:
            raise ConfigError("YAML config requires PyYAML.")
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML: {exc}") from exc
    else:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ConfigError(f"Invalid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError("Config must be a mapping.")
    return data


def _lookup(data: dict, keys: tuple[str, ...]):
    for key in keys:
        if key in data:
            return data[key]
    return None


def config_from_mapping(data: dict) -> SiteConfig:
    values = {}
    for field_name, keys in REQUIRED_KEYS.items():
        value = _lookup(data, keys)
        if value is None:
            raise ConfigError(f"Missing config field: {keys[0]}")
        if not isinstance(value, str) or not value.strip():
            raise ConfigError(f"Config field {keys[0]} must be a non-empty string")
        values[field_name] = Path(value)
    site_title = _lookup(data, SITE_TITLE_KEYS)
    if site_title is None:
        site_title = DEFAULT_SITE_TITLE
    elif not isinstance(site_title, str):
        raise ConfigError(f"Config field {SITE_TITLE_KEYS[0]} must be a string")
    return SiteConfig(site_title=site_title, **values)


def load_config(path: Path) -> SiteConfig:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Unable to read config file {path}: {exc}") from exc
    try:
        data = parse_config_text(text, path.suffix)
    except ConfigError as exc:
        raise ConfigError(f"{path}: {exc}") from exc
    return config_from_mapping(data)
