from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Optional

from .config import DEFAULT_CONFIG, ConfigError, SiteConfig, load_config
from .content import Post
from .pages import write_feed, write_index, write_post
from .prepare import SourceListingError, list_source_files, prepare_filenames
from .render import RenderError

LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"
LOG_LEVELS = ("debug", "info", "warning", "error")

logger = logging.getLogger("mdpress")


def setup_logging(level: str = "debug") -> None:
    logger.setLevel(getattr(logging, level.upper()))
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)


def build_site(config: SiteConfig) -> list[Post]:
    """Render every post plus the index and feed pages.

    Failures of single posts, the index or the feed are logged and skipped.
    Only a failure to list the source directory propagates.
    """
    prepare_filenames(config.source_dir)
    src_files = list_source_files(config.source_dir)

    posts = []
    for src_file in src_files:
        try:
            post = write_post(config, src_file)
        except (OSError, UnicodeDecodeError, RenderError) as exc:
            logger.error("Failed to build %s: %s", src_file, exc)
            continue
        logger.info("Saved post: %s", post.name)
        posts.append(post)

    try:
        write_index(config, posts)
    except (OSError, UnicodeDecodeError, RenderError) as exc:
        logger.error("Failed to build index: %s", exc)
    else:
        logger.info("Saved index")

    try:
        write_feed(config, posts)
    except (OSError, UnicodeDecodeError, RenderError) as exc:
        logger.error("Failed to build feed: %s", exc)
    else:
        logger.info("Saved feed")

    return posts


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Build a static site from dated Markdown posts.")
    parser.add_argument("--config", default=DEFAULT_CONFIG, help="Path to site config file (JSON/TOML/YAML).")
    parser.add_argument(
        "--log-level",
        default="debug",
        choices=LOG_LEVELS,
        help="Minimum level of log lines written to stdout.",
    )
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    try:
        config = load_config(Path(args.config))
    except ConfigError as exc:
        logger.error("%s", exc)
        return 1

    start = time.perf_counter()
    try:
        posts = build_site(config)
    except SourceListingError as exc:
        logger.error("%s", exc)
        return 1
    elapsed = time.perf_counter() - start
    logger.debug("Built %d posts in %.2fs", len(posts), elapsed)
    return 0
