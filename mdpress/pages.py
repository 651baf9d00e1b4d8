from __future__ import annotations

from pathlib import Path

from .config import SiteConfig
from .content import Post, parse_source_file
from .render import render_template, write_output_file

MAIN_TEMPLATE = "main.html"
RECENT_TEMPLATE = "recent.html"
FEED_TEMPLATE = "feed.html"
INDEX_OUTPUT = "index.html"
FEED_OUTPUT = "feed.html"


def sort_posts(posts: list[Post]) -> list[Post]:
    return sorted(posts, key=lambda post: post.date, reverse=True)


def post_output_path(config: SiteConfig, post: Post) -> Path:
    return config.output_dir / f"{post.name}.html"


def write_post(config: SiteConfig, md_path: Path) -> Post:
    post = parse_source_file(md_path)
    html_doc = render_template(config.template_dir / MAIN_TEMPLATE, post)
    write_output_file(post_output_path(config, post), html_doc)
    return post


def write_index(config: SiteConfig, posts: list[Post]) -> None:
    recent = render_template(config.template_dir / RECENT_TEMPLATE, sort_posts(posts))
    page = {"title": config.site_title, "content": recent.decode("utf-8")}
    html_doc = render_template(config.template_dir / MAIN_TEMPLATE, page)
    write_output_file(config.output_dir / INDEX_OUTPUT, html_doc)


def write_feed(config: SiteConfig, posts: list[Post]) -> None:
    feed = render_template(config.template_dir / FEED_TEMPLATE, sort_posts(posts))
    write_output_file(config.output_dir / FEED_OUTPUT, feed)
