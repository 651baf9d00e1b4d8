import logging

import pytest

from mdpress.config import SiteConfig

MAIN = "<html>{{ title }}{{ content }}</html>"
RECENT = "{% for post in posts %}<li>{{ post.date | date }} {{ post.name }} {{ post.title }}</li>{% endfor %}"
FEED = "<rss>{% for post in posts %}<item>{{ post.name }} {{ post.date | rfc822 }}</item>{% endfor %}</rss>"


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger = logging.getLogger("mdpress")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def site(tmp_path):
    source_dir = tmp_path / "posts"
    template_dir = tmp_path / "templates"
    source_dir.mkdir()
    template_dir.mkdir()
    (template_dir / "main.html").write_text(MAIN, encoding="utf-8")
    (template_dir / "recent.html").write_text(RECENT, encoding="utf-8")
    (template_dir / "feed.html").write_text(FEED, encoding="utf-8")
    return SiteConfig(
        source_dir=source_dir,
        template_dir=template_dir,
        output_dir=tmp_path / "dist",
    )
