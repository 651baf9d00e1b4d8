import datetime as dt
from pathlib import Path

from mdpress.config import SiteConfig
from mdpress.content import Post
from mdpress.pages import sort_posts, write_feed, write_index, write_post


def make_post(name, day):
    return Post(name=name, title=name.title(), content=f"<p>{name}</p>", date=day)


def test_sort_posts_newest_first():
    posts = [
        make_post("a", dt.datetime(2020, 1, 1)),
        make_post("b", dt.datetime(2022, 6, 15)),
        make_post("c", dt.datetime(2021, 3, 3)),
    ]
    ordered = sort_posts(posts)
    assert [post.date for post in ordered] == [
        dt.datetime(2022, 6, 15),
        dt.datetime(2021, 3, 3),
        dt.datetime(2020, 1, 1),
    ]
    assert [post.name for post in posts] == ["a", "b", "c"]


def test_write_post(site):
    src = site.source_dir / "2023-01-01-hi.md"
    src.write_text("# Hi\nBody text", encoding="utf-8")
    post = write_post(site, src)
    html = (site.output_dir / "2023-01-01-hi.html").read_text(encoding="utf-8")
    assert post.title == "Hi"
    assert html.startswith("<html>Hi")
    assert "<p>Body text</p>" in html


def test_write_index_wraps_recent_posts(site):
    posts = [
        make_post("older", dt.datetime(2020, 1, 1)),
        make_post("newer", dt.datetime(2021, 1, 1)),
    ]
    write_index(site, posts)
    html = (site.output_dir / "index.html").read_text(encoding="utf-8")
    assert html == (
        "<html>my page"
        "<li>2021-01-01 newer Newer</li><li>2020-01-01 older Older</li>"
        "</html>"
    )


def test_write_feed(site):
    posts = [
        make_post("older", dt.datetime(2020, 1, 1)),
        make_post("newer", dt.datetime(2021, 1, 1)),
    ]
    write_feed(site, posts)
    feed = (site.output_dir / "feed.html").read_text(encoding="utf-8")
    assert feed.index("newer") < feed.index("older")
    assert "Fri, 01 Jan 2021 00:00:00 +0000" in feed


def test_empty_collection(site):
    write_index(site, [])
    write_feed(site, [])
    assert (site.output_dir / "index.html").read_text(encoding="utf-8") == "<html>my page</html>"
    assert (site.output_dir / "feed.html").read_text(encoding="utf-8") == "<rss></rss>"


def test_shipped_templates(tmp_path):
    templates = Path(__file__).resolve().parents[1] / "templates"
    config = SiteConfig(source_dir=tmp_path / "posts", template_dir=templates, output_dir=tmp_path / "dist")
    posts = [
        make_post("older", dt.datetime(2020, 1, 1)),
        make_post("newer", dt.datetime(2021, 1, 1)),
    ]
    write_index(config, posts)
    write_feed(config, posts)
    index = (config.output_dir / "index.html").read_text(encoding="utf-8")
    feed = (config.output_dir / "feed.html").read_text(encoding="utf-8")
    assert '<a href="newer.html">Newer</a>' in index
    assert "<atom:updated>2021-01-01T00:00:00Z</atom:updated>" in feed
    assert "<lastBuildDate>Fri, 01 Jan 2021 00:00:00 +0000</lastBuildDate>" in feed
    assert "&lt;p&gt;older&lt;/p&gt;" in feed
