"""Build a static site from a directory of dated markdown posts."""

__version__ = "0.1.0"


class MdpressError(Exception):
    """Base class for errors raised by mdpress."""
