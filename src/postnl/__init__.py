"""postnl: copy a byte stream and terminate it with a single newline."""

from .core import LINE_TERMINATOR, relay

__all__ = ["__version__", "LINE_TERMINATOR", "relay"]

__version__ = "0.0.1"
