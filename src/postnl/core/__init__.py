"""postnl core logic, kept separate from CLI presentation.

- streaming: byte relay with trailing newline normalization
"""

from .streaming import LINE_TERMINATOR, relay

__all__ = ["LINE_TERMINATOR", "relay"]
