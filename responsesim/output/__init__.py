"""Console presentation."""

from .render import ConsoleClosedError, ConsoleRenderer

__all__ = ["ConsoleRenderer", "ConsoleClosedError"]
