"""Change feed adapter."""

from .feed import InProcessChangeFeed

__all__ = ["InProcessChangeFeed"]
