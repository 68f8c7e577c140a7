"""Publish the mini-game HTML bundles to Firebase Storage."""

from minigame_publisher.utils.version import __version__

__all__ = ["__version__"]
