"""Exception taxonomy for the winding-tree engine."""

from __future__ import annotations


class WindtreeError(Exception):
    """Base class for every error raised by windtree."""


class MalformedDrawingError(WindtreeError, ValueError):
    """The drawing cannot be turned into paths and a view box."""


class TreeInvariantError(WindtreeError, RuntimeError):
    """Internal consistency fault in the region tree (a programming error)."""
