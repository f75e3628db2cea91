"""Resolution errors.

Every error carries a ``recoverable`` flag. The resolver turns recoverable errors
into a failed field (reported unless the directive suppresses errors) and lets
the rest propagate to the caller.
"""

from __future__ import annotations


class ResolutionError(Exception):
    """Base class for failures while resolving a field reference."""

    recoverable: bool = True


class NotFoundError(ResolutionError):
    """A name- or tag-based lookup found nothing."""


class SubtreeLookupError(NotFoundError):
    """No node with the requested name below the origin.

    Unlike a graph-wide name miss, this stops the resolution of the field.
    """

    recoverable = False

    def __init__(self, origin: object, name: str):
        super().__init__(f"No node named '{name}' below {origin}")
        self.origin = origin
        self.name = name


class TypeMismatchError(ResolutionError):
    """The requested type is not something the strategy can produce."""


class CycleError(ResolutionError):
    """A parent walk revisited a node or ran past the depth limit."""

    recoverable = False
