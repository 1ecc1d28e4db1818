"""Error types raised by the traversal API."""


class InvalidArgument(ValueError):
    """A required argument was missing or of the wrong kind."""
