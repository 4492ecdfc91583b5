"""Custom exception hierarchy for the ricochet puzzle engine."""


class RicochetError(Exception):
    """Base exception for puzzle engine failures."""


class LayoutError(RicochetError):
    """Raised when a layout breaks its structural invariants."""


class GameNotStartedError(RicochetError):
    """Raised when a session is used before a puzzle has been generated."""
