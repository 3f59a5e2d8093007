"""Exceptions raised by the lattice builder and the rewirer."""


class SwNetError(Exception):
    """Base class for errors raised by sw_net."""


class InvalidDegree(SwNetError, ValueError):
    """Raised when a requested lattice degree does not fit the number of vertices."""


class InvalidProbability(SwNetError, ValueError):
    """Raised when a rewiring probability lies outside [0, 1]."""


class Cancelled(SwNetError):
    """Raised when a cancellation request is observed while rewiring.

    The partially rewired graph is discarded; callers should not assume any
    output exists.
    """
