from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Failure categories reported by the root finder.

    Every :class:`RootFindingError` carries one of these in its ``kind``
    attribute, so callers can branch on the category without matching on the
    concrete exception class.

    Attributes
    ----------
    INVALID_INTERVAL : str
        Lower bound greater than upper bound.
    OUT_OF_RANGE : str
        Initial guess outside the search interval.
    NO_BRACKET : str
        No sign change (and no near-zero value) among the sampled points.
    TOO_MANY_EVALUATIONS : str
        The optional evaluation cap was exhausted.
    """

    INVALID_INTERVAL = "invalid_interval"
    OUT_OF_RANGE = "out_of_range"
    NO_BRACKET = "no_bracket"
    TOO_MANY_EVALUATIONS = "too_many_evaluations"


class RootFindingError(ValueError):
    """Base class for root-finding failures."""

    kind: ErrorKind


class InvalidIntervalError(RootFindingError):
    """Raised when the lower bound of the search interval exceeds the upper bound."""

    kind = ErrorKind.INVALID_INTERVAL

    def __init__(self, lo: float, hi: float) -> None:
        super().__init__(f"{lo} > {hi}")
        self.lo = lo
        self.hi = hi


class OutOfRangeError(RootFindingError):
    """Raised when the initial guess does not lie in ``[lo, hi]``."""

    kind = ErrorKind.OUT_OF_RANGE

    def __init__(self, initial: float, lo: float, hi: float) -> None:
        super().__init__(f"{initial} is out of range [{lo}, {hi}]")
        self.initial = initial
        self.lo = lo
        self.hi = hi


class NoBracketError(RootFindingError):
    """Raised when none of the sampled points brackets or hits a root.

    Notes
    -----
    The reported values are the two interval endpoints and the function values
    there. The initial guess was also sampled, but it only matters through its
    sign relative to the endpoints.
    """

    kind = ErrorKind.NO_BRACKET

    def __init__(self, lo: float, f_lo: float, hi: float, f_hi: float) -> None:
        super().__init__(f"No bracketing: f({lo})={f_lo}, f({hi})={f_hi}")
        self.lo = lo
        self.f_lo = f_lo
        self.hi = hi
        self.f_hi = f_hi


class TooManyEvaluationsError(RootFindingError):
    """Raised when a capped search runs out of function evaluations."""

    kind = ErrorKind.TOO_MANY_EVALUATIONS

    def __init__(self, max_evaluations: int, best: float) -> None:
        super().__init__(
            f"Brent did not converge within {max_evaluations} function evaluations "
            f"(best estimate {best})."
        )
        self.max_evaluations = max_evaluations
        self.best = best
