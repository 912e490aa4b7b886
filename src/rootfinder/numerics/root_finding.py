from __future__ import annotations

import math
import warnings
from dataclasses import dataclass
from typing import Any

from rootfinder.config import DEFAULT_CONFIG, SolverConfig
from rootfinder.exceptions import (
    InvalidIntervalError,
    NoBracketError,
    OutOfRangeError,
    TooManyEvaluationsError,
)
from rootfinder.numerics.precision import nearly_equal
from rootfinder.typing import ScalarFn, Shortcut

# ---------------------------
# Results
# ---------------------------


@dataclass(frozen=True, slots=True)
class RootResult:
    """Outcome of one successful search.

    Parameters
    ----------
    root : float
        The value returned as the zero of ``f``.
    converged : bool
        Always True; failures raise instead of returning.
    iterations : int
        Passes through the Brent loop. ``0`` when a sampled point was accepted
        directly.
    method : str
        ``"brent"``.
    f_at_root : float
        ``f(root)`` as last evaluated.
    bracket : tuple[float, float] or None
        Sub-interval handed to the Brent loop, or None for a shortcut.
    evaluations : int
        Number of calls made to ``f``.
    shortcut : {"initial", "min", "max"} or None
        Which sampled point was accepted without iterating, if any.
    """

    root: float
    converged: bool
    iterations: int
    method: str
    f_at_root: float
    bracket: tuple[float, float] | None = None
    evaluations: int = 0
    shortcut: Shortcut | None = None


def _opposite_signs(x: float, y: float) -> bool:
    # Strict; zeros and NaN never count as a sign change.
    return (x < 0.0 and y > 0.0) or (x > 0.0 and y < 0.0)


class _CountingFn:
    """Wraps the user function for one search: counts calls, enforces the cap.

    ``best`` is the sampled point with the smallest finite ``|f|``, or the last
    sampled point when no finite value has been seen.
    """

    __slots__ = ("_fn", "_max_evaluations", "count", "best", "_best_abs", "_warned")

    def __init__(self, fn: ScalarFn, max_evaluations: int | None) -> None:
        self._fn = fn
        self._max_evaluations = max_evaluations
        self.count = 0
        self.best = math.nan
        self._best_abs = math.inf
        self._warned = False

    def __call__(self, x: float) -> float:
        if self._max_evaluations is not None and self.count >= self._max_evaluations:
            raise TooManyEvaluationsError(self._max_evaluations, self.best)

        fx = float(self._fn(x))
        self.count += 1

        if not math.isfinite(self._best_abs) or abs(fx) < self._best_abs:
            self._best_abs = abs(fx)
            self.best = x
        if not math.isfinite(fx) and not self._warned:
            self._warned = True
            warnings.warn(
                f"f({x!r}) returned a non-finite value ({fx!r}); "
                "the search may not terminate without max_evaluations.",
                RuntimeWarning,
                stacklevel=4,
            )
        return fx


# ---------------------------
# Brent solver
# ---------------------------


class BrentSolver:
    """Brent's method for a zero of a real univariate function.

    The function should be continuous but need not be smooth. A zero ``x`` is
    located inside a bracketing interval to within ``2 * eps * |x| + t``, where
    ``eps`` is the relative accuracy and ``t`` the absolute accuracy. Each step
    is one of bisection, linear (secant) interpolation or inverse quadratic
    interpolation, with bisection forced whenever interpolation would not
    contract the bracket fast enough.

    Parameters
    ----------
    relative_accuracy : float
        Relative accuracy ``eps``.
    absolute_accuracy : float
        Absolute accuracy ``t``.
    function_value_accuracy : float
        Sampled points with ``|f(x)|`` at or below this are returned directly.
    max_evaluations : int or None, default None
        Optional cap on calls to ``f`` per search. Without a cap the loop only
        ends on convergence.

    Notes
    -----
    The solver holds nothing but its immutable :class:`SolverConfig`, so one
    instance may serve any number of (concurrent) searches.

    Reference: R. P. Brent, *Algorithms for Minimization Without Derivatives*,
    chapter 4, Dover, 2002.
    """

    __slots__ = ("config",)

    def __init__(
        self,
        relative_accuracy: float = DEFAULT_CONFIG.relative_accuracy,
        absolute_accuracy: float = DEFAULT_CONFIG.absolute_accuracy,
        function_value_accuracy: float = DEFAULT_CONFIG.function_value_accuracy,
        *,
        max_evaluations: int | None = None,
    ) -> None:
        self.config = SolverConfig(
            relative_accuracy=float(relative_accuracy),
            absolute_accuracy=float(absolute_accuracy),
            function_value_accuracy=float(function_value_accuracy),
            max_evaluations=max_evaluations,
        )

    @classmethod
    def from_config(cls, cfg: SolverConfig) -> BrentSolver:
        return cls(
            cfg.relative_accuracy,
            cfg.absolute_accuracy,
            cfg.function_value_accuracy,
            max_evaluations=cfg.max_evaluations,
        )

    @property
    def relative_accuracy(self) -> float:
        return self.config.relative_accuracy

    @property
    def absolute_accuracy(self) -> float:
        return self.config.absolute_accuracy

    @property
    def function_value_accuracy(self) -> float:
        return self.config.function_value_accuracy

    def __repr__(self) -> str:
        c = self.config
        return (
            f"BrentSolver(relative_accuracy={c.relative_accuracy!r}, "
            f"absolute_accuracy={c.absolute_accuracy!r}, "
            f"function_value_accuracy={c.function_value_accuracy!r}, "
            f"max_evaluations={c.max_evaluations!r})"
        )

    def find_root(
        self,
        f: ScalarFn,
        lo: float,
        hi: float,
        *,
        initial: float | None = None,
    ) -> float:
        """Search for a zero of ``f`` in ``[lo, hi]``.

        See :meth:`find_root_result` for the search order and errors.
        """
        return self.find_root_result(f, lo, hi, initial=initial).root

    def find_root_result(
        self,
        f: ScalarFn,
        lo: float,
        hi: float,
        *,
        initial: float | None = None,
    ) -> RootResult:
        """Search for a zero of ``f`` in ``[lo, hi]``, starting from ``initial``.

        Points are sampled in the order ``initial``, ``lo``, ``hi``. A sampled
        point whose function value is within ``function_value_accuracy`` of
        zero is returned as is. Otherwise the first half-interval showing a
        sign change, ``[lo, initial]`` before ``[initial, hi]``, is handed to
        the Brent loop. ``hi`` is only evaluated when the left half does not
        bracket a root.

        Parameters
        ----------
        f : Callable[[float], float]
            Function to solve. Must return the same value for the same input.
        lo, hi : float
            Bounds of the search interval, ``lo <= hi``.
        initial : float, optional
            Starting guess in ``[lo, hi]``. Defaults to the midpoint.

        Returns
        -------
        RootResult

        Raises
        ------
        InvalidIntervalError
            If ``lo > hi``.
        OutOfRangeError
            If ``initial`` lies outside ``[lo, hi]``.
        NoBracketError
            If neither half-interval brackets a root and no sampled point is
            close enough to zero.
        TooManyEvaluationsError
            If ``max_evaluations`` is set and exhausted.
        """
        lo = float(lo)
        hi = float(hi)
        if not lo <= hi:
            raise InvalidIntervalError(lo, hi)

        if initial is None:
            initial = 0.5 * (lo + hi)
        else:
            initial = float(initial)
            if not lo <= initial <= hi:
                raise OutOfRangeError(initial, lo, hi)

        fva = self.config.function_value_accuracy
        fn = _CountingFn(f, self.config.max_evaluations)

        # Return the initial guess if it is good enough.
        f_initial = fn(initial)
        if abs(f_initial) <= fva:
            return self._accept(initial, f_initial, fn, "initial")

        # Return the first endpoint if it is good enough.
        f_lo = fn(lo)
        if abs(f_lo) <= fva:
            return self._accept(lo, f_lo, fn, "min")

        # Reduce interval if lo and initial bracket the root.
        if _opposite_signs(f_initial, f_lo):
            return self._brent(fn, lo, initial, f_lo, f_initial)

        # Return the second endpoint if it is good enough.
        f_hi = fn(hi)
        if abs(f_hi) <= fva:
            return self._accept(hi, f_hi, fn, "max")

        # Reduce interval if initial and hi bracket the root.
        if _opposite_signs(f_initial, f_hi):
            return self._brent(fn, initial, hi, f_initial, f_hi)

        raise NoBracketError(lo, f_lo, hi, f_hi)

    @staticmethod
    def _accept(x: float, fx: float, fn: _CountingFn, shortcut: Shortcut) -> RootResult:
        return RootResult(
            root=x,
            converged=True,
            iterations=0,
            method="brent",
            f_at_root=fx,
            evaluations=fn.count,
            shortcut=shortcut,
        )

    def _brent(
        self,
        fn: _CountingFn,
        lo: float,
        hi: float,
        f_lo: float,
        f_hi: float,
    ) -> RootResult:
        # Brent (2002), p. 58. `b` is the current estimate, `a` the previous
        # one and `c` the far end of the bracket [b, c]; `d` is the last step
        # and `e` the one before it.
        a, fa = lo, f_lo
        b, fb = hi, f_hi
        c, fc = a, fa
        d = b - a
        e = d
        t = self.config.absolute_accuracy
        eps = self.config.relative_accuracy

        it = 0
        while True:
            if abs(fc) < abs(fb):
                a, b, c = b, c, b
                fa, fb, fc = fb, fc, fb

            tol = 2.0 * eps * abs(b) + t
            m = 0.5 * (c - b)
            if abs(m) <= tol or nearly_equal(fb, 0.0):
                return RootResult(
                    root=b,
                    converged=True,
                    iterations=it,
                    method="brent",
                    f_at_root=fb,
                    bracket=(lo, hi),
                    evaluations=fn.count,
                )

            it += 1
            if abs(e) < tol or abs(fa) <= abs(fb):
                # Force bisection.
                d = m
                e = d
            else:
                s = fb / fa
                # a == c must stay an exact comparison, never a proximity test:
                # it holds right after a re-bracket, when only two points exist.
                if a == c:
                    # Linear interpolation.
                    p = 2.0 * m * s
                    q = 1.0 - s
                else:
                    # Inverse quadratic interpolation.
                    q = fa / fc
                    r = fb / fc
                    p = s * (2.0 * m * q * (q - r) - (b - a) * (r - 1.0))
                    q = (q - 1.0) * (r - 1.0) * (s - 1.0)
                if p > 0.0:
                    q = -q
                else:
                    p = -p
                e_prev = e
                e = d
                if p >= 1.5 * m * q - abs(tol * q) or p >= abs(0.5 * e_prev * q):
                    # Interpolation points the wrong way or progress is slow.
                    d = m
                    e = d
                else:
                    d = p / q

            a, fa = b, fb
            if abs(d) > tol:
                b += d
            elif m > 0.0:
                b += tol
            else:
                b -= tol
            fb = fn(b)

            if (fb > 0.0 and fc > 0.0) or (fb <= 0.0 and fc <= 0.0):
                c, fc = a, fa
                d = b - a
                e = d


# ---------------------------
# Functional API (unified signature)
#   (Fn, lo, hi, *, x0=None, tol_f=..., tol_x=..., rel_tol=..., max_iter=..., domain=None, **kwargs)
# returns RootResult
# ---------------------------


def _clamp(x: float, domain: tuple[float, float] | None) -> float:
    if domain is None:
        return x
    lo, hi = domain
    if x < lo:
        return lo
    if x > hi:
        return hi
    return x


def brent_method(
    Fn: ScalarFn,
    lo: float,
    hi: float,
    *,
    x0: float | None = None,
    tol_f: float = 1e-12,
    tol_x: float = 1e-12,
    rel_tol: float = 1e-14,
    max_iter: int | None = None,
    domain: tuple[float, float] | None = None,
    **ignored_kwargs: Any,
) -> RootResult:
    """One-shot Brent search with the keyword conventions of the numerics helpers.

    Bounds may be given in either order and are clamped to ``domain``. An
    ``x0`` outside the (clamped) interval is replaced by the midpoint instead
    of raising. ``max_iter`` caps the number of function evaluations.
    """
    a, b = (lo, hi) if lo <= hi else (hi, lo)
    a = _clamp(a, domain)
    b = _clamp(b, domain)
    x = x0 if (x0 is not None and a <= x0 <= b) else None

    solver = BrentSolver(rel_tol, tol_x, tol_f, max_evaluations=max_iter)
    return solver.find_root_result(Fn, a, b, initial=x)


def brent_root(*args: Any, **kwargs: Any) -> float:
    return brent_method(*args, **kwargs).root
