from __future__ import annotations

import math
from dataclasses import dataclass


def _require_non_negative(name: str, value: float) -> None:
    # `not >=` also rejects NaN
    if not value >= 0.0:
        raise ValueError(f"{name} must be >= 0 (got {value!r})")


@dataclass(frozen=True, slots=True)
class SolverConfig:
    """Tolerances shared by every search run through one solver.

    Parameters
    ----------
    relative_accuracy : float, default 1e-14
        Relative accuracy ``eps``; the step tolerance at an estimate ``b`` is
        ``2 * eps * |b| + absolute_accuracy``.
    absolute_accuracy : float, default 1e-15
        Absolute floor ``t`` of the step tolerance.
    function_value_accuracy : float, default 1e-15
        A sampled point ``x`` with ``|f(x)| <= function_value_accuracy`` is
        accepted as a root before any iteration takes place.
    max_evaluations : int or None, default None
        Optional cap on the number of calls to ``f`` in one search. ``None``
        means no cap.

    Notes
    -----
    Zero tolerances are valid and mean "exact". Infinite tolerances are
    rejected because the step tolerance would become meaningless.
    """

    relative_accuracy: float = 1e-14
    absolute_accuracy: float = 1e-15
    function_value_accuracy: float = 1e-15
    max_evaluations: int | None = None

    def __post_init__(self) -> None:
        _require_non_negative("relative_accuracy", self.relative_accuracy)
        _require_non_negative("absolute_accuracy", self.absolute_accuracy)
        _require_non_negative("function_value_accuracy", self.function_value_accuracy)
        if math.isinf(self.relative_accuracy) or math.isinf(self.absolute_accuracy):
            raise ValueError("relative_accuracy and absolute_accuracy must be finite")
        if self.max_evaluations is not None and self.max_evaluations <= 0:
            raise ValueError("max_evaluations must be > 0 when given")


DEFAULT_CONFIG = SolverConfig()
