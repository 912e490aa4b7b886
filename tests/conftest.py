"""Pytest helpers for the rootfinder library."""

from __future__ import annotations

from collections.abc import Callable

import numpy as np
import pytest

from rootfinder import BrentSolver


@pytest.fixture
def tolerances() -> dict:
    """Canonical solver tolerances used across tests."""
    return {
        "relative_accuracy": 1e-14,
        "absolute_accuracy": 1e-15,
        "function_value_accuracy": 1e-15,
    }


@pytest.fixture
def solver(tolerances: dict) -> BrentSolver:
    return BrentSolver(**tolerances)


class RecordingFn:
    """Callable that remembers every argument it was evaluated at."""

    def __init__(self, fn: Callable[[float], float]) -> None:
        self.fn = fn
        self.calls: list[float] = []

    def __call__(self, x: float) -> float:
        self.calls.append(x)
        return self.fn(x)


@pytest.fixture
def recording():
    """Factory fixture wrapping a function in a :class:`RecordingFn`."""

    def _wrap(fn: Callable[[float], float]) -> RecordingFn:
        return RecordingFn(fn)

    return _wrap


@pytest.fixture
def rng():
    """Seeded RNG factory."""

    def _rng(seed: int) -> np.random.Generator:
        return np.random.default_rng(seed)

    return _rng
