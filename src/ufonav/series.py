from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np

TWO_PI = 2.0 * np.pi


def reduce_angle(x: Any) -> Any:
    """Remainder of x modulo 2*pi, keeping the sign of x (C-style fmod)."""
    return np.fmod(x, TWO_PI)


def _check_terms(n: int) -> None:
    if n < 1:
        msg = f"Number of series terms must be >= 1, got {n}"
        raise ValueError(msg)


def cos_series(x: Any, n: int) -> Any:
    """Cosine from the first n terms of its Maclaurin series.

    cos(x) ~ 1 - x^2/2! + x^4/4! - ...

    Works for floats and numpy arrays (elementwise).
    """
    _check_terms(n)
    x = reduce_angle(x)
    x2 = x * x
    term = 1.0 + 0.0 * x
    result = 0.0 * x
    power = 0
    for _ in range(n):
        result = result + term
        power += 2
        term = -term * x2 / (power * (power - 1))
    return result


def sin_series(x: Any, n: int) -> Any:
    """Sine from the first n terms of its Maclaurin series.

    sin(x) ~ x - x^3/3! + x^5/5! - ...
    """
    _check_terms(n)
    x = reduce_angle(x)
    x2 = x * x
    term = x
    result = 0.0 * x
    power = 1
    for _ in range(n):
        result = result + term
        power += 2
        term = -term * x2 / (power * (power - 1))
    return result


def convergence_profile(x: float, max_terms: int = 20) -> np.ndarray:
    """Absolute error of (cos, sin) series against numpy for n = 1..max_terms.

    Returns an array shaped (max_terms, 2); row i holds the errors for n = i + 1.
    """
    _check_terms(max_terms)
    exact_cos = float(np.cos(x))
    exact_sin = float(np.sin(x))
    out = np.empty((max_terms, 2), dtype=np.float64)
    for i in range(max_terms):
        n = i + 1
        out[i, 0] = abs(float(cos_series(x, n)) - exact_cos)
        out[i, 1] = abs(float(sin_series(x, n)) - exact_sin)
    return out


@dataclass(frozen=True, slots=True)
class SeriesTrig:
    """Truncated-series trig with a fixed number of terms."""

    terms: int

    def __post_init__(self) -> None:
        _check_terms(self.terms)

    def cos(self, x: float) -> float:
        return float(cos_series(x, self.terms))

    def sin(self, x: float) -> float:
        return float(sin_series(x, self.terms))


@dataclass(frozen=True, slots=True)
class ExactTrig:
    """Platform trig, useful as a reference path."""

    def cos(self, x: float) -> float:
        return float(np.cos(x))

    def sin(self, x: float) -> float:
        return float(np.sin(x))
