"""Polynomial helpers: Bernstein bases, cubic Hermite blends and degree elevation."""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np


def affine_combine(p, x: float, q) -> np.ndarray:
    """Return the point ``p * (1 - x) + q * x``."""
    p = np.asarray(p, dtype=float)
    q = np.asarray(q, dtype=float)
    return p * (1.0 - x) + q * x


def binomial(n: int, k: int) -> int:
    """Binomial coefficient; zero when ``k > n``."""
    if n < 0 or k < 0:
        raise ValueError(f"binomial arguments must be non-negative, got n={n}, k={k}")
    return math.comb(n, k)


def hermite(i: int, t: float) -> float:
    """Cubic Hermite blending function ``i`` (0..3) at parameter ``t``."""
    s = 1.0 - t
    if i == 0:
        return s**3 + 3.0 * s**2 * t
    if i == 1:
        return s**2 * t
    if i == 2:
        return s * t**2
    if i == 3:
        return 3.0 * s * t**2 + t**3
    raise ValueError(f"Hermite blend index must be in 0..3, got {i}")


def bernstein(n: int, u: float) -> list[float]:
    """All Bernstein polynomials of degree ``n`` evaluated at ``u``."""
    if n < 0:
        raise ValueError(f"degree must be non-negative, got {n}")
    u1 = 1.0 - u
    coeff = [1.0]
    for _ in range(n):
        coeff = [a * u1 + b * u for a, b in zip(coeff + [0.0], [0.0] + coeff)]
    return coeff


def bernstein_single(i: int, n: int, u: float) -> float:
    """The ``i``-th Bernstein polynomial of degree ``n`` at ``u``."""
    if n < 0 or not 0 <= i <= n:
        raise ValueError(f"invalid Bernstein index i={i} for degree n={n}")
    tmp = np.zeros(n + 1)
    tmp[n - i] = 1.0
    u1 = 1.0 - u
    for k in range(1, n + 1):
        tmp[k:] = tmp[k - 1:-1] * u + tmp[k:] * u1
    return float(tmp[n])


def bezier_elevate(cpts: Sequence) -> np.ndarray:
    """Control points of the same Bézier curve raised by one degree."""
    pts = np.asarray(cpts, dtype=float)
    n = len(pts)
    if n == 0:
        raise ValueError("cannot elevate a curve without control points")
    i = np.arange(1, n, dtype=float).reshape((-1,) + (1,) * (pts.ndim - 1))
    inner = pts[:-1] * i / n + pts[1:] * (n - i) / n
    return np.concatenate([pts[:1], inner, pts[-1:]])