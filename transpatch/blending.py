"""Blending functions and corner corrections shared by transfinite patches.

Every function takes the local parameters of the patch as ``sds``: one
``(s, d)`` pair per side, where ``s`` runs along the side and ``d`` measures
the distance from it.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

import numpy as np

from .utilities import hermite

EPSILON = 1.0e-8


def _zero() -> np.ndarray:
    return np.zeros(3)


@dataclass
class CornerData:
    """Position, tangents and twists of the boundary loop at one corner."""

    point: np.ndarray = field(default_factory=_zero)
    tangent1: np.ndarray = field(default_factory=_zero)
    tangent2: np.ndarray = field(default_factory=_zero)
    twist1: np.ndarray = field(default_factory=_zero)
    twist2: np.ndarray = field(default_factory=_zero)

    def __post_init__(self) -> None:
        for name in ("point", "tangent1", "tangent2", "twist1", "twist2"):
            setattr(self, name, np.asarray(getattr(self, name), dtype=float))


def _distances(sds: Sequence) -> list[float]:
    if len(sds) == 0:
        raise ValueError("at least one side is needed for blending")
    return [float(sd[1]) for sd in sds]


def blend_corner(sds: Sequence) -> list[float]:
    """Corner-based blending functions; they sum to one."""
    ds = _distances(sds)
    n = len(ds)
    close = sum(d < EPSILON for d in ds)

    if close > 0:
        result = []
        for i in range(n):
            ip = (i + 1) % n
            if close > 1:
                result.append(1.0 if ds[i] < EPSILON and ds[ip] < EPSILON else 0.0)
            elif ds[i] < EPSILON:
                tmp = ds[ip] ** -2
                result.append(tmp / (tmp + ds[(i - 1) % n] ** -2))
            elif ds[ip] < EPSILON:
                tmp = ds[i] ** -2
                result.append(tmp / (tmp + ds[(ip + 1) % n] ** -2))
            else:
                result.append(0.0)
        return result

    weights = [(ds[i] * ds[(i + 1) % n]) ** -2 for i in range(n)]
    total = sum(weights)
    return [w / total for w in weights]


def blend_side_singular(sds: Sequence) -> list[float]:
    """Side-based singular blending functions; they sum to one."""
    ds = _distances(sds)
    close = sum(d < EPSILON for d in ds)
    if close > 0:
        value = 1.0 / close
        return [value if d < EPSILON else 0.0 for d in ds]
    weights = [d**-2 for d in ds]
    total = sum(weights)
    return [w / total for w in weights]


def blend_corner_deficient(sds: Sequence) -> list[float]:
    """Corner-based blends that leave a deficiency towards the patch centre."""
    _distances(sds)
    n = len(sds)
    result = []
    for i in range(n):
        si, di = float(sds[i][0]), float(sds[i][1])
        sip, dip = float(sds[(i + 1) % n][0]), float(sds[(i + 1) % n][1])
        if di < EPSILON and dip < EPSILON:
            result.append(1.0)
            continue
        result.append(
            (dip * hermite(0, 1.0 - si) * hermite(0, di) + di * hermite(0, sip) * hermite(0, dip))
            / (di + dip)
        )
    return result


def gamma(d: float, use_gamma: bool = True) -> float:
    """Distance reparameterisation ``d / (2d + 1)``, or ``d`` itself when disabled."""
    if use_gamma:
        return d / (2.0 * d + 1.0)
    return d


def rational_twist(u: float, v: float, f, g) -> np.ndarray:
    """Rationally blended twist ``(f u + g v) / (u + v)``; zero at ``u + v = 0``."""
    f = np.asarray(f, dtype=float)
    g = np.asarray(g, dtype=float)
    if abs(u + v) < EPSILON:
        return np.zeros_like(f)
    return (f * u + g * v) / (u + v)


def corner_correction(corner: CornerData, s1: float, s2: float, use_gamma: bool = True) -> np.ndarray:
    """Bilinear-like correction patch at a corner.

    Both parameters are zero at the corner; ``s1`` grows towards the previous
    corner and ``s2`` towards the next one.
    """
    s1 = min(max(gamma(s1, use_gamma), 0.0), 1.0)
    s2 = min(max(gamma(s2, use_gamma), 0.0), 1.0)
    return (
        corner.point
        + corner.tangent1 * s1
        + corner.tangent2 * s2
        + rational_twist(s1, s2, corner.twist2, corner.twist1) * s1 * s2
    )