"""Bézier curves with derivative evaluation, arc length and class-A fitting."""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

from .nelder_mead import optimize
from .utilities import bernstein

_GAUSS_LEGENDRE_4 = (
    (-0.861136312, 0.347854845),
    (-0.339981044, 0.652145155),
    (0.339981044, 0.652145155),
    (0.861136312, 0.347854845),
)


def _normalized(v: np.ndarray) -> np.ndarray:
    return v / np.linalg.norm(v)


def rotation_matrix(axis, angle: float) -> np.ndarray:
    """3x3 matrix rotating by ``angle`` radians around ``axis`` (right-hand rule)."""
    a = np.asarray(axis, dtype=float)
    length = np.linalg.norm(a)
    if length == 0.0:
        raise ValueError("rotation axis must be non-zero")
    x, y, z = a / length
    k = np.array([[0.0, -z, y], [z, 0.0, -x], [-y, x, 0.0]])
    return np.eye(3) + math.sin(angle) * k + (1.0 - math.cos(angle)) * (k @ k)


class BCurve:
    """A Bézier curve given by its control points."""

    def __init__(self, control_points: Sequence) -> None:
        cps = np.array(control_points, dtype=float)
        if cps.ndim != 2 or len(cps) == 0:
            raise ValueError("a Bézier curve needs a non-empty list of points")
        self._cp = cps

    @property
    def degree(self) -> int:
        return len(self._cp) - 1

    @property
    def control_points(self) -> np.ndarray:
        return self._cp.copy()

    def eval(self, u: float) -> np.ndarray:
        """Point of the curve at parameter ``u``."""
        return np.asarray(bernstein(self.degree, u)) @ self._cp

    def derivatives(self, u: float, nr_der: int) -> list[np.ndarray]:
        """The point and its first ``nr_der`` derivatives at ``u``."""
        n = self.degree
        available = min(nr_der, n)
        result = []
        dcp = self._cp
        for k in range(available + 1):
            if k > 0:
                dcp = np.diff(dcp, axis=0) * (n - k + 1)
            result.append(np.asarray(bernstein(n - k, u)) @ dcp)
        result.extend(np.zeros(self._cp.shape[1]) for _ in range(nr_der - available))
        return result

    def reverse(self) -> None:
        """Reverse the direction of the curve in place."""
        self._cp = self._cp[::-1].copy()

    def arc_length(self, start: float, end: float) -> float:
        """Approximate length between two parameters by 4-point Gauss quadrature."""
        if start >= end:
            return 0.0
        half = (end - start) * 0.5
        total = 0.0
        for node, w in _GAUSS_LEGENDRE_4:
            u = (end - start) * node * 0.5 + (start + end) * 0.5
            total += float(np.linalg.norm(self.derivatives(u, 1)[1])) * w * half
        return total

    @classmethod
    def fit_class_a(cls, degree: int, pa, va, pb, vb) -> BCurve:
        """Fit a class-A Bézier curve from ``pa`` (tangent ``va``) to ``pb`` (tangent ``vb``).

        The degree is doubled while the fit is poor, up to a degree of about 50.
        """
        if degree < 2:
            raise ValueError(f"class-A fitting needs degree >= 2, got {degree}")
        pa = np.asarray(pa, dtype=float)
        pb = np.asarray(pb, dtype=float)
        v0 = _normalized(np.asarray(va, dtype=float))
        v1 = _normalized(np.asarray(vb, dtype=float))
        if np.linalg.norm(np.cross(v0, v1)) < 1e-12:
            raise ValueError("end tangents must not be parallel")
        chord = _normalized(pb - pa)

        while True:
            def generate(p, v, m, degree=degree):
                cps = np.empty((degree + 1, 3))
                cps[0] = p
                cps[1] = p + v
                step = v
                for i in range(2, degree + 1):
                    step = m @ step
                    cps[i] = cps[i - 1] + step
                return cps

            def setup(phi, s, degree=degree):
                axis = _normalized(rotation_matrix(_normalized(v1 - v0), phi) @ np.cross(v0, v1))
                w0 = _normalized(v0 - axis * (v0 @ axis))
                w1 = _normalized(v1 - axis * (v1 @ axis))
                theta = math.acos(min(max(float(w0 @ w1), -1.0), 1.0)) / (degree - 1)
                return rotation_matrix(axis, theta) * s

            state = {}

            def target(phi_s):
                m = setup(phi_s[0], phi_s[1])
                cps = generate(pa, v0, m)
                state["m"], state["cps"] = m, cps
                return abs(float(_normalized(cps[-1] - cps[0]) @ chord) - 1.0)

            best = optimize(target, [0.0, 1.0], 100, 1.0e-15, 1.0)
            err = target(best.x)
            if err > 0.001 and degree < 50:
                degree *= 2
                continue

            cps = state["cps"]
            scaled = v0 * (np.linalg.norm(pb - pa) / np.linalg.norm(cps[-1] - cps[0]))
            cps = generate(pa, scaled, state["m"])
            cps[degree] = pb
            return cls(cps)