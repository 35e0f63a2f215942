"""Control network and evaluation of generalized Bézier patches."""

from __future__ import annotations

import numpy as np

from .bezier import BCurve
from .blending import EPSILON
from .utilities import bernstein, bernstein_single


class GeneralizedBezierNet:
    """Control network of an ``n``-sided generalized Bézier patch.

    Each side carries a ``(degree + 1) x layers`` grid of control points;
    points shared by adjacent sides are kept consistent by
    :meth:`set_control_point`. The patch is evaluated from local side
    parameters ``sds``: one ``(s, d)`` pair per side.
    """

    def __init__(self, n: int, degree: int) -> None:
        if n < 1:
            raise ValueError(f"a patch needs at least one side, got {n}")
        if degree < 1:
            raise ValueError(f"degree must be at least 1, got {degree}")
        self._n = n
        self._degree = degree
        self._layers = (degree + 1) // 2
        self._nets = np.zeros((n, degree + 1, self._layers, 3))
        self.central_control_point = np.zeros(3)
        self.squared_weights = False

    @property
    def n(self) -> int:
        return self._n

    @property
    def degree(self) -> int:
        return self._degree

    @property
    def layers(self) -> int:
        return self._layers

    def _next(self, i: int) -> int:
        return (i + 1) % self._n

    def _prev(self, i: int) -> int:
        return (i - 1) % self._n

    def _check(self, i: int, j: int, k: int) -> None:
        if not (0 <= i < self._n and 0 <= j <= self._degree and 0 <= k < self._layers):
            raise IndexError(f"control point index ({i}, {j}, {k}) is out of range")

    def control_point(self, i: int, j: int, k: int) -> np.ndarray:
        """Control point ``j`` of row ``k`` on side ``i``."""
        self._check(i, j, k)
        return self._nets[i, j, k].copy()

    def set_control_point(self, i: int, j: int, k: int, p) -> None:
        """Set a control point, together with its copy on the adjacent side."""
        self._check(i, j, k)
        p = np.asarray(p, dtype=float)
        d = self._degree
        self._nets[i, j, k] = p
        if j < self._layers:
            self._nets[self._prev(i), d - k, j] = p
        elif d - j < self._layers:
            self._nets[self._next(i), k, d - j] = p

    def set_individual_control_point(self, i: int, j: int, k: int, p) -> None:
        """Set one control point only; differing corner copies need squared weights."""
        self._check(i, j, k)
        self._nets[i, j, k] = np.asarray(p, dtype=float)

    def _corner_factor(self, j: int, di_1: float, di: float, di1: float) -> float:
        if j < 2:
            if self.squared_weights:
                return di_1**2 / (di_1**2 + di**2)
            return di_1 / (di_1 + di)
        if self.squared_weights:
            return di1**2 / (di1**2 + di**2)
        return di1 / (di1 + di)

    def _is_corner_region(self, j: int, k: int) -> bool:
        return k < 2 and (j < 2 or j > self._degree - 2)

    def weight(self, i: int, j: int, k: int, sds) -> float:
        """Blending weight of control point ``(i, j, k)`` at the given side parameters."""
        self._check(i, j, k)
        d = self._degree
        if k >= 2 and (j < k or j > d - k):
            return 0.0

        si = float(sds[i][0])
        di_1 = float(sds[self._prev(i)][1])
        di = float(sds[i][1])
        di1 = float(sds[self._next(i)][1])

        if di + di1 < EPSILON:
            return 0.5 if j == d and k == 0 else 0.0
        if di_1 + di < EPSILON:
            return 0.5 if j == 0 and k == 0 else 0.0

        blend = bernstein_single(j, d, si) * bernstein_single(k, d, di)
        if self._is_corner_region(j, k):
            return blend * self._corner_factor(j, di_1, di, di1)
        if j == k or j == d - k:
            return blend * 0.5
        return blend

    def eval(self, sds) -> np.ndarray:
        """Surface point at the given side parameters."""
        d = self._degree
        point = np.zeros(3)
        weight_sum = 0.0
        for i in range(self._n):
            si = float(sds[i][0])
            di_1 = float(sds[self._prev(i)][1])
            di = float(sds[i][1])
            di1 = float(sds[self._next(i)][1])
            if di + di1 < EPSILON:
                return self._nets[i, d, 0].copy()
            if di_1 + di < EPSILON:
                return self._nets[i, 0, 0].copy()

            bl_s = bernstein(d, si)
            bl_d = bernstein(d, di)
            for k in range(self._layers):
                for j in range(d + 1):
                    blend = bl_s[j] * bl_d[k]
                    if self._is_corner_region(j, k):
                        blend *= self._corner_factor(j, di_1, di, di1)
                    elif j == k or j == d - k:
                        blend *= 0.5
                    elif j < k or j > d - k:
                        blend = 0.0
                    point += self._nets[i, j, k] * blend
                    weight_sum += blend
        return point + self.central_control_point * (1.0 - weight_sum)

    def boundary_curves(self) -> list[BCurve]:
        """The Bézier curves formed by the outermost row of each side."""
        return [BCurve(self._nets[i, :, 0]) for i in range(self._n)]