"""Super-D patches: quartic ribbons built from vertex, edge and face points."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from .bezier import BCurve
from .blending import blend_side_singular
from .utilities import affine_combine, bernstein


def bezier_evaluate(surface, u: float, v: float) -> np.ndarray:
    """Evaluate a 5x5 quartic tensor-product Bézier surface at ``(u, v)``."""
    s = np.asarray(surface, dtype=float)
    if s.shape[:2] != (5, 5):
        raise ValueError(f"a quartic surface needs 5x5 control points, got shape {s.shape}")
    bu = np.asarray(bernstein(4, u))
    bv = np.asarray(bernstein(4, v))
    return np.einsum("i,j,ijk->k", bu, bv, s)


class SuperDPatch:
    """An ``n``-sided Super-D patch.

    Control points: one vertex point, and one face and one edge point per
    side. :meth:`update_ribbons` must be called after they change and before
    :meth:`eval`.
    """

    def __init__(self, n: int, fullness: float = 0.5) -> None:
        if n < 3:
            raise ValueError(f"a Super-D patch needs at least 3 sides, got {n}")
        self._n = n
        self.fullness = fullness
        self.vertex_control_point = np.zeros(3)
        self.face_control_points = np.zeros((n, 3))
        self.edge_control_points = np.zeros((n, 3))
        self._ribbons: list[np.ndarray] | None = None

    @property
    def n(self) -> int:
        return self._n

    def _next(self, i: int) -> int:
        return (i + 1) % self._n

    def _prev(self, i: int) -> int:
        return (i - 1) % self._n

    def generate_quartic(self, a, b, c) -> np.ndarray:
        """Quartic curve from ``a`` to ``c`` pulled towards ``b`` by the fullness."""
        f = self.fullness
        x1 = (2.0 / 5.0 * f + 3.0 / 5.0) * f
        x2 = (-2.0 / 7.0 * f + 9.0 / 7.0) * f
        a = np.asarray(a, dtype=float)
        b = np.asarray(b, dtype=float)
        c = np.asarray(c, dtype=float)
        return np.array([
            a,
            affine_combine(a, x1, b),
            affine_combine(affine_combine(a, x2, b), 0.5, affine_combine(c, x2, b)),
            affine_combine(c, x1, b),
            c,
        ])

    def generate_base(self, i: int) -> np.ndarray:
        """Boundary quartic of side ``i``."""
        return self.generate_quartic(
            self.face_control_points[self._prev(i)],
            self.edge_control_points[i],
            self.face_control_points[i],
        )

    def generate_mid(self, i: int) -> np.ndarray:
        """Quartic through the vertex point across side ``i``."""
        return self.generate_quartic(
            self.edge_control_points[self._prev(i)],
            self.vertex_control_point,
            self.edge_control_points[self._next(i)],
        )

    def generate_opp(self, i: int) -> np.ndarray:
        """Quartic opposite side ``i``; only defined for 3- and 4-sided patches."""
        if self._n == 3:
            return np.tile(self.face_control_points[self._next(i)], (5, 1))
        if self._n == 4:
            return self.generate_base(self._next(self._next(i)))[::-1].copy()
        raise ValueError("the opposite curve exists only for 3- and 4-sided patches")

    def generate_ribbon(self, i: int) -> np.ndarray:
        """5x5 quartic control net of the ribbon on side ``i``."""
        base = self.generate_base(i)
        if self._n > 4:
            left = self.generate_base(self._prev(i))
            right = self.generate_base(self._next(i))
            result = np.empty((5, 5, 3))
            for j in range(5):
                for k in range(5):
                    result[j, k] = (
                        base[j]
                        + (left[4 - k] - left[4]) * (4 - j) / 4.0
                        + (right[k] - right[0]) * j / 4.0
                    )
            return result
        mid = self.generate_mid(i)
        opp = self.generate_opp(i)
        return np.array([self.generate_quartic(base[j], mid[j], opp[j]) for j in range(5)])

    def update_ribbons(self) -> None:
        """Recompute the ribbons from the current control points."""
        self._ribbons = [self.generate_ribbon(i) for i in range(self._n)]

    def eval(self, sds: Sequence) -> np.ndarray:
        """Surface point at the given side parameters."""
        if self._ribbons is None:
            raise RuntimeError("ribbons are not computed; call update_ribbons() first")
        if len(sds) != self._n:
            raise ValueError(f"expected {self._n} side parameters, got {len(sds)}")
        blends = blend_side_singular(sds)
        point = np.zeros(3)
        for ribbon, sd, blend in zip(self._ribbons, sds, blends):
            point += bezier_evaluate(ribbon, float(sd[0]), float(sd[1])) * blend
        return point

    def boundary_curves(self) -> list[BCurve]:
        """The boundary quartics of all sides."""
        return [BCurve(self.generate_base(i)) for i in range(self._n)]