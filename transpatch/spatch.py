"""S-patches: multisided Bézier patches over barycentric coordinates."""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

from .bezier import BCurve

Index = tuple[int, ...]


def multinomial(index: Sequence[int]) -> int:
    """Multinomial coefficient ``(sum index)! / prod(index_i!)``."""
    if any(i < 0 for i in index):
        raise ValueError(f"multi-index entries must be non-negative, got {tuple(index)}")
    denominator = 1
    for i in index:
        denominator *= math.factorial(i)
    return math.factorial(sum(index)) // denominator


def multi_bernstein(index: Sequence[int], bc: Sequence[float]) -> float:
    """Multivariate Bernstein polynomial of ``index`` at barycentric ``bc``."""
    if len(bc) < len(index):
        raise ValueError("not enough barycentric coordinates for the multi-index")
    result = float(multinomial(index))
    for i, b in zip(index, bc):
        result *= float(b) ** i
    return result


class SPatchNet:
    """Control network of an ``n``-sided S-patch of the given depth."""

    def __init__(self, n: int, depth: int) -> None:
        if n < 1:
            raise ValueError(f"an S-patch needs at least one side, got {n}")
        if depth < 0:
            raise ValueError(f"depth must be non-negative, got {depth}")
        self._n = n
        self._depth = depth
        self._net: dict[Index, np.ndarray] = {}

    @property
    def n(self) -> int:
        return self._n

    @property
    def depth(self) -> int:
        return self._depth

    def _key(self, index: Sequence[int]) -> Index:
        key = tuple(int(i) for i in index)
        if len(key) != self._n:
            raise ValueError(f"multi-index must have {self._n} entries, got {len(key)}")
        return key

    def set_control_point(self, index: Sequence[int], p) -> None:
        """Set the control point at a multi-index."""
        self._net[self._key(index)] = np.asarray(p, dtype=float).copy()

    def control_point(self, index: Sequence[int]) -> np.ndarray:
        """Control point at a multi-index; ``KeyError`` if it was never set."""
        return self._net[self._key(index)].copy()

    def eval(self, bc: Sequence[float]) -> np.ndarray:
        """Surface point at the given barycentric coordinates."""
        if len(bc) != self._n:
            raise ValueError(f"expected {self._n} barycentric coordinates, got {len(bc)}")
        point = np.zeros(3)
        for index, cp in self._net.items():
            point += cp * multi_bernstein(index, bc)
        return point

    def boundary_curves(self) -> list[BCurve]:
        """Bézier curves along each side; unset control points count as the origin."""
        curves = []
        for i in range(self._n):
            ip = (i + 1) % self._n
            index = [0] * self._n
            index[i] = self._depth
            points = []
            for _ in range(self._depth):
                points.append(self._net.get(tuple(index), np.zeros(3)))
                index[i] -= 1
                index[ip] += 1
            points.append(self._net.get(tuple(index), np.zeros(3)))
            curves.append(BCurve(points))
        return curves