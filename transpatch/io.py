"""Reading and writing control networks, point clouds and patch models as text files."""

from __future__ import annotations

import os
from collections.abc import Iterator, Sequence
from pathlib import Path

import numpy as np

from .generalized_bezier import GeneralizedBezierNet
from .spatch import SPatchNet
from .superd import SuperDPatch
from .utilities import binomial

PathLike = str | os.PathLike


class _Tokens:
    """Whitespace-separated tokens of a text file, consumed in order."""

    def __init__(self, path: PathLike) -> None:
        self._path = Path(path)
        self._items = iter(self._path.read_text().split())

    def _next(self) -> str:
        try:
            return next(self._items)
        except StopIteration:
            raise ValueError(f"unexpected end of data in {self._path}") from None

    def int(self) -> int:
        token = self._next()
        try:
            value = int(token)
        except ValueError:
            raise ValueError(f"expected an integer in {self._path}, got {token!r}") from None
        if value < 0:
            raise ValueError(f"expected a non-negative integer in {self._path}, got {value}")
        return value

    def float(self) -> float:
        token = self._next()
        try:
            return float(token)
        except ValueError:
            raise ValueError(f"expected a number in {self._path}, got {token!r}") from None

    def point(self) -> np.ndarray:
        return np.array([self.float(), self.float(), self.float()])


def _fmt(values: Sequence[float]) -> str:
    return " ".join(repr(float(v)) for v in values)


def _count_control_points(n: int, d: int) -> int:
    layers = (d + 1) // 2
    return n * (1 + d // 2) * layers + 1


def _control_point_indices(n: int, d: int) -> Iterator[tuple[int, int, int]]:
    """The (side, col, row) of every non-central control point, in file order."""
    side = col = row = 0
    for _ in range(1, _count_control_points(n, d)):
        if col >= d - row:
            side += 1
            if side >= n:
                side = 0
                row += 1
            col = row
        yield side, col, row
        col += 1


def write_pcp(path: PathLike, uvs: Sequence, points: Sequence) -> None:
    """Write points with their parameters: a count, then ``x y z u v`` per line."""
    if len(uvs) != len(points):
        raise ValueError(
            f"number of parameters ({len(uvs)}) and points ({len(points)}) differ"
        )
    lines = [str(len(uvs))]
    for uv, p in zip(uvs, points):
        lines.append(_fmt([p[0], p[1], p[2], uv[0], uv[1]]))
    Path(path).write_text("\n".join(lines) + "\n")


def load_bezier(path: PathLike) -> GeneralizedBezierNet:
    """Read a generalized Bézier control network."""
    tokens = _Tokens(path)
    n = tokens.int()
    d = tokens.int()
    net = GeneralizedBezierNet(n, d)
    net.central_control_point = tokens.point()
    for side, col, row in _control_point_indices(n, d):
        net.set_control_point(side, col, row, tokens.point())
    return net


def save_bezier(net: GeneralizedBezierNet, path: PathLike) -> None:
    """Write a generalized Bézier control network in the format of :func:`load_bezier`."""
    n, d = net.n, net.degree
    lines = [f"{n} {d}", _fmt(net.central_control_point)]
    for side, col, row in _control_point_indices(n, d):
        lines.append(_fmt(net.control_point(side, col, row)))
    Path(path).write_text("\n".join(lines) + "\n")


def write_bezier_control_points(net: GeneralizedBezierNet, path: PathLike) -> None:
    """Write the control network as an OBJ mesh of quads (and triangles at the centre)."""
    n, d, layers = net.n, net.degree, net.layers

    vertex_of: dict[tuple[int, int, int], int] = {}
    lines = ["v " + " ".join(repr(float(x)) for x in net.central_control_point)]
    for c, (side, col, row) in enumerate(_control_point_indices(n, d), start=1):
        side_m, side_p = (side - 1) % n, (side + 1) % n
        for key in ((side, col, row), (side_m, d - row, col), (side_p, row, d - col)):
            vertex_of.setdefault(key, c + 1)
        p = net.control_point(side, col, row)
        lines.append("v " + " ".join(repr(float(x)) for x in p))

    def find(i: int, j: int, k: int) -> int:
        return vertex_of.get((i, j, k), 0)

    for i in range(n):
        for j in range(d // 2 + 1):
            for k in range(layers - 1):
                quad = (find(i, j, k), find(i, j + 1, k), find(i, j + 1, k + 1), find(i, j, k + 1))
                lines.append("f " + " ".join(map(str, quad)))
    for i in range(n):
        a = find(i, layers - 1, layers - 1)
        b = find(i, layers, layers - 1)
        if d % 2 == 0:
            last = find((i - 1) % n, layers, layers - 1)
            lines.append(f"f {a} {b} 1 {last}")
        else:
            lines.append(f"f {a} {b} 1")
    Path(path).write_text("\n".join(lines) + "\n")


def load_spatch(path: PathLike) -> SPatchNet:
    """Read an S-patch: sides and depth, then a multi-index and a point per control point."""
    tokens = _Tokens(path)
    n = tokens.int()
    d = tokens.int()
    net = SPatchNet(n, d)
    for _ in range(binomial(n + d - 1, d)):
        index = [tokens.int() for _ in range(n)]
        net.set_control_point(index, tokens.point())
    return net


def load_superd_model(path: PathLike) -> list[SuperDPatch]:
    """Read a model of Super-D patches, with their ribbons already computed."""
    tokens = _Tokens(path)
    patches = []
    for _ in range(tokens.int()):
        n = tokens.int()
        patch = SuperDPatch(n)
        for j in range(n):
            patch.face_control_points[j] = tokens.point()
        for j in range(n):
            patch.edge_control_points[j] = tokens.point()
        patch.vertex_control_point = tokens.point()
        patch.update_ribbons()
        patches.append(patch)
    return patches