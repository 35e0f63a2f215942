"""Derivative-free minimisation with the Nelder–Mead simplex method."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass

import numpy as np

_ALPHA = 1.0  # reflection
_BETA = 2.0  # expansion
_GAMMA = 0.5  # contraction


@dataclass(frozen=True)
class OptimizeResult:
    """Best point found, its function value, and whether the simplex converged."""

    x: np.ndarray
    value: float
    converged: bool


def optimize(
    f: Callable[[np.ndarray], float],
    x: Sequence[float],
    max_iteration: int,
    tolerance: float,
    step_length: float,
) -> OptimizeResult:
    """Minimise ``f`` starting from ``x``.

    Iteration stops after ``max_iteration`` steps or when the variance of the
    function values on the simplex drops below ``tolerance``.
    """
    start = np.array(x, dtype=float)
    if start.ndim != 1 or start.size == 0:
        raise ValueError("starting point must be a non-empty sequence of numbers")
    n = start.size

    simplex = [start.copy() for _ in range(n + 1)]
    for i, vertex in enumerate(simplex[1:]):
        vertex[i] += step_length
    values = [float(f(vertex)) for vertex in simplex]

    delta = math.inf
    iteration = 0
    while iteration < max_iteration and delta >= tolerance:
        iteration += 1

        low = high = second = 0
        for i, yi in enumerate(values):
            if yi < values[low]:
                low = i
            elif yi > values[high]:
                second, high = high, i
            elif yi > values[second]:
                second = i
        centroid = (np.sum(simplex, axis=0) - simplex[high]) / n

        xr = centroid + centroid * _ALPHA - simplex[high] * _ALPHA
        yr = float(f(xr))

        if yr < values[low]:
            xe = centroid + xr * _BETA - centroid * _BETA
            ye = float(f(xe))
            if ye < yr:
                simplex[high], values[high] = xe, ye
            else:
                simplex[high], values[high] = xr, yr
        elif yr > values[second]:
            if yr <= values[high]:
                simplex[high], values[high] = xr, yr
            xc = centroid + simplex[high] * _GAMMA - centroid * _GAMMA
            yc = float(f(xc))
            if yc > values[high]:
                best = simplex[low]
                for i in range(n + 1):
                    if i == low:
                        continue
                    simplex[i] = (simplex[i] + best) / 2.0
                    values[i] = float(f(simplex[i]))
            else:
                simplex[high], values[high] = xc, yc
        else:
            simplex[high], values[high] = xr, yr

        delta = float(np.var(values))

    best_index = int(np.argmin(values))
    return OptimizeResult(
        x=simplex[best_index].copy(),
        value=values[best_index],
        converged=delta < tolerance,
    )