"""Degree elevation of generalized Bézier control networks."""

from __future__ import annotations

import numpy as np

from .generalized_bezier import GeneralizedBezierNet


def elevate_degree(net: GeneralizedBezierNet) -> GeneralizedBezierNet:
    """Return a network of one degree higher that approximates ``net``.

    The boundary curves are elevated exactly; the interior control points
    are bilinear combinations of the original ones, and the central control
    point is the mass centre of the innermost ring.
    """
    n = net.n
    d = net.degree + 1
    result = GeneralizedBezierNet(n, d)
    layers = result.layers
    half = d // 2

    for i in range(n):
        result.set_control_point(i, 0, 0, net.control_point(i, 0, 0))

    for j in range(1, d):
        eta = j / d
        for i in range(n):
            result.set_control_point(
                i, j, 0,
                net.control_point(i, j - 1, 0) * eta + net.control_point(i, j, 0) * (1 - eta),
            )

    # For odd target degrees the topmost layer of the original network is
    # taken from the control points of the adjacent side.
    for j in range(1, half + 1):
        eta = j / d
        for k in range(1, layers):
            theta = k / d
            for i in range(n):
                p1 = net.control_point(i, j - 1, k - 1)
                p2 = net.control_point(i, j, k - 1)
                if d % 2 == 0 or k < half:
                    p3 = net.control_point(i, j - 1, k)
                    p4 = net.control_point(i, j, k)
                else:
                    im = (i - 1) % n
                    p3 = net.control_point(im, d - k - 1, j - 1)
                    if j == half:
                        p4 = np.asarray(net.central_control_point, dtype=float)
                    else:
                        p4 = net.control_point(im, d - k - 1, j)
                result.set_control_point(
                    i, j, k,
                    p1 * eta * theta
                    + p2 * (1 - eta) * theta
                    + p3 * eta * (1 - theta)
                    + p4 * (1 - eta) * (1 - theta),
                )

    innermost = [result.control_point(i, layers, layers - 1) for i in range(n)]
    result.central_control_point = np.mean(innermost, axis=0)
    return result