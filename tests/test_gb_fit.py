import numpy as np
import pytest

from transpatch.gb_fit import elevate_degree
from transpatch.generalized_bezier import GeneralizedBezierNet
from transpatch.utilities import bezier_elevate


def _random_net(n, degree, seed=0):
    rng = np.random.default_rng(seed)
    net = GeneralizedBezierNet(n, degree)
    for i in range(n):
        for j in range(degree + 1):
            for k in range(net.layers):
                net.set_control_point(i, j, k, rng.normal(size=3))
    net.central_control_point = rng.normal(size=3)
    return net


@pytest.mark.parametrize("n,degree", [(3, 3), (4, 4), (5, 5), (6, 2)])
def test_degree_increases_by_one(n, degree):
    result = elevate_degree(_random_net(n, degree))
    assert result.degree == degree + 1
    assert result.n == n
    assert result.layers == (degree + 2) // 2


@pytest.mark.parametrize("n,degree", [(3, 3), (4, 4), (5, 5), (6, 2), (4, 1)])
def test_boundary_is_exactly_elevated(n, degree):
    net = _random_net(n, degree, seed=n * 10 + degree)
    result = elevate_degree(net)
    for original, elevated in zip(net.boundary_curves(), result.boundary_curves()):
        expected = bezier_elevate(original.control_points)
        assert np.allclose(elevated.control_points, expected)


@pytest.mark.parametrize("n,degree", [(3, 4), (5, 3)])
def test_boundary_curves_have_same_shape(n, degree):
    net = _random_net(n, degree, seed=7)
    result = elevate_degree(net)
    for original, elevated in zip(net.boundary_curves(), result.boundary_curves()):
        for u in np.linspace(0.0, 1.0, 9):
            assert np.allclose(original.eval(u), elevated.eval(u))


@pytest.mark.parametrize("n,degree", [(3, 3), (4, 4), (5, 6)])
def test_corners_are_kept(n, degree):
    net = _random_net(n, degree, seed=3)
    result = elevate_degree(net)
    for i in range(n):
        assert np.allclose(result.control_point(i, 0, 0), net.control_point(i, 0, 0))
        assert np.allclose(
            result.control_point(i, result.degree, 0),
            net.control_point((i + 1) % n, 0, 0),
        )


@pytest.mark.parametrize("n,degree", [(3, 3), (4, 4), (5, 5)])
def test_constant_network_stays_constant(n, degree):
    p = np.array([1.5, -2.0, 0.25])
    net = GeneralizedBezierNet(n, degree)
    for i in range(n):
        for j in range(degree + 1):
            for k in range(net.layers):
                net.set_control_point(i, j, k, p)
    net.central_control_point = p
    result = elevate_degree(net)
    for i in range(n):
        for j in range(result.degree + 1):
            for k in range(result.layers):
                assert np.allclose(result.control_point(i, j, k), p)
    assert np.allclose(result.central_control_point, p)


def test_center_is_mass_center_of_inner_ring():
    result = elevate_degree(_random_net(5, 4, seed=11))
    layers = result.layers
    ring = [result.control_point(i, layers, layers - 1) for i in range(5)]
    assert np.allclose(result.central_control_point, np.mean(ring, axis=0))