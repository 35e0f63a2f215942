import pytest
import numpy as np

from transpatch.nelder_mead import optimize


def _quadratic(p):
    return (p[0] - 1.0) ** 2 + (p[1] + 2.0) ** 2


def test_minimises_quadratic():
    result = optimize(_quadratic, [0.0, 0.0], 2000, 1e-24, 1.0)
    assert result.x[0] == pytest.approx(1.0, abs=1e-4)
    assert result.x[1] == pytest.approx(-2.0, abs=1e-4)
    assert result.converged
    assert result.value == pytest.approx(_quadratic(result.x))


def test_one_dimensional():
    result = optimize(lambda p: (p[0] - 3.0) ** 2, [0.0], 2000, 1e-24, 0.5)
    assert result.x[0] == pytest.approx(3.0, abs=1e-4)


def test_zero_iterations_returns_best_of_initial_simplex():
    # Initial simplex: (0,0), (1,0), (0,1); (1,0) is the best of these.
    result = optimize(_quadratic, [0.0, 0.0], 0, 1e-10, 1.0)
    assert not result.converged
    assert np.allclose(result.x, [1.0, 0.0])
    assert result.value == pytest.approx(_quadratic([1.0, 0.0]))


def test_start_point_is_not_modified():
    start = [5.0, 5.0]
    optimize(_quadratic, start, 50, 1e-12, 1.0)
    assert start == [5.0, 5.0]


def test_value_never_worse_than_start():
    start = [4.0, -7.0]
    result = optimize(_quadratic, start, 30, 1e-30, 1.0)
    assert result.value <= _quadratic(start)


def test_empty_start_raises():
    with pytest.raises(ValueError):
        optimize(_quadratic, [], 10, 1e-6, 1.0)