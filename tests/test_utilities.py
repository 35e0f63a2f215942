import pytest
import numpy as np

from transpatch.utilities import (
    affine_combine,
    bernstein,
    bernstein_single,
    bezier_elevate,
    binomial,
    hermite,
)


def test_affine_combine_endpoints_and_midpoint():
    p = [1.0, 2.0, 3.0]
    q = [5.0, -2.0, 7.0]
    assert np.allclose(affine_combine(p, 0.0, q), p)
    assert np.allclose(affine_combine(p, 1.0, q), q)
    mid = affine_combine(p, 0.5, q)
    assert np.allclose(mid, (np.array(p) + np.array(q)) / 2)


def test_binomial_symmetry_and_pascal():
    for n in range(1, 12):
        for k in range(n + 1):
            assert binomial(n, k) == binomial(n, n - k)
            if k > 0:
                assert binomial(n, k) == binomial(n - 1, k - 1) + binomial(n - 1, k)


def test_binomial_k_greater_than_n_is_zero():
    assert binomial(3, 5) == 0
    assert binomial(4, 0) == 1


def test_binomial_negative_raises():
    with pytest.raises(ValueError):
        binomial(-1, 0)


@pytest.mark.parametrize("t", [0.0, 0.2, 0.5, 0.9, 1.0])
def test_hermite_partition(t):
    assert hermite(0, t) + hermite(3, t) == pytest.approx(1.0)


def test_hermite_endpoint_values():
    assert hermite(0, 0.0) == pytest.approx(1.0)
    assert hermite(3, 1.0) == pytest.approx(1.0)
    assert hermite(1, 0.0) == pytest.approx(0.0)
    assert hermite(2, 1.0) == pytest.approx(0.0)


def test_hermite_invalid_index():
    with pytest.raises(ValueError):
        hermite(4, 0.5)


def test_bernstein_quadratic_half():
    assert bernstein(2, 0.5) == pytest.approx([0.25, 0.5, 0.25])


@pytest.mark.parametrize("n", [0, 1, 3, 6])
@pytest.mark.parametrize("u", [0.0, 0.3, 0.75, 1.0])
def test_bernstein_sum_and_single_agree(n, u):
    coeff = bernstein(n, u)
    assert len(coeff) == n + 1
    assert sum(coeff) == pytest.approx(1.0)
    for i, c in enumerate(coeff):
        assert bernstein_single(i, n, u) == pytest.approx(c)


def test_bernstein_single_out_of_range():
    with pytest.raises(ValueError):
        bernstein_single(4, 3, 0.5)


def _eval(cpts, u):
    coeff = bernstein(len(cpts) - 1, u)
    return sum(c * np.asarray(p) for c, p in zip(coeff, cpts))


def test_bezier_elevate_preserves_curve():
    cpts = np.array([[0.0, 0.0, 0.0], [1.0, 2.0, 0.5], [3.0, 1.0, -1.0], [4.0, 0.0, 2.0]])
    elevated = bezier_elevate(cpts)
    assert elevated.shape == (5, 3)
    assert np.allclose(elevated[0], cpts[0])
    assert np.allclose(elevated[-1], cpts[-1])
    for u in np.linspace(0.0, 1.0, 9):
        assert np.allclose(_eval(elevated, u), _eval(cpts, u))


def test_bezier_elevate_does_not_modify_input():
    cpts = [[0.0, 0.0, 0.0], [2.0, 2.0, 2.0]]
    bezier_elevate(cpts)
    assert cpts == [[0.0, 0.0, 0.0], [2.0, 2.0, 2.0]]


def test_bezier_elevate_empty_raises():
    with pytest.raises(ValueError):
        bezier_elevate([])