"""Tests for sdfcat.combinators: boolean and smooth blend operators."""

import math

import numpy as np
import numpy.testing as npt
import pytest

from sdfcat import combinators as c
from sdfcat.errors import InvalidParameterError
from sdfcat.primitives import sdSphere


def _pair(n: int = 1000, seed: int = 0):
    rng = np.random.default_rng(seed)
    return rng.uniform(-1.0, 1.0, n), rng.uniform(-1.0, 1.0, n)


# ===========================================================================
# Hard booleans
# ===========================================================================

class TestHardBooleans:
    def test_union_is_min(self):
        a, b = _pair()
        npt.assert_array_equal(c.opUnion(a, b), np.minimum(a, b))

    def test_intersection_is_max(self):
        a, b = _pair()
        npt.assert_array_equal(c.opIntersection(a, b), np.maximum(a, b))

    def test_subtraction(self):
        a, b = _pair()
        npt.assert_array_equal(c.opSubtraction(a, b), np.maximum(a, -b))

    def test_n_ary(self):
        a, b = _pair()
        d = np.full_like(a, -0.25)
        npt.assert_array_equal(c.opUnion(a, b, d), np.minimum(np.minimum(a, b), d))
        npt.assert_array_equal(c.opIntersection(a, b, d), np.maximum(np.maximum(a, b), d))

    def test_xor_sign(self):
        # inside exactly one shape -> negative, inside both or neither -> positive
        a = np.array([-0.2, -0.2, 0.3, 0.3])
        b = np.array([0.4, -0.1, -0.5, 0.2])
        assert list(c.opXor(a, b) < 0.0) == [True, False, True, False]

    def test_union_of_spheres_exact_outside(self):
        p = np.array([[2.0, 0.0, 0.0]])
        d = c.opUnion(sdSphere(p - [1.0, 0, 0], 0.5), sdSphere(p + [1.0, 0, 0], 0.5))
        npt.assert_allclose(d, [0.5])


# ===========================================================================
# Smooth blends
# ===========================================================================

class TestSmoothUnion:
    def test_bounded_below_min(self):
        a, b = _pair()
        k = 0.3
        d = c.opSmoothUnion(a, b, k)
        m = np.minimum(a, b)
        assert np.all(d <= m)
        assert np.all(d >= m - k / 4.0 - 1e-12)

    def test_equals_min_outside_band(self):
        a = np.array([0.0, 1.0])
        b = np.array([0.5, -0.5])
        npt.assert_array_equal(c.opSmoothUnion(a, b, 0.4), np.minimum(a, b))

    def test_max_deviation_at_equal_inputs(self):
        npt.assert_allclose(c.opSmoothUnion(np.array([0.2]), np.array([0.2]), 0.4), [0.1])

    def test_smooth_intersection_mirror(self):
        a, b = _pair()
        k = 0.2
        d = c.opSmoothIntersection(a, b, k)
        m = np.maximum(a, b)
        assert np.all(d >= m)
        assert np.all(d <= m + k / 4.0 + 1e-12)

    def test_smooth_subtraction_mirror(self):
        a, b = _pair()
        k = 0.2
        d = c.opSmoothSubtraction(a, b, k)
        m = np.maximum(a, -b)
        assert np.all(d >= m)
        assert np.all(d <= m + k / 4.0 + 1e-12)


class TestExpSmoothUnion:
    def test_bounded_below_min(self):
        a, b = _pair()
        k = 0.1
        d = c.opExpSmoothUnion(a, b, k)
        m = np.minimum(a, b)
        assert np.all(d < m)
        assert np.all(d >= m - k * math.log(2.0) - 1e-12)

    def test_equal_inputs(self):
        npt.assert_allclose(c.opExpSmoothUnion(np.array([0.3]), np.array([0.3]), 0.2),
                            [0.3 - 0.2 * math.log(2.0)])

    def test_no_overflow_for_large_distances(self):
        d = c.opExpSmoothUnion(np.array([1e6]), np.array([-1e6]), 1e-3)
        assert np.isfinite(d).all()
        npt.assert_allclose(d, [-1e6])


@pytest.mark.parametrize("op", [
    c.opSmoothUnion, c.opSmoothIntersection, c.opSmoothSubtraction, c.opExpSmoothUnion,
])
@pytest.mark.parametrize("k", [0.0, -0.1, np.nan, np.inf])
def test_bad_blend_radius_rejected(op, k):
    a, b = _pair(4)
    with pytest.raises(InvalidParameterError):
        op(a, b, k)


# ===========================================================================
# Modifiers
# ===========================================================================

class TestModifiers:
    def test_round(self):
        npt.assert_allclose(c.opRound(np.array([0.3]), 0.1), [0.2])

    def test_round_negative_rejected(self):
        with pytest.raises(InvalidParameterError):
            c.opRound(np.array([0.3]), -0.1)

    def test_onion(self):
        npt.assert_allclose(c.opOnion(np.array([-0.5, 0.0, 0.5]), 0.1), [0.4, -0.1, 0.4])

    def test_onion_negative_rejected(self):
        with pytest.raises(InvalidParameterError):
            c.opOnion(np.array([0.0]), -1.0)

    def test_scale(self):
        p = np.array([[3.0, 0.0, 0.0]])
        npt.assert_allclose(c.opScale(p, 2.0, lambda q: sdSphere(q, 1.0)), [1.0])

    @pytest.mark.parametrize("s", [0.0, -2.0, np.nan])
    def test_scale_bad_factor(self, s):
        with pytest.raises(InvalidParameterError):
            c.opScale(np.zeros((1, 3)), s, lambda q: sdSphere(q, 1.0))

    def test_mix(self):
        a = np.array([0.0, 1.0])
        b = np.array([1.0, 3.0])
        npt.assert_allclose(c.opMix(a, b, 0.5), [0.5, 2.0])
        npt.assert_array_equal(c.opMix(a, b, 0.0), a)

    @pytest.mark.parametrize("t", [-0.01, 1.5])
    def test_mix_weight_out_of_range(self, t):
        with pytest.raises(InvalidParameterError):
            c.opMix(np.zeros(2), np.ones(2), t)
