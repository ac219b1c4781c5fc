"""Tests for sdfcat._math: GLSL-style scalar and vector helpers."""

import numpy as np
import numpy.testing as npt

from sdfcat import _math as m


class TestMod:
    def test_positive_operands(self):
        npt.assert_allclose(m.mod(3.5, 1.0), 0.5)

    def test_negative_dividend_takes_sign_of_divisor(self):
        npt.assert_allclose(m.mod(-0.25, 1.0), 0.75)

    def test_negative_divisor(self):
        npt.assert_allclose(m.mod(0.25, -1.0), -0.75)

    def test_differs_from_truncated_remainder(self):
        x = np.array([-2.5, -0.1, 0.1, 2.5])
        assert not np.allclose(m.mod(x, 2.0), np.fmod(x, 2.0))

    def test_result_range(self):
        x = np.random.default_rng(0).uniform(-10, 10, 1000)
        r = m.mod(x, 0.7)
        assert np.all(r >= -1e-12) and np.all(r <= 0.7)


class TestFract:
    def test_negative(self):
        npt.assert_allclose(m.fract(-1.25), 0.75)

    def test_range(self):
        x = np.random.default_rng(1).uniform(-100, 100, 1000)
        f = m.fract(x)
        assert np.all(f >= 0.0) and np.all(f <= 1.0)


class TestSmoothstep:
    def test_edges_and_midpoint(self):
        npt.assert_allclose(m.smoothstep(0.0, 1.0, np.array([-1.0, 0.0, 0.5, 1.0, 2.0])),
                            [0.0, 0.0, 0.5, 1.0, 1.0])

    def test_hermite_value(self):
        # t = 0.25 -> t^2 (3 - 2t) = 0.0625 * 2.5
        npt.assert_allclose(m.smoothstep(2.0, 6.0, 3.0), 0.15625)


class TestScalarHelpers:
    def test_mix(self):
        npt.assert_allclose(m.mix(2.0, 4.0, 0.25), 2.5)

    def test_clamp(self):
        npt.assert_array_equal(m.clamp(np.array([-2.0, 0.3, 5.0]), 0.0, 1.0), [0.0, 0.3, 1.0])


class TestVectorHelpers:
    def test_vec3_broadcasts(self):
        v = m.vec3(np.zeros(4), 1.0, 2.0)
        assert v.shape == (4, 3)
        npt.assert_array_equal(v[2], [0.0, 1.0, 2.0])

    def test_length_dot(self):
        v = np.array([[3.0, 4.0, 0.0]])
        npt.assert_allclose(m.length(v), [5.0])
        npt.assert_allclose(m.dot2(v), [25.0])
        npt.assert_allclose(m.dot(v, np.array([1.0, 1.0, 1.0])), [7.0])

    def test_normalize(self):
        v = np.array([[0.0, 0.0, 0.0], [0.0, 2.0, 0.0]])
        n = m.normalize(v)
        npt.assert_array_equal(n[0], [0.0, 0.0, 0.0])
        npt.assert_allclose(n[1], [0.0, 1.0, 0.0])

    def test_max_comp(self):
        npt.assert_array_equal(m.max_comp(np.array([[1.0, -2.0, 0.5]])), [1.0])


def test_public_helpers():
    assert sorted(m.__all__) == sorted([
        "vec2", "vec3", "length", "dot", "dot2", "normalize", "max_comp",
        "clamp", "mix", "fract", "mod", "smoothstep",
    ])
    for name in m.__all__:
        assert callable(getattr(m, name))
