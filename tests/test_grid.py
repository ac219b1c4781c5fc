"""Tests for sdfcat.grid: regular node grids and .npy export."""

import numpy as np
import numpy.testing as npt
import pytest

from sdfcat import InvalidParameterError, UnknownShapeError, evaluate
from sdfcat.grid import grid_points, sample_grid, save_npy


class TestGridPoints:
    def test_shape(self):
        assert grid_points(5).shape == (125, 3)

    def test_x_fastest_ordering(self):
        p = grid_points(3)
        npt.assert_array_equal(p[0], [-1.0, -1.0, -1.0])
        npt.assert_array_equal(p[1], [0.0, -1.0, -1.0])
        npt.assert_array_equal(p[3], [-1.0, 0.0, -1.0])
        npt.assert_array_equal(p[9], [-1.0, -1.0, 0.0])
        npt.assert_array_equal(p[-1], [1.0, 1.0, 1.0])

    def test_node_index_formula(self):
        n = 4
        p = grid_points(n, (0.0, 3.0))
        x, y, z = 1, 2, 3
        npt.assert_allclose(p[x + n * (y + n * z)], [x, y, z])

    def test_custom_bounds_endpoints(self):
        p = grid_points(7, (-2.0, 0.5))
        assert p.min() == pytest.approx(-2.0)
        assert p.max() == pytest.approx(0.5)

    @pytest.mark.parametrize("res", [1, 0, -3, 2.5, True])
    def test_bad_resolution(self, res):
        with pytest.raises(InvalidParameterError):
            grid_points(res)

    @pytest.mark.parametrize("bounds", [(1.0, -1.0), (0.0, 0.0), (-np.inf, 1.0)])
    def test_bad_bounds(self, bounds):
        with pytest.raises(InvalidParameterError):
            grid_points(4, bounds)


class TestSampleGrid:
    def test_shape_and_values(self):
        n = 6
        phi = sample_grid("Torus", n)
        assert phi.shape == (n, n, n)
        p = grid_points(n)
        npt.assert_allclose(phi.ravel(), evaluate("Torus", p))

    def test_z_first_indexing(self):
        n = 5
        phi = sample_grid("Capsule", n)
        step = 2.0 / (n - 1)
        x, y, z = 4, 1, 2
        point = (-1.0 + x * step, -1.0 + y * step, -1.0 + z * step)
        assert phi[z, y, x] == pytest.approx(evaluate("Capsule", point))

    def test_sphere_centre_node(self):
        phi = sample_grid("Sphere", 33)
        assert phi[16, 16, 16] == pytest.approx(-0.5)

    def test_time_and_seed_forwarded(self):
        a = sample_grid("RandomSpheres", 8, seed=1)
        b = sample_grid("RandomSpheres", 8, seed=2)
        assert not np.allclose(a, b)
        c = sample_grid("PulsingSphere", 8, time=0.5)
        npt.assert_allclose(c, evaluate("PulsingSphere", grid_points(8), 0.5).reshape(8, 8, 8))

    def test_unknown_name(self):
        with pytest.raises(UnknownShapeError):
            sample_grid("DoesNotExist", 4)


class TestSaveNpy:
    def test_round_trip(self, tmp_path):
        phi = sample_grid("Cube", 4)
        path = str(tmp_path / "cube.npy")
        save_npy(path, phi)
        npt.assert_array_equal(np.load(path), phi)

    def test_creates_parent_dirs(self, tmp_path):
        path = str(tmp_path / "a" / "b" / "out.npy")
        save_npy(path, np.zeros((2, 2, 2)))
        assert np.load(path).shape == (2, 2, 2)


def test_public_names():
    import sdfcat.grid as grid
    assert sorted(grid.__all__) == ["grid_points", "sample_grid", "save_npy"]
