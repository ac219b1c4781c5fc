"""Tests for sdfcat.batch: batch evaluation of named shapes."""

import numpy as np
import numpy.testing as npt
import pytest

import sdfcat
from sdfcat import (
    EvalContext,
    InvalidParameterError,
    ShapeContractError,
    ShapeEntry,
    UnknownShapeError,
    evaluate,
    evaluate_entry,
)
from sdfcat.primitives import sdSphere


def _cloud(n: int = 200, seed: int = 0) -> np.ndarray:
    return np.random.default_rng(seed).uniform(-1.0, 1.0, size=(n, 3))


# ===========================================================================
# Basic contract
# ===========================================================================

class TestSphereScenario:
    def test_inside_surface_outside(self):
        assert evaluate("Sphere", (0.0, 0.0, 0.0)) == pytest.approx(-0.5)
        assert evaluate("Sphere", (0.5, 0.0, 0.0)) == pytest.approx(0.0)
        assert evaluate("Sphere", (1.0, 0.0, 0.0)) == pytest.approx(0.5)

    def test_batch_values(self):
        d = evaluate("Sphere", [[0, 0, 0], [0.5, 0, 0], [1, 0, 0]])
        npt.assert_allclose(d, [-0.5, 0.0, 0.5])

    def test_single_point_returns_float(self):
        assert isinstance(evaluate("Sphere", [0.0, 0.0, 0.0]), float)


class TestResultShape:
    def test_n_points(self):
        d = evaluate("Torus", _cloud(50))
        assert d.shape == (50,)
        assert d.dtype == np.float64

    def test_grid_shape_preserved(self):
        g = np.zeros((4, 5, 6, 3))
        assert evaluate("Cube", g).shape == (4, 5, 6)

    def test_empty_list(self):
        d = evaluate("Sphere", [])
        assert d.shape == (0,)

    def test_empty_array(self):
        d = evaluate("Mandelbulb", np.empty((0, 3)))
        assert d.shape == (0,)

    def test_integer_points_accepted(self):
        npt.assert_allclose(evaluate("Sphere", [[1, 0, 0]]), [0.5])

    def test_float32_points_promoted(self):
        d = evaluate("Sphere", np.array([[1.0, 0.0, 0.0]], dtype=np.float32))
        assert d.dtype == np.float64


class TestOrdering:
    def test_permutation_is_preserved(self):
        p = _cloud(300)
        perm = np.random.default_rng(1).permutation(len(p))
        d = evaluate("Snowman", p)
        npt.assert_array_equal(evaluate("Snowman", p[perm]), d[perm])

    @pytest.mark.parametrize("name", sdfcat.list_available())
    def test_batch_matches_single(self, name):
        p = _cloud(200, seed=2)
        batch = evaluate(name, p, 0.8, 7)
        single = [evaluate(name, q, 0.8, 7) for q in p]
        if sdfcat.resolve(name).lipschitz is None:
            # escape-time estimates amplify last-bit differences between code paths
            npt.assert_allclose(batch, single, rtol=1e-5, atol=1e-12)
        else:
            npt.assert_array_equal(batch, single)

    @pytest.mark.parametrize("name", ["Asteroid", "CrystalCluster"])
    def test_prefix_of_batch_matches(self, name):
        p = _cloud(200, seed=9)
        full = evaluate(name, p, seed=3)
        for n in (1, 7, 64):
            npt.assert_array_equal(evaluate(name, p[:n], seed=3), full[:n])


# ===========================================================================
# Concurrency
# ===========================================================================

class TestThreaded:
    @pytest.mark.parametrize("name", ["Sphere", "Gear", "Fish", "Asteroid", "MengerSponge"])
    def test_threaded_matches_serial(self, name):
        p = _cloud(1000, seed=4)
        serial = evaluate(name, p, 1.3, workers=1)
        threaded = evaluate(name, p, 1.3, workers=4, chunk_size=37)
        npt.assert_allclose(threaded, serial, rtol=1e-12, atol=1e-12)

    def test_error_in_worker_propagates(self):
        def boom(p, time, seed):
            if np.any(p[:, 0] > 0.9):
                raise InvalidParameterError("boom")
            return sdSphere(p, 0.5)

        p = _cloud(500)
        p[-1] = (0.95, 0.0, 0.0)
        with pytest.raises(InvalidParameterError, match="boom"):
            evaluate_entry(ShapeEntry("Boom", boom), p, workers=4, chunk_size=16)

    def test_env_worker_count(self, monkeypatch):
        monkeypatch.setenv("SDFCAT_WORKERS", "3")
        p = _cloud(100)
        npt.assert_allclose(evaluate("Sphere", p, chunk_size=10), evaluate("Sphere", p, workers=1))


# ===========================================================================
# Numeric policy and purity
# ===========================================================================

class TestNumericPolicy:
    def test_nan_propagates(self):
        d = evaluate("Sphere", [[np.nan, 0, 0], [1.0, 0, 0]])
        assert np.isnan(d[0])
        assert d[1] == pytest.approx(0.5)

    def test_inf_propagates(self):
        assert evaluate("Sphere", (np.inf, 0.0, 0.0)) == np.inf

    def test_input_not_modified(self):
        p = _cloud(50)
        before = p.copy()
        evaluate("TwistedBox", p)
        npt.assert_array_equal(p, before)

    def test_shape_cannot_write_points(self):
        def scribble(p, time, seed):
            p[..., 0] = 0.0
            return sdSphere(p, 0.5)

        p = _cloud(10)
        before = p.copy()
        with pytest.raises(ValueError):
            evaluate_entry(ShapeEntry("Scribble", scribble), p)
        npt.assert_array_equal(p, before)
        assert p.flags.writeable

    def test_deterministic(self):
        p = _cloud(100)
        npt.assert_array_equal(evaluate("Asteroid", p, 2.0, 99), evaluate("Asteroid", p, 2.0, 99))


# ===========================================================================
# Errors
# ===========================================================================

class TestErrors:
    def test_unknown_name_before_evaluation(self):
        with pytest.raises(UnknownShapeError):
            evaluate("DoesNotExist", "not even points")

    def test_unknown_name_before_context_check(self):
        with pytest.raises(UnknownShapeError):
            evaluate("DoesNotExist", (0.0, 0.0, 0.0), time=np.nan, seed=-1)

    @pytest.mark.parametrize("points", [
        np.zeros((5, 2)),
        np.zeros((3, 4)),
        5.0,
        [[0, 0], [1, 1]],
        [["a", "b", "c"]],
    ])
    def test_bad_points(self, points):
        with pytest.raises(InvalidParameterError):
            evaluate("Sphere", points)

    @pytest.mark.parametrize("seed", [-1, 2 ** 32, 1.5, True, "7"])
    def test_bad_seed(self, seed):
        with pytest.raises(InvalidParameterError):
            evaluate("RandomSpheres", (0.0, 0.0, 0.0), seed=seed)

    @pytest.mark.parametrize("time", [np.nan, np.inf, "now", None])
    def test_bad_time(self, time):
        with pytest.raises(InvalidParameterError):
            evaluate("PulsingSphere", (0.0, 0.0, 0.0), time=time)

    def test_seed_limits_accepted(self):
        evaluate("RandomSpheres", (0.0, 0.0, 0.0), seed=0)
        evaluate("RandomSpheres", (0.0, 0.0, 0.0), seed=2 ** 32 - 1)
        evaluate("RandomSpheres", (0.0, 0.0, 0.0), seed=np.uint32(5))

    @pytest.mark.parametrize("kwargs", [{"workers": 0}, {"chunk_size": 0}, {"workers": 1.5}])
    def test_bad_tuning(self, kwargs):
        with pytest.raises(InvalidParameterError):
            evaluate("Sphere", _cloud(4), **kwargs)

    def test_wrong_result_shape(self):
        bad = ShapeEntry("Bad", lambda p, time, seed: np.zeros(3))
        with pytest.raises(ShapeContractError):
            evaluate_entry(bad, _cloud(5))

    def test_context_is_passed_through(self):
        seen = []

        def spy(p, time, seed):
            seen.append((time, seed))
            return np.zeros(len(p))

        evaluate_entry(ShapeEntry("Spy", spy), _cloud(3), EvalContext(2.5, 42))
        assert seen == [(2.5, 42)]

    def test_checked_context(self):
        assert EvalContext.checked(1, 3) == EvalContext(1.0, 3)
