"""Tests for the Euler / RK4 integrator core."""

import math

import numpy as np
import pytest
from integrator import (
    compute_euler,
    compute_rk4,
    derivative_field,
    euler_series,
    reference_grid,
    rk4_series,
    simple_series,
)
from mesh import InvalidGridError, UniformGrid1D
from series import SampleSeries
from target import df, f

F3 = 1.74496066  # e^sin(3) * atan(18)


@pytest.fixture
def grid() -> UniformGrid1D:
    return UniformGrid1D(0.0, 3.0, 600)


class TestReferenceGrid:
    def test_reference_configuration(self) -> None:
        grid = reference_grid()
        assert (grid.t0, grid.t1, grid.n_steps) == (0.0, 3.0, 600)
        assert grid.h == pytest.approx(0.005)


class TestDerivativeField:
    def test_ignores_state(self, grid: UniformGrid1D) -> None:
        F = derivative_field(grid)
        assert F(1.0, 0.0) == F(1.0, 123.0) == df(1.0, grid.h)


class TestSimpleSeries:
    def test_starts_at_zero(self, grid: UniformGrid1D) -> None:
        reference = simple_series(grid)
        assert reference[0].y == 0.0
        assert reference[0].y == f(0.0)

    def test_samples_target(self, grid: UniformGrid1D) -> None:
        reference = simple_series(grid)
        for i in (1, 100, 333, 600):
            assert reference[i].y == f(grid.point(i))

    def test_final_value(self, grid: UniformGrid1D) -> None:
        assert simple_series(grid)[600].y == pytest.approx(F3, abs=1e-6)


class TestEulerSeries:
    def test_boundary_condition(self, grid: UniformGrid1D) -> None:
        assert euler_series(grid)[0].y == 0.0

    def test_matches_direct_formula(self, grid: UniformGrid1D) -> None:
        """y_i = y_{i-1} + h * df(t_{i-1}) evaluated by hand."""
        h = grid.h
        expected = [0.0]
        for i in range(1, grid.n_steps + 1):
            expected.append(expected[-1] + h * df((i - 1) * h, h))
        np.testing.assert_array_equal(euler_series(grid).y, np.array(expected))

    def test_telescopes_to_reference(self, grid: UniformGrid1D) -> None:
        """Summed forward differences collapse to f(T) - f(T0)."""
        euler = euler_series(grid)
        reference = simple_series(grid)
        assert euler[600].y == pytest.approx(reference[600].y - reference[0].y, abs=1e-8)


class TestRk4Series:
    def test_boundary_condition(self, grid: UniformGrid1D) -> None:
        rk, err = rk4_series(grid)
        assert rk[0].y == 0.0
        assert err[0].y == 0.0

    def test_matches_direct_formula(self, grid: UniformGrid1D) -> None:
        """Stage formulas re-evaluated by hand agree bit for bit."""
        h = grid.h
        y_prev = 0.0
        expected_rk = [0.0]
        expected_err = [0.0]
        for i in range(1, grid.n_steps + 1):
            x = i * h
            y = y_prev + h / 6 * (df(x, h) + 2 * df(x + h / 2, h) + 2 * df(x + h / 2, h) + df(x + h, h))
            xh = i * h / 2
            y_half = y_prev + h / 12 * (df(xh, h) + 2 * df(xh + h / 2, h) + 2 * df(xh + h / 2, h) + df(xh + h, h))
            expected_rk.append(y)
            expected_err.append(abs(4 * (y_half - y) / 3))
            y_prev = y

        rk, err = rk4_series(grid)
        np.testing.assert_array_equal(rk.y, np.array(expected_rk))
        np.testing.assert_array_equal(err.y, np.array(expected_err))

    def test_error_is_finite_and_non_negative(self, grid: UniformGrid1D) -> None:
        _, err = rk4_series(grid)
        assert np.all(np.isfinite(err.y))
        assert np.all(err.y >= 0.0)

    def test_tracks_reference(self, grid: UniformGrid1D) -> None:
        rk, _ = rk4_series(grid)
        assert rk[600].y == pytest.approx(F3, abs=0.05)


class TestComputeEuler:
    def test_end_to_end(self, grid: UniformGrid1D) -> None:
        result = compute_euler(grid)
        assert set(result) == {"reference", "euler"}
        assert len(result["reference"]) == 601
        assert len(result["euler"]) == 601
        assert math.isfinite(result["euler"][600].y)
        assert math.isfinite(result["reference"][600].y)
        assert result["reference"][600].y == pytest.approx(F3, abs=1e-6)
        assert result["euler"][600].y == pytest.approx(F3, abs=1e-6)

    def test_grid_abscissae(self, grid: UniformGrid1D) -> None:
        for series in compute_euler(grid).values():
            for i in range(len(series)):
                assert series[i].x == i * grid.h
            assert np.all(np.diff(series.x) > 0)

    def test_deterministic(self, grid: UniformGrid1D) -> None:
        first = compute_euler(grid)
        second = compute_euler(UniformGrid1D(0.0, 3.0, 600))
        for key in first:
            assert first[key] == second[key]
            assert first[key].y is not second[key].y


class TestComputeRk4:
    def test_keys_and_lengths(self, grid: UniformGrid1D) -> None:
        result = compute_rk4(grid)
        assert set(result) == {"reference", "rk4", "error"}
        assert all(len(series) == 601 for series in result.values())
        assert all(isinstance(series, SampleSeries) for series in result.values())

    def test_boundary_conditions(self, grid: UniformGrid1D) -> None:
        result = compute_rk4(grid)
        assert result["rk4"][0].y == 0.0
        assert result["error"][0].y == 0.0

    def test_deterministic(self, grid: UniformGrid1D) -> None:
        first = compute_rk4(grid)
        second = compute_rk4(grid)
        for key in first:
            np.testing.assert_array_equal(first[key].x, second[key].x)
            np.testing.assert_array_equal(first[key].y, second[key].y)

    def test_results_are_read_only(self, grid: UniformGrid1D) -> None:
        result = compute_rk4(grid)
        with pytest.raises(ValueError):
            result["rk4"].y[1] = 0.0

    def test_shifted_interval(self) -> None:
        """A non-zero start keeps x = t0 + i*h on every series."""
        grid = UniformGrid1D(1.0, 2.0, 10)
        result = compute_rk4(grid)
        for series in result.values():
            np.testing.assert_array_equal(series.x, grid.points())
        assert result["reference"][0].y == f(1.0)
        assert result["rk4"][0].y == 0.0


class TestDegenerateGrid:
    def test_single_step(self) -> None:
        grid = UniformGrid1D(0.0, 3.0, 1)
        euler = compute_euler(grid)
        rk = compute_rk4(grid)
        assert all(len(series) == 2 for series in euler.values())
        assert all(len(series) == 2 for series in rk.values())
        assert rk["rk4"][1].x == 3.0
        assert math.isfinite(rk["error"][1].y)

    def test_zero_steps_rejected(self) -> None:
        with pytest.raises(InvalidGridError):
            compute_euler(UniformGrid1D(0.0, 3.0, 0))
