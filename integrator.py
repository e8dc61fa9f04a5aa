import numpy as np
from mesh import UniformGrid1D
from rungekutta import rk_scheme, RungeKuttaMethod
from series import SampleSeries
from target import f, df

# reference configuration
start_time = 0.0
final_time = 3.0
n_steps = 600

def reference_grid():
    return UniformGrid1D(start_time, final_time, n_steps)

def derivative_field(grid):
    """Right-hand side F(t, y) = df(t) with the grid step baked in."""
    h = grid.h
    def F(t, y):
        return df(t, h)
    return F

def simple_series(grid):
    """Reference curve: f sampled directly on the grid."""
    x = grid.points()
    y = np.array([f(t) for t in x])
    return SampleSeries(x, y)

def euler_series(grid):
    """
    Explicit Euler integration of the forward-difference derivative.

    y_0 = 0, y_i = y_{i-1} + h * df(t_{i-1}).
    """
    A, b, c, scale = rk_scheme(1)
    stepper = RungeKuttaMethod(A, b, c, scale)
    F = derivative_field(grid)
    h = grid.h

    y = np.zeros(grid.n_steps + 1)
    for i in range(1, grid.n_steps + 1):
        y[i] = stepper.step(F, y[i - 1], h, grid.point(i - 1))
    return SampleSeries(grid.points(), y)

def rk4_series(grid):
    """
    Classical RK4 with a step-doubling error estimate.

    Step i places its stages around t_i (not t_{i-1}) with nodes
    0, h/2, h/2, h. The comparison pass reuses y_{i-1} and the same stage
    offsets and derivative step h, but is centred on the halved abscissa
    t0 + i*h/2 and weighted with h/2:

        y_i    = y_{i-1} + h/6  * (k1 + 2 k2 + 2 k3 + k4)      at t_i
        y_half = y_{i-1} + h/12 * (k1 + 2 k2 + 2 k3 + k4)      at t0 + i*h/2
        err_i  = |4 (y_half - y_i) / 3|

    Returns:
        (rk, err) SampleSeries
    """
    A, b, c, scale = rk_scheme(4)
    stepper = RungeKuttaMethod(A, b, c, scale)
    F = derivative_field(grid)
    h = grid.h

    y = np.zeros(grid.n_steps + 1)
    eps = np.zeros(grid.n_steps + 1)
    for i in range(1, grid.n_steps + 1):
        y[i] = stepper.step(F, y[i - 1], h, grid.point(i))
        t_half = grid.t0 + i * h / 2
        y_half = stepper.step(F, y[i - 1], h / 2, t_half, node_step=h)
        eps[i] = abs(4 * (y_half - y[i]) / 3)

    x = grid.points()
    return SampleSeries(x, y), SampleSeries(x, eps)

def compute_euler(grid):
    return {
        "reference": simple_series(grid),
        "euler": euler_series(grid),
    }

def compute_rk4(grid):
    rk, err = rk4_series(grid)
    return {
        "reference": simple_series(grid),
        "rk4": rk,
        "error": err,
    }
