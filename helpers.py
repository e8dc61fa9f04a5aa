import numpy as np
import matplotlib.pyplot as plt
import os

def print_series(name, series):
    print(f"\n{name}: n={len(series)}")
    with np.printoptions(precision=6, suppress=True, threshold=20):
        print(np.column_stack((series.x, series.y)))

def _save(fig, path):
    save_dir = os.path.dirname(path)
    if save_dir:
        os.makedirs(save_dir, exist_ok=True)
    fig.savefig(path, dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"Saved {path}")
    return path

def plot_method(reference, approx, title, label, path):
    """Draw the reference curve and one approximation on the same axes."""
    fig, ax = plt.subplots(figsize=(8, 6))

    ax.plot(reference.x, reference.y, label="Original")
    ax.plot(approx.x, approx.y, label=label)

    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.set_title(title)
    ax.grid(True, ls="--", alpha=0.5)
    ax.legend()

    return _save(fig, path)

def plot_error(error, path, limit=100):
    """Draw the RK4 error estimate, only the first limit + 1 samples."""
    n = min(limit + 1, len(error))
    fig, ax = plt.subplots(figsize=(8, 6))

    ax.plot(error.x[:n], error.y[:n], label="Error estimate")

    ax.set_xlabel("x")
    ax.set_ylabel("error")
    ax.set_title("Runge error estimate")
    ax.grid(True, ls="--", alpha=0.5)
    ax.legend()

    return _save(fig, path)

def show_euler(result, plot_dir="./plots"):
    return [plot_method(result["reference"], result["euler"], "Euler method", "Euler method",
                        os.path.join(plot_dir, "euler.png"))]

def show_rk4(result, plot_dir="./plots", error_points=100):
    return [
        plot_method(result["reference"], result["rk4"], "Runge-Kutta method", "Runge-Kutta method",
                    os.path.join(plot_dir, "rk4.png")),
        plot_error(result["error"], os.path.join(plot_dir, "rk4_error.png"), limit=error_points),
    ]
