from __future__ import annotations
import argparse, sys, time
from typing import Optional, List
import numpy as np
from integrator import start_time, final_time, n_steps, compute_euler, compute_rk4
from mesh import UniformGrid1D, InvalidGridError
from helpers import print_series, show_euler, show_rk4

# Hyperparameters output
plot_dir = "./plots"
error_points = 100

def run(method: str, t0: float, t1: float, steps: int, plot: bool = True,
        out_dir: str = plot_dir, n_error: int = error_points, dump: bool = False)->int:
    try: grid=UniformGrid1D(t0, t1, steps)
    except InvalidGridError as e: sys.stderr.write(f"[ERR] Grid error: {e}\n"); return 1

    print(f"Running experiment: method={method}, t=[{grid.t0}, {grid.t1}], N={grid.n_steps}, h={grid.h}.")
    start=time.perf_counter()
    if method == "euler":
        result=compute_euler(grid)
        approx=result["euler"]
    else:
        result=compute_rk4(grid)
        approx=result["rk4"]
    end=time.perf_counter()

    reference=result["reference"]
    print(f"[OK] points={len(approx)} elapsed={end - start:.4f}s")
    print(f"[OK] final reference={reference.y[-1]:.10f} {method}={approx.y[-1]:.10f}")
    if "error" in result:
        err=result["error"]
        k=int(np.argmax(err.y))
        print(f"[OK] max error estimate={err.y[k]:.3e} at x={err.x[k]:.4f}")

    if dump:
        for name, series in result.items():
            print_series(name, series)
    if plot:
        if method == "euler": show_euler(result, out_dir)
        else: show_rk4(result, out_dir, n_error)
    return 0

def main(argv: Optional[List[str]] = None)->int:
    parser = argparse.ArgumentParser(prog="ode-compare", description="Euler / RK4 integration of e^sin(x)*atan(2x^2)")
    parser.add_argument("method", choices=["euler", "rk4"])
    parser.add_argument("--t0", type=float, default=start_time)
    parser.add_argument("--t1", type=float, default=final_time)
    parser.add_argument("--steps", type=int, default=n_steps)
    parser.add_argument("--plot-dir", default=plot_dir)
    parser.add_argument("--error-points", type=int, default=error_points)
    parser.add_argument("--no-plot", action="store_true")
    parser.add_argument("--dump", action="store_true", help="print the computed series")
    args = parser.parse_args(argv)
    return run(args.method, args.t0, args.t1, args.steps, plot=not args.no_plot,
               out_dir=args.plot_dir, n_error=args.error_points, dump=args.dump)

if __name__ == "__main__":
    raise SystemExit(main())
