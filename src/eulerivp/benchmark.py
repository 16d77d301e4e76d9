# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""Benchmarking utilities for profiling eulerivp hot paths.

Provides micro-benchmarks (grid construction, the Python and the numba
Euler loops) and a macro-benchmark (full single_run) with timing and
optional cProfile output.
"""

import time
import cProfile
import pstats
import io
import numpy as np
from numba import njit


@njit
def _forced_decay_rhs(x, t):
    return -2.0 * x + t


def _forced_decay_py(x, t):
    return -2.0 * x + t


def _time_fn(fn, args=(), kwargs=None, n_warmup=3, n_iter=100):
    """Time a function over n_iter calls, returning median and stats."""
    kwargs = kwargs or {}
    for _ in range(n_warmup):
        fn(*args, **kwargs)
    times = []
    for _ in range(n_iter):
        t0 = time.perf_counter_ns()
        fn(*args, **kwargs)
        t1 = time.perf_counter_ns()
        times.append((t1 - t0) * 1e-6)  # ms
    times = np.array(times)
    return {
        "median_ms": float(np.median(times)),
        "mean_ms": float(np.mean(times)),
        "std_ms": float(np.std(times)),
        "min_ms": float(np.min(times)),
        "max_ms": float(np.max(times)),
        "n_iter": n_iter,
    }


def bench_uniform_grid(N=1000, n_iter=500):
    """Benchmark uniform_grid."""
    from eulerivp.grid import step_size, uniform_grid
    h = step_size(0.0, 1.0, N)
    return _time_fn(uniform_grid, args=(0.0, 1.0, N, h), n_iter=n_iter)


def bench_euler(N=1000, n_iter=100):
    """Benchmark the pure-Python euler driver."""
    from eulerivp.solvers.euler import euler
    t = np.linspace(0.0, 1.0, N + 1)
    return _time_fn(euler, args=(_forced_decay_py, 1.0, t), n_iter=n_iter)


def bench_euler_compiled(N=1000, n_iter=500):
    """Benchmark the numba-compiled euler driver."""
    from eulerivp.solvers.euler import euler_compiled
    t = np.linspace(0.0, 1.0, N + 1)
    return _time_fn(euler_compiled, args=(_forced_decay_rhs, 1.0, t), n_iter=n_iter)


def bench_single_run(N=1000):
    """Time a full single_run (macro benchmark)."""
    from eulerivp.refinement import single_run
    params = dict(problem="forced_decay", N=N, t0=0.0, tf=1.0)
    t0 = time.perf_counter()
    result = single_run(params)
    elapsed = time.perf_counter() - t0
    return {
        "elapsed_s": elapsed,
        "max_error": result["max_error"],
    }


def profile_single_run(N=10000):
    """Run cProfile on single_run, return stats as string."""
    from eulerivp.refinement import single_run
    params = dict(problem="forced_decay", N=N, t0=0.0, tf=1.0)
    pr = cProfile.Profile()
    pr.enable()
    single_run(params)
    pr.disable()
    s = io.StringIO()
    ps = pstats.Stats(pr, stream=s).sort_stats("cumulative")
    ps.print_stats(30)
    return s.getvalue()


def run_all_benchmarks(N=1000, verbose=True):
    """Run all micro and macro benchmarks. Returns dict of results."""
    results = {}

    benches = [
        ("uniform_grid", bench_uniform_grid),
        ("euler", bench_euler),
        ("euler_compiled", bench_euler_compiled),
    ]

    for name, fn in benches:
        if verbose:
            print(f"  {name}...", end="", flush=True)
        r = fn(N=N)
        results[name] = r
        if verbose:
            print(f" {r['median_ms']:.3f} ms (median, n={r['n_iter']})")

    if verbose:
        print(f"  single_run (N={N})...", end="", flush=True)
    r = bench_single_run(N=N)
    results["single_run"] = r
    if verbose:
        print(f" {r['elapsed_s']:.4f} s")

    return results


if __name__ == "__main__":
    print("=" * 55)
    print("eulerivp Benchmarks")
    print("=" * 55)
    print()

    print("cProfile of single_run (N=10000):")
    print(profile_single_run())

    print("Micro-benchmarks (N=1000):")
    run_all_benchmarks(N=1000)
