# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

# src/eulerivp/diagnostics.py
import numpy as np


def compare_with_exact(t, x, exact):
    """Compare an approximation against a closed-form solution.

    Args:
        t: time grid, shape (N+1,).
        x: approximation on t, shape (N+1,) or (N+1, ...) for systems.
        exact: callable mapping the time array to the analytic solution,
            or an array of analytic values on t.

    Returns:
        dict with the exact values, the pointwise absolute error and the
        max / final absolute errors as floats.
    """
    t = np.asarray(t, dtype=float)
    x = np.asarray(x)
    x_exact = exact(t) if callable(exact) else np.asarray(exact)

    if x_exact.shape != x.shape:
        raise ValueError(
            f"exact solution shape {x_exact.shape} does not match approximation shape {x.shape}"
        )

    abs_error = np.abs(x - x_exact)
    # Systems: reduce the per-component error to one number per time point
    if abs_error.ndim > 1:
        abs_error = abs_error.reshape(abs_error.shape[0], -1).max(axis=1)

    return {
        "exact": x_exact,
        "abs_error": abs_error,
        "max_error": float(np.max(abs_error)),
        "final_error": float(abs_error[-1]),
    }
