# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

import numpy as np
from numba import njit

from eulerivp.grid import check_time_grid


def euler_step(t_i, x_i, g, h):
    """One forward Euler step: x_{i+1} = x_i + h * g(x_i, t_i)."""
    return x_i + h * g(x_i, t_i)


def euler(g, x0, t):
    """Approximate x(t) for x' = g(x, t), x(t[0]) = x0 with forward Euler.

    The local step h_i = t[i+1] - t[i] is taken from the grid, so
    non-uniform grids are supported.

    Parameters
    ----------
    g : callable(x, t) -> derivative
        Right-hand side. Called once per step, never for a one-point grid.
    x0 : float or array_like
        Initial condition at t[0]. An array gives a system of equations.
    t : array_like, shape (N+1,)
        Strictly increasing time grid.

    Returns
    -------
    x : ndarray, shape (N+1,) + shape(x0)
        Read-only array with x[0] == x0 followed by the N approximations.
    """
    t = check_time_grid(t)
    x0 = np.asarray(x0)
    dtype = np.result_type(x0.dtype, np.float64)

    x = np.empty((t.size,) + x0.shape, dtype=dtype)
    x[0] = x0
    for i in range(t.size - 1):
        h = t[i + 1] - t[i]
        x[i + 1] = euler_step(t[i], x[i], g, h)

    x.flags.writeable = False
    return x


@njit
def euler_impl(g, x0, t):
    """Numba-compiled forward Euler loop for a scalar state."""
    n = t.shape[0]
    x = np.empty(n)
    x[0] = x0
    for i in range(n - 1):
        h = t[i + 1] - t[i]
        x[i + 1] = x[i] + h * g(x[i], t[i])
    return x


def euler_compiled(g, x0, t):
    """Forward Euler with the loop compiled by numba.

    Same contract as ``euler`` restricted to scalar states. ``g`` must be
    a numba ``@njit`` function of (x, t) returning a float.
    """
    t = check_time_grid(t)
    if np.ndim(x0) != 0:
        raise ValueError(f"euler_compiled needs a scalar initial value, got shape {np.shape(x0)}")
    x = euler_impl(g, float(x0), t)
    x.flags.writeable = False
    return x
