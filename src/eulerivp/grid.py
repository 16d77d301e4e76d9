# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

import logging
import math
import numbers

import numpy as np

from eulerivp.errors import InvalidGridSpecification, InvalidTimeGrid, StepSizeMismatch

logger = logging.getLogger(__name__)

MISMATCH_POLICIES = ("warn", "raise")

# Relative tolerance when comparing a supplied h against (tf - t0) / N.
H_RTOL = 1e-12


def _segment_count(N):
    """Return N as an int, or raise if it is not a positive integer.

    Integral floats such as 10.0 are accepted; bools are not.
    """
    if isinstance(N, bool) or not isinstance(N, numbers.Real):
        raise InvalidGridSpecification(f"N must be a positive integer, got {N!r}")
    if isinstance(N, numbers.Integral):
        n = int(N)
    elif math.isfinite(N) and float(N).is_integer():
        n = int(N)
    else:
        raise InvalidGridSpecification(f"N must be a positive integer, got {N!r}")
    if n <= 0:
        raise InvalidGridSpecification(f"N must be a positive integer, got {N!r}")
    return n


def step_size(t0, tf, N):
    """Step size h = (tf - t0) / N for N equal segments of [t0, tf]."""
    n = _segment_count(N)
    return (tf - t0) / n


def uniform_grid(t0, tf, N, h, on_mismatch="warn"):
    """Uniform time grid {t0 + i*h | i = 0..N} on [t0, tf].

    ``h`` is passed alongside ``N`` and checked against (tf - t0) / N.
    What happens on disagreement depends on ``on_mismatch``:

    - ``"warn"``: log a warning and build the grid with the supplied h,
      keeping the points t0, t0 + h, ... that do not exceed tf.
    - ``"raise"``: raise ``StepSizeMismatch``.

    When h agrees, the grid has exactly N + 1 points with both endpoints
    reproduced exactly.
    """
    if on_mismatch not in MISMATCH_POLICIES:
        raise ValueError(f"Unknown on_mismatch: {on_mismatch!r}")

    n = _segment_count(N)
    if not tf > t0:
        raise InvalidGridSpecification(f"tf must be greater than t0, got t0={t0!r}, tf={tf!r}")
    if not h > 0:
        raise InvalidGridSpecification(f"h must be positive, got {h!r}")

    expected = (tf - t0) / n
    if math.isclose(h, expected, rel_tol=H_RTOL, abs_tol=0.0):
        return np.linspace(t0, tf, n + 1)

    if on_mismatch == "raise":
        raise StepSizeMismatch(
            f"h={h!r} does not match (tf - t0) / N = {expected!r} for N={n}"
        )

    logger.warning(
        "Step size h=%r does not match (tf - t0)/N=%r (N=%d); using supplied h",
        h, expected, n,
    )
    # Points t0 + i*h not exceeding tf, as a stepped range t0:h:tf would give.
    n_steps = int(math.floor((tf - t0) / h * (1.0 + H_RTOL)))
    t = t0 + h * np.arange(n_steps + 1)
    # A last point within rounding of tf is tf itself, never past it.
    if t[-1] > tf or math.isclose(t[-1], tf, rel_tol=H_RTOL * (n_steps + 1), abs_tol=0.0):
        t[-1] = tf
    return t


def check_time_grid(t):
    """Validate a time grid and return it as a read-only float array view.

    The grid must be one-dimensional, non-empty, finite and strictly
    increasing. The caller's array is never modified.
    """
    try:
        arr = np.asarray(t, dtype=float)
    except (TypeError, ValueError) as exc:
        raise InvalidTimeGrid(f"time grid must be numeric, got {t!r}") from exc

    if arr.ndim != 1:
        raise InvalidTimeGrid(f"time grid must be one-dimensional, got shape {arr.shape}")
    if arr.size == 0:
        raise InvalidTimeGrid("time grid must contain at least one point")
    if not np.all(np.isfinite(arr)):
        raise InvalidTimeGrid("time grid contains non-finite values")

    dt = np.diff(arr)
    if np.any(dt <= 0):
        i = int(np.argmax(dt <= 0))
        raise InvalidTimeGrid(
            f"time grid must be strictly increasing, got t[{i}]={arr[i]!r} "
            f"followed by t[{i + 1}]={arr[i + 1]!r}"
        )

    view = arr.view()
    view.flags.writeable = False
    return view
