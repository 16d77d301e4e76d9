# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""Initial-value problems with closed-form solutions.

Each problem is x' = g(x, t), x(t0) = x0 on some interval starting at t0;
``exact`` evaluates the analytic solution on an array of times.
"""

import numpy as np

from eulerivp.models.base import ODEModel


class ExponentialGrowth(ODEModel):
    """x' = x with x(t0) = C.

    The general solution is the family C e^t; fixing x(t0) selects
    x(t) = C e^(t - t0). ``x0`` is the constant C.
    """

    def __init__(self, x0=1.0, t0=0.0):
        super().__init__(x0=x0, t0=t0)

    def rhs(self, x, t):
        return x

    def exact(self, t):
        return self.x0 * np.exp(np.asarray(t, dtype=float) - self.t0)


class ForcedDecay(ODEModel):
    """x' = -2x + t.

    x(t) = t/2 - 1/4 + (x0 - t0/2 + 1/4) e^(-2 (t - t0))
    """

    def __init__(self, x0=1.0, t0=0.0):
        super().__init__(x0=x0, t0=t0)

    def rhs(self, x, t):
        return -2 * x + t

    def exact(self, t):
        t = np.asarray(t, dtype=float)
        c = self.x0 - self.t0 / 2 + 0.25
        return t / 2 - 0.25 + c * np.exp(-2 * (t - self.t0))


class Quadrature(ODEModel):
    """x' = t. Forward Euler on a state-independent g is a left Riemann sum."""

    def rhs(self, x, t):
        return t

    def exact(self, t):
        t = np.asarray(t, dtype=float)
        return self.x0 + (t**2 - self.t0**2) / 2


class ConstantRate(ODEModel):
    """x' = k. Forward Euler is exact up to rounding."""

    def __init__(self, k=1.0, x0=0.0, t0=0.0):
        super().__init__(x0=x0, t0=t0)
        self.k = k

    def rhs(self, x, t):
        return self.k

    def exact(self, t):
        t = np.asarray(t, dtype=float)
        return self.x0 + self.k * (t - self.t0)


PROBLEMS = {
    "exponential": ExponentialGrowth,
    "forced_decay": ForcedDecay,
    "quadrature": Quadrature,
    "constant": ConstantRate,
}


def make_problem(name, **params):
    """Instantiate a registered problem by name."""
    try:
        cls = PROBLEMS[name]
    except KeyError:
        raise ValueError(
            f"Unknown problem: {name!r} (choose from {sorted(PROBLEMS)})"
        ) from None
    return cls(**params)
