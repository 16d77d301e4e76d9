# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

from eulerivp.solvers.euler import euler, euler_step


class ForwardEuler:
    def __init__(self, model, dt):
        if not dt > 0:
            raise ValueError(f"dt must be positive, got {dt!r}")
        self.model = model
        self.dt = dt

    def step(self, x, t):
        return euler_step(t, x, self.model.rhs, self.dt)

    def integrate(self, x0, t):
        """Fold ``step`` over the grid ``t``; the grid sets the step sizes, not dt."""
        return euler(self.model.rhs, x0, t)
