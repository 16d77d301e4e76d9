# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT


from abc import ABC, abstractmethod

class ODEModel(ABC):
    def __init__(self, x0=0.0, t0=0.0):
        self.x0 = x0
        self.t0 = t0

    @abstractmethod
    def rhs(self, x, t):
        pass

    def exact(self, t):
        raise NotImplementedError(f"{type(self).__name__} has no closed-form solution")
