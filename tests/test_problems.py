# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

import numpy as np
import pytest
from eulerivp.models.base import ODEModel
from eulerivp.models.problems import (
    PROBLEMS,
    ConstantRate,
    ExponentialGrowth,
    ForcedDecay,
    Quadrature,
    make_problem,
)


@pytest.mark.parametrize("name", sorted(PROBLEMS))
def test_exact_satisfies_initial_condition(name):
    model = make_problem(name, x0=0.7, t0=0.2)
    assert np.isclose(model.exact(np.array([0.2]))[0], 0.7)


@pytest.mark.parametrize("name", sorted(PROBLEMS))
def test_exact_satisfies_ode(name):
    """Central difference of the exact solution should match rhs."""
    model = make_problem(name, x0=1.3, t0=0.0)
    t = np.linspace(0.1, 0.9, 9)
    eps = 1e-6
    dxdt = (model.exact(t + eps) - model.exact(t - eps)) / (2 * eps)
    rhs = np.array([model.rhs(x, ti) for x, ti in zip(model.exact(t), t)])
    assert np.allclose(dxdt, rhs, rtol=1e-6, atol=1e-8)


def test_exponential_particular_solution():
    """x' = x with x(0) = 5 gives 5 e^t."""
    model = ExponentialGrowth(x0=5.0)
    t = np.linspace(0.0, 2.0, 5)
    assert np.allclose(model.exact(t), 5.0 * np.exp(t))


def test_forced_decay_defaults():
    model = ForcedDecay()
    assert model.x0 == 1.0
    assert model.t0 == 0.0
    assert np.isclose(model.exact(0.0), 1.0)


def test_quadrature_is_half_t_squared():
    model = Quadrature()
    t = np.linspace(0.0, 1.0, 11)
    assert np.allclose(model.exact(t), t**2 / 2)


def test_constant_rate_parameter():
    model = make_problem("constant", k=3.0, x0=1.0)
    assert isinstance(model, ConstantRate)
    assert model.rhs(123.0, 4.0) == 3.0
    assert np.isclose(model.exact(2.0), 7.0)


def test_base_model_has_no_exact_solution():
    class Logistic(ODEModel):
        def rhs(self, x, t):
            return x * (1 - x)

    with pytest.raises(NotImplementedError):
        Logistic(x0=0.1).exact(1.0)


def test_base_model_is_abstract():
    with pytest.raises(TypeError):
        ODEModel()
