# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

# tests/test_refinement.py
import logging

import numpy as np
import pytest
from eulerivp.errors import InvalidGridSpecification, StepSizeMismatch
from eulerivp.refinement import case_grid, single_run, build_refinement_grid, run_refinement


def test_single_run_returns_result():
    """A single run should return a dict with expected keys."""
    result = single_run(dict(problem="forced_decay", N=10))
    for key in ("params", "h", "t", "x", "exact", "abs_error", "max_error", "final_error"):
        assert key in result
    assert result["params"]["problem"] == "forced_decay"
    assert result["params"]["N"] == 10
    assert result["params"]["x0"] == 1.0
    assert result["h"] == 0.1
    assert len(result["t"]) == 11
    assert len(result["x"]) == 11


def test_single_run_overrides_initial_value():
    result = single_run(dict(problem="exponential", N=4, x0=5.0, tf=2.0))
    assert result["x"][0] == 5.0
    assert result["exact"][0] == 5.0
    assert np.isclose(result["t"][-1], 2.0)


def test_single_run_problem_params():
    """Constant rate is integrated exactly."""
    result = single_run(dict(problem="constant", N=8, problem_params={"k": -3.0}))
    assert result["max_error"] < 1e-12
    assert np.isclose(result["x"][-1], -3.0)


def test_single_run_quadrature_error():
    result = single_run(dict(problem="quadrature", N=20))
    assert np.isclose(result["final_error"], 0.025)


def test_single_run_supplied_h_mismatch():
    result = single_run(dict(problem="quadrature", N=10, h=0.25))
    assert np.allclose(result["t"], [0.0, 0.25, 0.5, 0.75, 1.0])

    with pytest.raises(StepSizeMismatch):
        single_run(dict(problem="quadrature", N=10, h=0.25, on_mismatch="raise"))


def test_single_run_rejects_bad_N():
    with pytest.raises(InvalidGridSpecification):
        single_run(dict(problem="quadrature", N=0))


def test_build_refinement_grid():
    """One params dict per segment count."""
    grid = build_refinement_grid("forced_decay", [10, 20, 40], tf=2.0,
                                 problem_params={"x0": 3.0})
    assert len(grid) == 3
    assert [p["N"] for p in grid] == [10, 20, 40]
    assert all(p["tf"] == 2.0 for p in grid)
    assert all(p["problem"] == "forced_decay" for p in grid)
    grid[0]["problem_params"]["x0"] = 0.0
    assert grid[1]["problem_params"]["x0"] == 3.0


def test_run_refinement_parallel():
    """run_refinement with max_workers=2 should match serial single_run."""
    param_list = build_refinement_grid("forced_decay", [5, 10])
    results = run_refinement(param_list, max_workers=2)

    assert len(results) == 2
    for params, parallel_result in zip(param_list, results):
        serial_result = single_run(params)
        assert parallel_result["params"] == serial_result["params"]
        assert np.array_equal(parallel_result["x"], serial_result["x"])
        assert parallel_result["max_error"] == serial_result["max_error"]


def test_error_shrinks_with_refinement():
    results = [single_run(p) for p in build_refinement_grid("forced_decay", [10, 20, 40, 80])]
    errors = [r["max_error"] for r in results]
    assert all(a > b for a, b in zip(errors, errors[1:]))


def test_run_refinement_rejects_bad_case_before_running():
    """A bad N anywhere in the list fails in the caller, with no results."""
    param_list = build_refinement_grid("quadrature", [10, 0])
    with pytest.raises(InvalidGridSpecification):
        run_refinement(param_list, max_workers=1, progress=False)


def test_run_refinement_strict_mismatch_raises_in_caller():
    param_list = build_refinement_grid("quadrature", [10], h=0.3, on_mismatch="raise")
    with pytest.raises(StepSizeMismatch):
        run_refinement(param_list, max_workers=1, progress=False)


def test_run_refinement_logs_mismatch_in_caller(caplog):
    param_list = build_refinement_grid("quadrature", [10], h=0.25)
    with caplog.at_level(logging.WARNING, logger="eulerivp.grid"):
        results = run_refinement(param_list, max_workers=1, progress=False)
    assert any("does not match" in m for m in caplog.messages)
    assert np.allclose(results[0]["t"], [0.0, 0.25, 0.5, 0.75, 1.0])
    assert results[0]["h"] == 0.25


def test_single_run_with_prebuilt_grid():
    params = dict(problem="forced_decay", N=10)
    h, t = case_grid(params)
    assert h == 0.1
    assert np.array_equal(single_run(params, t)["x"], single_run(params)["x"])
