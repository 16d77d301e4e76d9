# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

# src/eulerivp/refinement.py
import logging
from concurrent.futures import ProcessPoolExecutor, as_completed
from eulerivp.models.problems import make_problem
from eulerivp.grid import step_size, uniform_grid
from eulerivp.solvers.euler import euler
from eulerivp.diagnostics import compare_with_exact

logger = logging.getLogger(__name__)


def case_grid(params):
    """Step size and time grid for one case.

    Raises InvalidGridSpecification for a bad N or interval, and
    StepSizeMismatch when params asks for on_mismatch="raise".
    """
    N = params["N"]
    t0 = params.get("t0", 0.0)
    tf = params.get("tf", 1.0)

    h = params.get("h")
    if h is None:
        h = step_size(t0, tf, N)
    t = uniform_grid(t0, tf, N, h, on_mismatch=params.get("on_mismatch", "warn"))
    return h, t


def single_run(params, t=None):
    """Integrate one problem on a uniform grid of N segments.

    Args:
        params: dict with problem, N and optionally t0, tf, x0, h,
            problem_params (extra constructor arguments, e.g. {"k": 2.0})
            and on_mismatch ("warn" or "raise").
        t: time grid already built by case_grid(params); built here if None.

    Returns:
        dict with params, h, t, x and the error diagnostics against the
        problem's closed-form solution.
    """
    t0 = params.get("t0", 0.0)
    tf = params.get("tf", 1.0)

    model_kwargs = dict(params.get("problem_params") or {})
    model_kwargs["t0"] = t0
    if params.get("x0") is not None:
        model_kwargs["x0"] = params["x0"]
    model = make_problem(params["problem"], **model_kwargs)

    if t is None:
        h, t = case_grid(params)
    else:
        h = params.get("h")
        if h is None:
            h = step_size(t0, tf, params["N"])
    x = euler(model.rhs, model.x0, t)

    result = compare_with_exact(t, x, model.exact)
    result["params"] = {
        "problem": params["problem"],
        "N": int(params["N"]),
        "t0": t0,
        "tf": tf,
        "x0": model.x0,
    }
    result["h"] = h
    result["t"] = t
    result["x"] = x

    return result


def build_refinement_grid(problem, N_vals, t0=0.0, tf=1.0, x0=None, h=None,
                          problem_params=None, on_mismatch="warn"):
    """Build list of parameter dicts, one per segment count."""
    grid = []
    for N in N_vals:
        grid.append(dict(
            problem=problem, N=N, t0=t0, tf=tf, x0=x0, h=h,
            problem_params=dict(problem_params or {}),
            on_mismatch=on_mismatch,
        ))
    return grid


def run_refinement(param_list, max_workers=None, progress=True):
    """Run refinement cases in parallel.

    Every grid is built in the calling process before any worker starts,
    so a bad N or a strict step-size mismatch raises here and mismatch
    warnings go to this process's log handlers.

    Args:
        param_list: list of param dicts from build_refinement_grid.
        max_workers: number of parallel processes (None = cpu count).
        progress: show tqdm progress bar if available.

    Returns:
        list of result dicts, in the same order as param_list.
    """
    n = len(param_list)
    grids = [case_grid(params)[1] for params in param_list]
    logger.info("Starting refinement: %d cases, max_workers=%s", n, max_workers)

    # Soft import of tqdm
    tqdm_bar = None
    if progress:
        try:
            from tqdm.auto import tqdm
            tqdm_bar = tqdm(total=n, desc="Refinement", unit="case")
        except ImportError:
            pass

    results = [None] * n

    try:
        with ProcessPoolExecutor(max_workers=max_workers) as pool:
            future_to_index = {}
            for i, (params, t) in enumerate(zip(param_list, grids)):
                future = pool.submit(single_run, params, t)
                future_to_index[future] = i

            for future in as_completed(future_to_index):
                idx = future_to_index[future]
                results[idx] = future.result()
                p = results[idx]["params"]
                logger.debug(
                    "Case %d/%d done: problem=%s N=%s -> max_error=%.3e",
                    idx + 1, n, p["problem"], p["N"], results[idx]["max_error"],
                )
                if tqdm_bar is not None:
                    tqdm_bar.update(1)
    finally:
        if tqdm_bar is not None:
            tqdm_bar.close()

    logger.info("Refinement complete: %d cases finished", n)
    return results
