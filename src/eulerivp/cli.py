# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""Command-line interface for forward Euler refinement runs."""

import argparse
import os

from eulerivp.models.problems import PROBLEMS
from eulerivp.refinement import build_refinement_grid, run_refinement
from eulerivp.refinement_utils import (
    configure_logging,
    print_summary_table,
    save_refinement_results,
)


def _parse_param(text):
    """Parse a NAME=VALUE problem parameter into (name, float)."""
    name, sep, value = text.partition("=")
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"expected NAME=VALUE, got {text!r}")
    try:
        return name, float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"value of {name!r} must be a number, got {value!r}")


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="eulerivp",
        description="Solve an initial-value problem with forward Euler for several segment counts N.",
    )
    parser.add_argument(
        "--problem", type=str, required=True, choices=sorted(PROBLEMS),
        help="Initial-value problem to integrate",
    )
    parser.add_argument(
        "-N", nargs="+", type=int, required=True,
        help="Segment counts (one run per value)",
    )
    parser.add_argument(
        "--t0", type=float, default=0.0,
        help="Interval start (default: 0.0)",
    )
    parser.add_argument(
        "--tf", type=float, default=1.0,
        help="Interval end (default: 1.0)",
    )
    parser.add_argument(
        "--x0", type=float, default=None,
        help="Initial value x(t0) (default: problem's own)",
    )
    parser.add_argument(
        "--h", type=float, default=None,
        help="Step size to build the grid with (default: (tf - t0)/N)",
    )
    parser.add_argument(
        "--param", action="append", type=_parse_param, default=[],
        metavar="NAME=VALUE",
        help="Extra problem parameter, e.g. k=2.0 for 'constant' (repeatable)",
    )
    parser.add_argument(
        "--strict-step", action="store_true",
        help="Fail instead of warning when h disagrees with (tf - t0)/N",
    )
    parser.add_argument(
        "--workers", type=int, default=None,
        help="Max parallel workers (default: cpu count)",
    )
    parser.add_argument(
        "--outdir", type=str, default="results",
        help="Output directory (default: results/)",
    )

    args = parser.parse_args(argv)

    param_list = build_refinement_grid(
        problem=args.problem,
        N_vals=args.N,
        t0=args.t0,
        tf=args.tf,
        x0=args.x0,
        h=args.h,
        problem_params=dict(args.param),
        on_mismatch="raise" if args.strict_step else "warn",
    )

    print(f"Running {len(param_list)} cases (problem={args.problem}, N={args.N})")
    print(f"Interval: [{args.t0}, {args.tf}], x0={args.x0 if args.x0 is not None else 'default'}")
    print(f"Workers: {args.workers or 'auto'}")
    print()

    configure_logging(args.outdir, "refinement")
    try:
        results = run_refinement(param_list, max_workers=args.workers)
    except ValueError as exc:
        parser.error(str(exc))

    summary_rows = save_refinement_results(results, args.outdir)
    print_summary_table(summary_rows)
    print(f"\nResults saved to {args.outdir}/")
    print(f"Summary: {os.path.join(args.outdir, 'summary.csv')}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
