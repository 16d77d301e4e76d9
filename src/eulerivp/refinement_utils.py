# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""Shared utilities for refinement runs: save/load results, logging, summary tables."""

import csv
import logging
import os

from eulerivp.io import save_run

SUMMARY_FIELDS = ("problem", "N", "h", "max_error", "final_error")


def save_refinement_results(results, outdir):
    """Save per-case JSON files (case<index>_<problem>_N<N>.json) and a summary CSV.

    Args:
        results: list of result dicts from single_run.
        outdir: output directory path.

    Returns:
        list of summary row dicts.
    """
    os.makedirs(outdir, exist_ok=True)
    summary_rows = []

    for i, r in enumerate(results):
        p = r["params"]
        fname = f"case{i:03d}_{p['problem']}_N{p['N']}.json"
        save_run(r, os.path.join(outdir, fname))

        summary_rows.append({
            "problem": p["problem"],
            "N": p["N"],
            "h": r["h"],
            "max_error": r["max_error"],
            "final_error": r["final_error"],
        })

    # Write summary CSV
    if summary_rows:
        csv_path = os.path.join(outdir, "summary.csv")
        with open(csv_path, "w", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=SUMMARY_FIELDS)
            writer.writeheader()
            writer.writerows(summary_rows)

    return summary_rows


def load_summary(csv_path):
    """Read a summary CSV into a list of dicts with proper types.

    N is converted to int; h, max_error and final_error to float.
    """
    rows = []
    with open(csv_path, "r") as f:
        reader = csv.DictReader(f)
        for row in reader:
            typed = {}
            for k, v in row.items():
                if k == "N":
                    typed[k] = int(float(v))
                elif k in ("h", "max_error", "final_error"):
                    typed[k] = float(v)
                else:
                    typed[k] = v
            rows.append(typed)
    return rows


def configure_logging(outdir, run_name):
    """Set up file + console logging on the 'eulerivp' logger.

    Args:
        outdir: directory for the log file.
        run_name: used in the log filename.

    Returns:
        the configured logger.
    """
    os.makedirs(outdir, exist_ok=True)
    logger = logging.getLogger("eulerivp")
    logger.setLevel(logging.INFO)

    fmt = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")

    log_path = os.path.join(outdir, f"{run_name}.log")
    fh = logging.FileHandler(log_path)
    fh.setLevel(logging.INFO)
    fh.setFormatter(fmt)
    logger.addHandler(fh)

    # Console handler (only if none already exists)
    if not any(isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
               for h in logger.handlers):
        ch = logging.StreamHandler()
        ch.setLevel(logging.INFO)
        ch.setFormatter(fmt)
        logger.addHandler(ch)

    return logger


def print_summary_table(summary_rows):
    """Print a formatted summary table to stdout."""
    header = f"{'problem':>14} {'N':>8} {'h':>12} {'max_error':>12} {'final_error':>12}"
    print(header)
    print("-" * len(header))
    for row in summary_rows:
        print(
            f"{row['problem']:>14} {row['N']:>8d} {row['h']:>12.6g} "
            f"{row['max_error']:>12.4e} {row['final_error']:>12.4e}"
        )
