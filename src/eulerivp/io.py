# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""JSON persistence for run results."""

import json
import numpy as np

# Result keys holding one value per grid point
ARRAY_KEYS = ("t", "x", "exact", "abs_error")


class _NumpyEncoder(json.JSONEncoder):
    def default(self, obj):
        if isinstance(obj, np.ndarray):
            return obj.tolist()
        if isinstance(obj, np.floating):
            return float(obj)
        if isinstance(obj, np.integer):
            return int(obj)
        if isinstance(obj, np.bool_):
            return bool(obj)
        return super().default(obj)


def save_run(result, path):
    """Write a result dict as indented JSON; numpy values become lists/scalars."""
    with open(path, "w") as f:
        json.dump(result, f, cls=_NumpyEncoder, indent=2)


def load_run(path, as_arrays=True):
    """Read a result written by save_run.

    With ``as_arrays`` the per-grid-point entries (t, x, exact, abs_error)
    come back as float ndarrays instead of lists.
    """
    with open(path, "r") as f:
        result = json.load(f)
    if as_arrays:
        for key in ARRAY_KEYS:
            if key in result:
                result[key] = np.asarray(result[key], dtype=float)
    return result
