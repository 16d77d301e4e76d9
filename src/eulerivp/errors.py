# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""Error kinds raised by the grid builders and the Euler driver."""


class InvalidGridSpecification(ValueError):
    """Segment count, interval or step size cannot describe a uniform grid."""


class StepSizeMismatch(ValueError):
    """Supplied step size disagrees with (tf - t0) / N."""


class InvalidTimeGrid(ValueError):
    """Time grid is empty, non-finite, not 1-D or not strictly increasing."""
