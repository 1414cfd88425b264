"""
Project settings (constants + small helpers).
Units: time is an integer count in any unit/origin, coordinates are plain floats.
"""
from __future__ import annotations

import numpy as np

# Run
VALIDATE_ON_IMPORT = False

# Contracts (route length, increasing times, dimensionality, shared segment times).
# Violations raise ValueError; turning this off skips the checks on hot paths.
CHECK_CONTRACTS = True

# Time (exact 64-bit signed integers)
TIME_MIN = int(np.iinfo(np.int64).min)
TIME_MAX = int(np.iinfo(np.int64).max)

# Route
MIN_ROUTE_WAY_POINTS = 2

# Sampling diagnostics
DEFAULT_SAMPLES = 1_001
SAMPLE_TIME_STEP = 1


def validate_settings() -> None:
    if TIME_MIN >= TIME_MAX:
        raise ValueError("TIME_MIN must be < TIME_MAX")
    if MIN_ROUTE_WAY_POINTS < 2:
        raise ValueError("MIN_ROUTE_WAY_POINTS must be >= 2")
    if DEFAULT_SAMPLES < 2:
        raise ValueError("DEFAULT_SAMPLES must be >= 2")
    if SAMPLE_TIME_STEP <= 0:
        raise ValueError("SAMPLE_TIME_STEP must be > 0")


if VALIDATE_ON_IMPORT:
    validate_settings()
