"""Numeric constants shared by the special function evaluators.

All values are fixed at import time and never modified afterwards.
"""

import math

import torch

_FLOAT64 = torch.finfo(torch.float64)

# Machine limits (IEEE double)
DBL_EPSILON: float = _FLOAT64.eps
DBL_MAX: float = _FLOAT64.max
DBL_MIN: float = _FLOAT64.tiny

SQRT_DBL_EPSILON: float = math.sqrt(DBL_EPSILON)
LOG_DBL_EPSILON: float = math.log(DBL_EPSILON)
LOG_DBL_MAX: float = math.log(DBL_MAX)
LOG_DBL_MIN: float = math.log(DBL_MIN)

# Distance within which a parameter counts as an integer, and the loose
# acceptance bound for self-estimated series precision.
NEAR_INTEGER_TOLERANCE: float = 1000.0 * DBL_EPSILON

# Acceptance bound for rational approximations.
PRECISION_TOLERANCE: float = 10.0 * DBL_EPSILON

# |b| below this is treated through the b -> 0 limit form.
VANISHING_B_TOLERANCE: float = 10.0 * NEAR_INTEGER_TOLERANCE

# Rescaling factor for recurrences and rational approximants.
RESCALE_THRESHOLD: float = 1.0e50

# Iteration caps
SERIES_MAX_TERMS: int = 5000
ASYMPTOTIC_MAX_TERMS: int = 200
LUKE_MAX_ITERATIONS: int = 5000
CONTINUED_FRACTION_MAX_ITERATIONS: int = 5000
MAX_RECURRENCE_STEPS: int = 100000

# Kummer reflections allowed along one evaluation path.
MAX_REFLECTION_DEPTH: int = 2

# |x| beyond which the dispatcher considers the asymptotic expansions.
ASYMPTOTIC_ARGUMENT: float = 40.0

# Same, inside the small-a, a = 1 and integer specialisations.
SPECIALISED_ASYMPTOTIC_ARGUMENT: float = 100.0
