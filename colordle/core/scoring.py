#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colordle/core/scoring.py

import math
from typing import Sequence, Tuple

from . import config as c
from . import conversions as conv
from .difference import get_metric
from .errors import EmptyConstraintsError
from .models import Constraint


def total_squared_error(
    candidate_rgb: Tuple[float, float, float],
    constraints: Sequence[Constraint],
    metric: str = c.DEFAULT_METRIC,
) -> float:
    """Sum of (predicted score - reported score)^2 over all constraints."""
    distance = get_metric(metric)
    candidate_lab = conv.rgb_to_lab(*candidate_rgb)

    total = 0.0
    for constraint in constraints:
        predicted = c.SCORE_MAX - distance(candidate_lab, constraint.guess_lab)
        total += (predicted - constraint.reported_score) ** c.EXP_2
    return total


def score_candidate(
    candidate_rgb: Tuple[float, float, float],
    constraints: Sequence[Constraint],
    metric: str = c.DEFAULT_METRIC,
) -> Tuple[float, float]:
    """Return (total squared error, root-mean-square error) for a candidate color."""
    if not constraints:
        raise EmptyConstraintsError("cannot score a candidate against zero constraints")
    total = total_squared_error(candidate_rgb, constraints, metric)
    return total, math.sqrt(total / len(constraints))
