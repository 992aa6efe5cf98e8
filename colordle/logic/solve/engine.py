#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colordle/logic/solve/engine.py

import math
from typing import List, NamedTuple, Sequence, Tuple

from colordle.core import config as c
from colordle.core.models import Constraint
from colordle.core.scoring import total_squared_error
from colordle.shared.clamping import clamp_rgb
from colordle.shared.logger import log

Point = Tuple[float, float, float]


class SolveResult(NamedTuple):
    rgb: Tuple[int, int, int]
    total_squared_error: float
    start_point: Point


def get_start_points(constraints: Sequence[Constraint]) -> List[Point]:
    """Fixed gray starts followed by the mean of all guess colors."""
    points = [tuple(p) for p in c.FIXED_START_POINTS]
    if constraints:
        n = len(constraints)
        points.append(tuple(sum(cons.guess_rgb[i] for cons in constraints) / n for i in range(3)))
    return points


def _directions(step: float) -> Tuple[Point, ...]:
    return (
        (step, 0, 0), (-step, 0, 0),
        (0, step, 0), (0, -step, 0),
        (0, 0, step), (0, 0, -step),
    )


def coordinate_search(
    start: Point,
    constraints: Sequence[Constraint],
    metric: str = c.DEFAULT_METRIC,
) -> Tuple[Point, float]:
    """
    Greedy coordinate descent from `start` at shrinking step sizes.

    Any neighbor that strictly lowers the error is taken at once and the
    sweep of six directions continues from there; a step size is finished
    once a whole sweep moves nowhere.
    """
    best = clamp_rgb(*start)
    min_error = total_squared_error(best, constraints, metric)

    for step in c.STEP_SIZES:
        improved = True
        while improved:
            improved = False
            for dr, dg, db in _directions(step):
                candidate = clamp_rgb(best[0] + dr, best[1] + dg, best[2] + db)
                error = total_squared_error(candidate, constraints, metric)
                if error < min_error:
                    min_error = error
                    best = candidate
                    improved = True
    return best, min_error


def _round_half_up(v: float) -> int:
    return int(math.floor(v + 0.5))


def solve_detailed(
    constraints: Sequence[Constraint],
    metric: str = c.DEFAULT_METRIC,
) -> SolveResult:
    """Run every start point and keep the lowest-error result (earliest start wins ties)."""
    if not constraints:
        return SolveResult(c.NEUTRAL_RGB, 0.0, tuple(float(v) for v in c.NEUTRAL_RGB))

    overall_best = tuple(float(v) for v in c.NEUTRAL_RGB)
    overall_error = math.inf
    overall_start = overall_best

    for start in get_start_points(constraints):
        point, error = coordinate_search(start, constraints, metric)
        log("debug", f"start {start} -> {tuple(round(v, 2) for v in point)} (error {error:.4f})")
        if error < overall_error:
            overall_best, overall_error, overall_start = point, error, start

    rgb = tuple(_round_half_up(v) for v in overall_best)
    return SolveResult(rgb, overall_error, overall_start)


def solve(constraints: Sequence[Constraint], metric: str = c.DEFAULT_METRIC) -> Tuple[int, int, int]:
    """Best-fit RGB triple for the constraints; (128, 128, 128) when there are none."""
    return solve_detailed(constraints, metric).rgb
