#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colordle/logic/compare/engine.py

import math
from typing import Any, Dict, List, Sequence

from colordle.core import config as c
from colordle.core.difference import DISTANCE_METRICS
from colordle.core.models import CandidateMatch, Constraint
from colordle.logic.match.engine import score_database


def sample_constraints() -> List[Constraint]:
    """The fixed constraint set the comparison report uses by default."""
    return [Constraint.from_hex(hex_code, score, name) for name, hex_code, score in c.SAMPLE_CONSTRAINTS]


def rank_by_metric(
    constraints: Sequence[Constraint],
    database: Sequence[Any],
    metric: str,
    limit: int = c.DEFAULT_REPORT_LIMIT,
) -> List[CandidateMatch]:
    """Top `limit` valid rows under one metric; unparseable rows are left out."""
    if not constraints or limit <= 0:
        return []
    scored = [m for m in score_database(constraints, database, metric) if math.isfinite(m.total_squared_error)]
    return sorted(scored, key=lambda match: match.total_squared_error)[:limit]


def compare_metrics(
    constraints: Sequence[Constraint],
    database: Sequence[Any],
    limit: int = c.DEFAULT_REPORT_LIMIT,
) -> Dict[str, List[CandidateMatch]]:
    return {metric: rank_by_metric(constraints, database, metric, limit) for metric in DISTANCE_METRICS}
