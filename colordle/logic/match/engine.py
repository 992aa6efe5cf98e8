#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colordle/logic/match/engine.py

import math
from typing import Any, List, Sequence

from colordle.core import config as c
from colordle.core.errors import InvalidHexError
from colordle.core.models import CandidateMatch, Color, Constraint, entry_fields
from colordle.core.scoring import total_squared_error
from colordle.shared.logger import log


def score_database(
    constraints: Sequence[Constraint],
    database: Sequence[Any],
    metric: str = c.DEFAULT_METRIC,
) -> List[CandidateMatch]:
    """
    Score every database row against the constraints, in database order.

    Rows whose hex cannot be parsed get an infinite error instead of
    aborting the search.
    """
    scored = []
    for entry in database:
        name, hex_code = entry_fields(entry)
        try:
            color = Color(name, hex_code)
        except InvalidHexError:
            log("debug", f"skipping unparseable hex for '{name}': {hex_code!r}")
            scored.append(CandidateMatch.from_error(entry, None, math.inf, len(constraints)))
            continue
        total = total_squared_error(color.rgb, constraints, metric)
        scored.append(CandidateMatch.from_error(entry, color, total, len(constraints)))
    return scored


def find_best_matches(
    constraints: Sequence[Constraint],
    database: Sequence[Any],
    limit: int = c.DEFAULT_MATCH_LIMIT,
    metric: str = c.DEFAULT_METRIC,
) -> List[CandidateMatch]:
    """Rank database rows by total squared error, best first, keeping `limit` of them."""
    if not constraints or limit <= 0:
        return []

    scored = score_database(constraints, database, metric)
    # sorted() is stable: equal errors keep database order
    ranked = sorted(scored, key=lambda match: match.total_squared_error)
    return ranked[:limit]
