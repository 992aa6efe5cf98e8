#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colordle/logic/solve/resolver.py

import argparse
import sys

from colordle.core.errors import ColordleError
from colordle.shared.database import load_database
from colordle.shared.logger import log
from colordle.shared.sanitizer import build_constraints
from colordle.logic.match.engine import find_best_matches
from colordle.logic.match.renderer import render_constraints, render_matches
from .engine import solve_detailed
from .renderer import render_solution


def resolve_solve_input(args: argparse.Namespace) -> None:
    """Search the RGB cube for the best fit, then list the nearest named colors if a database is given."""
    try:
        database = load_database(args.database) if args.database else None
        constraints = build_constraints(args.guess or [], database)
    except ColordleError as exc:
        log("error", str(exc))
        sys.exit(2)

    if not constraints:
        log("warning", "no scores given; returning the neutral midpoint")

    print()
    render_constraints(constraints)
    result = solve_detailed(constraints, metric=args.distance_metric)
    render_solution(result, len(constraints))

    if database is None or not constraints:
        return

    log("info", "best matching database colors")
    matches = find_best_matches(constraints, database, limit=args.number, metric=args.distance_metric)
    render_matches(matches)
