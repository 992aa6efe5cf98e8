#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colordle/logic/match/resolver.py

import argparse
import sys

from colordle.core.errors import ColordleError
from colordle.shared.database import load_database, resolve_database_path
from colordle.shared.logger import log
from colordle.shared.sanitizer import build_constraints
from .engine import find_best_matches
from .renderer import render_constraints, render_matches


def resolve_match_input(args: argparse.Namespace) -> None:
    """Load the database, rank it against the given scores, and print the result."""
    if not args.guess:
        log("error", "at least one score is required, e.g. -g cyan:47.69 or -g 34546D:96.35")
        sys.exit(2)

    try:
        database = load_database(resolve_database_path(args.database))
        constraints = build_constraints(args.guess, database)
        matches = find_best_matches(constraints, database, limit=args.number, metric=args.distance_metric)
    except ColordleError as exc:
        log("error", str(exc))
        sys.exit(2)

    print()
    render_constraints(constraints)

    if not matches:
        log("info", "the color database is empty")
        return
    render_matches(matches)
