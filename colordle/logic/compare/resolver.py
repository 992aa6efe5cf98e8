#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colordle/logic/compare/resolver.py

import argparse
import sys

from colordle.core.errors import ColordleError
from colordle.shared.database import load_database, resolve_database_path
from colordle.shared.logger import log
from colordle.shared.sanitizer import build_constraints
from .engine import compare_metrics, sample_constraints
from .renderer import render_comparison


def resolve_compare_input(args: argparse.Namespace) -> None:
    try:
        database = load_database(resolve_database_path(args.database))
        constraints = build_constraints(args.guess, database) if args.guess else sample_constraints()
    except ColordleError as exc:
        log("error", str(exc))
        sys.exit(2)

    render_comparison(compare_metrics(constraints, database, limit=args.number))
