#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colordle/logic/hints/resolver.py

import argparse
import sys

from colordle.core.errors import ColordleError
from colordle.shared.database import load_database, resolve_database_path
from colordle.shared.logger import log
from .engine import HintSession
from .renderer import render_hints


def resolve_hints_input(args: argparse.Namespace) -> None:
    """Replay every -G guess against the database and list what is still possible."""
    try:
        database = load_database(resolve_database_path(args.database))
    except ColordleError as exc:
        log("error", str(exc))
        sys.exit(2)

    session = HintSession.start(database)
    for record in args.guess or []:
        session = session.add_guess(record)
        log("debug", f"{record.guess_hex}: {len(session.remaining)} candidates left")

    if not session.remaining:
        log("warning", "no color in the database fits every hint")

    render_hints(session.history, session.remaining, args.number)
