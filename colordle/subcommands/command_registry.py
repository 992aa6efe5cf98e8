#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colordle/subcommands/command_registry.py

from . import (
    match,
    solve,
    hints,
    compare,
)

SUBCOMMANDS = {
    'match': match,
    'solve': solve,
    'hints': hints,
    'compare': compare,
}
