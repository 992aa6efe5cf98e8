#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colordle/logic/compare/renderer.py

from typing import Dict, List

from colordle.core import config as c
from colordle.core.models import CandidateMatch


def format_ranking(matches: List[CandidateMatch]) -> List[str]:
    return [
        f"{i + 1}. {m.name} ({m.hex}) - Avg Score Diff: {m.average_error:.4f}"
        for i, m in enumerate(matches)
    ]


def render_comparison(rankings: Dict[str, List[CandidateMatch]]) -> None:
    """Print one top-N block per metric, separated by a blank line."""
    blocks = []
    for metric, matches in rankings.items():
        label = c.METRIC_LABELS.get(metric, metric)
        blocks.append("\n".join([f"--- Top Candidates ({label}) ---"] + format_ranking(matches)))
    print("\n\n".join(blocks))
