#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colordle/shared/database.py

import csv
import os
from typing import Any, List, Optional, Sequence

from colordle.core import config as c
from colordle.core.errors import ColorLookupError, DatabaseError
from colordle.core.models import DatabaseEntry, entry_fields
from .logger import log


def resolve_database_path(path: Optional[str]) -> str:
    """Use the explicit path, else the COLORDLE_DATABASE environment variable."""
    resolved = path or os.environ.get(c.ENV_DATABASE)
    if not resolved:
        raise DatabaseError(f"no color database given; use --database or set {c.ENV_DATABASE}")
    return resolved


def load_database(path: str) -> List[DatabaseEntry]:
    """
    Read a CSV color list with a header row containing 'name' and 'hex'.
    Hex values are kept as written so malformed rows can be ranked last
    instead of rejected here.
    """
    try:
        with open(path, newline="", encoding="utf-8") as fh:
            reader = csv.DictReader(fh)
            fields = [f.strip().lower() for f in (reader.fieldnames or [])]
            if c.DB_NAME_FIELD not in fields or c.DB_HEX_FIELD not in fields:
                raise DatabaseError(f"'{path}' needs '{c.DB_NAME_FIELD}' and '{c.DB_HEX_FIELD}' columns")
            reader.fieldnames = fields

            entries = []
            for row in reader:
                name = (row.get(c.DB_NAME_FIELD) or "").strip()
                hex_code = row.get(c.DB_HEX_FIELD) or ""
                if not name and not hex_code.strip():
                    continue
                entries.append(DatabaseEntry(name, hex_code))
    except OSError as exc:
        raise DatabaseError(f"cannot read color database '{path}': {exc}") from exc

    log("debug", f"loaded {len(entries)} colors from {path}")
    return entries


def search_colors(database: Sequence[Any], query: str, limit: int = c.DEFAULT_SEARCH_LIMIT) -> List[Any]:
    """Entries whose name contains `query` (case-insensitive), in database order, at most `limit`."""
    needle = str(query or "").strip().lower()
    if not needle:
        return []

    found = []
    for entry in database:
        if len(found) >= limit:
            break
        name, _ = entry_fields(entry)
        if needle in str(name or "").lower():
            found.append(entry)
    return found


def find_color(database: Sequence[Any], name: str) -> Any:
    """
    Look up one database entry by name.

    An exact case-insensitive name wins; otherwise the name must be part of
    exactly one entry's name. Raises ColorLookupError when nothing or more
    than one entry fits.
    """
    needle = str(name or "").strip().lower()
    for entry in database:
        entry_name, _ = entry_fields(entry)
        if str(entry_name or "").strip().lower() == needle:
            return entry

    hits = search_colors(database, needle)
    if len(hits) == 1:
        return hits[0]
    if not hits:
        raise ColorLookupError(f"no color named '{name}' in the database")
    names = ", ".join(f"'{entry_fields(entry)[0]}'" for entry in hits)
    raise ColorLookupError(f"'{name}' matches several colors: {names}; use the full name or a hex code")
