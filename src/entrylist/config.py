"""
Configuration & Defaults
========================
This module serves as the central registry for default values and global
constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (page size bounds, seed entries)
   from being scattered throughout the widgets and the state.
2. Deployment: Logging can be tuned per environment without touching code,
   through ENTRYLIST_LOG_LEVEL and ENTRYLIST_LOG_FILE.

Exports:
    SEED_ENTRIES (tuple[str, ...]): Entries present when the Coordinator starts.
    DEFAULT_PAGE_SIZE (int): Initial committed page size.
    PAGE_SIZE_MIN, PAGE_SIZE_MAX (int): Advisory bounds of the page size input.
    LOG_LEVEL (int): Level passed to setup_logging() by the entry point.
    LOG_FILE (str | None): Optional log file path.
"""
import logging
import os
from typing import Optional

# Application identity
ORG_ID = "entrylist"
APP_ID = "entrylist"
VISIBLE_APP_NAME = "Entry List"

# Canonical state defaults
DEFAULT_FILTER: str = ""
DEFAULT_PAGE_SIZE: int = 10
DEFAULT_SHOW_HEADER: bool = True
SEED_ENTRIES: tuple[str, ...] = ("loan", "otravaliev", "mani", "ecok")

# Page size input bounds (widget only, not enforced on commit)
PAGE_SIZE_MIN: int = 0
PAGE_SIZE_MAX: int = 20


def get_log_level(default: int = logging.INFO) -> int:
    """
    Resolve ENTRYLIST_LOG_LEVEL ("DEBUG", "info", "10", ...) to a logging level.
    Unknown values fall back to ``default``.
    """
    raw = os.environ.get("ENTRYLIST_LOG_LEVEL", "").strip()
    if not raw:
        return default
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    return level if isinstance(level, int) else default


LOG_LEVEL: int = get_log_level()
LOG_FILE: Optional[str] = os.environ.get("ENTRYLIST_LOG_FILE") or None
