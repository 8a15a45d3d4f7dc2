"""
Entries & Options (Data Model)
==============================
Plain data for the list editor and the pure functions that derive the
visible view from it.

Why is this file needed?
------------------------
1. Derivation: the filtered/paginated view is computed here, from the raw
   entries and the current options, and never stored anywhere.
2. Coercion: page size arrives as user-facing numeric text and is normalised
   here, so the Coordinator and the widgets agree on the rules.

Classes:
    Options: The committed filter term, page size and header flag.

Functions:
    derive_view: Filter-then-truncate the raw entries.
    coerce_page_size: Turn numeric text into a page size.
    remove_first: Drop the first occurrence of a value.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from typing import Iterable, Sequence

from entrylist.config import DEFAULT_FILTER, DEFAULT_PAGE_SIZE, DEFAULT_SHOW_HEADER

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Options:
    """Committed view options. Replaced as a whole on every commit."""
    filter: str = DEFAULT_FILTER
    page_size: int = DEFAULT_PAGE_SIZE
    show_header: bool = DEFAULT_SHOW_HEADER

    def with_filter(self, term: str) -> Options:
        return replace(self, filter=term)

    def with_page_size(self, n: int) -> Options:
        return replace(self, page_size=n)

    def with_show_header(self, flag: bool) -> Options:
        return replace(self, show_header=flag)


def matches(entry: str, term: str) -> bool:
    """Case-insensitive substring test used by the filter."""
    return term.lower() in entry.lower()


def derive_view(entries: Iterable[str], options: Options) -> list[str]:
    """
    Filter-then-truncate.

    Keeps entries containing ``options.filter`` (case-insensitive), in their
    original order, then takes at most ``options.page_size`` of them.
    A page size of 0 or less yields an empty list.
    """
    filtered = [e for e in entries if matches(e, options.filter)]
    return filtered[:max(0, options.page_size)]


def coerce_page_size(value: int | float | str | None) -> int:
    """
    Convert user-facing numeric input into a page size.

    Anything that is not a number becomes 0. No clamping is done here;
    the spin box bounds are advisory only.
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else 0

    text = str(value).strip()
    if not text:
        return 0
    try:
        return int(text)
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        logger.debug("Non-numeric page size %r coerced to 0", value)
        return 0
    return coerce_page_size(number)


def remove_first(entries: Sequence[str], name: str) -> list[str]:
    """
    Return a copy of ``entries`` without the first occurrence of ``name``.

    Matching is by value, scanning from the start. If ``name`` is absent the
    copy is returned unchanged.
    """
    result = list(entries)
    try:
        result.remove(name)
    except ValueError:
        logger.debug("Entry %r not present, nothing removed", name)
    return result
