from __future__ import annotations

import logging
from typing import Iterable

from PySide6.QtCore import QObject, Signal

from entrylist.config import SEED_ENTRIES
from entrylist.model.entries import Options, coerce_page_size, derive_view, remove_first

logger = logging.getLogger(__name__)


class Coordinator(QObject):
    """
    Central state store with one signal per slice of state.

    Owns the committed options and the raw entries. Widgets never touch these
    directly; they get the five commit callbacks and subscribe to the signals
    of the slices they actually read.

    The window only listens to ``view_changed`` and
    ``header_visibility_changed``. The per-option and ``entries_changed``
    signals are there for instrumentation and for any future region that
    reads one of those slices on its own (a status bar showing the raw
    entry count, for example).
    """
    filter_changed = Signal(str)
    page_size_changed = Signal(int)
    header_visibility_changed = Signal(bool)
    options_changed = Signal(object)
    entries_changed = Signal(object)

    # Fired once per mutation the derived list depends on, with the fresh view
    view_changed = Signal(object)

    def __init__(
        self,
        entries: Iterable[str] | None = None,
        options: Options | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._options = options or Options()
        self._entries: list[str] = list(SEED_ENTRIES if entries is None else entries)

    # ---- read side ----

    @property
    def options(self) -> Options:
        return self._options

    @property
    def entries(self) -> tuple[str, ...]:
        return tuple(self._entries)

    def derived_list(self) -> list[str]:
        """Filtered and paginated view, recomputed on every call."""
        return derive_view(self._entries, self._options)

    # ---- commit callbacks ----

    def set_filter(self, term: str) -> None:
        self._options = self._options.with_filter(term)
        logger.debug("Filter committed: %r", term)
        self.filter_changed.emit(term)
        self._options_committed()
        self._emit_view()

    def set_page_size(self, n: int | str) -> None:
        size = coerce_page_size(n)
        self._options = self._options.with_page_size(size)
        logger.debug("Page size committed: %d (from %r)", size, n)
        self.page_size_changed.emit(size)
        self._options_committed()
        self._emit_view()

    def set_show_header(self, flag: bool) -> None:
        flag = bool(flag)
        self._options = self._options.with_show_header(flag)
        logger.debug("Header visibility committed: %s", flag)
        self.header_visibility_changed.emit(flag)
        self._options_committed()

    def add_entry(self, name: str) -> None:
        self._entries.append(name)
        logger.debug("Entry added: %r", name)
        self.entries_changed.emit(self.entries)
        self._emit_view()

    def remove_entry(self, name: str) -> None:
        remaining = remove_first(self._entries, name)
        if len(remaining) == len(self._entries):
            # absent value, state untouched and nothing to redraw
            return
        self._entries = remaining
        logger.debug("Entry removed: %r", name)
        self.entries_changed.emit(self.entries)
        self._emit_view()

    # ---- helpers ----

    def _options_committed(self) -> None:
        self.options_changed.emit(self._options)

    def _emit_view(self) -> None:
        self.view_changed.emit(self.derived_list())
