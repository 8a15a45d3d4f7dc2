from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QFrame, QVBoxLayout, QWidget


class RenderBoundary(QFrame):
    """
    Wraps one widget and marks it as an isolated update domain.

    Whoever owns the content re-evaluates it through ``evaluate``; the
    boundary counts those passes and emits ``rendered`` after each one, so
    tests (or a debug overlay) can tell which regions were redrawn by a
    given state transition. It holds no application state itself.
    """
    rendered = Signal(int)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._content: QWidget | None = None
        self._render_count = 0

        self._layout = QVBoxLayout(self)
        self._layout.setContentsMargins(0, 0, 0, 0)

    @property
    def content(self) -> QWidget | None:
        return self._content

    @property
    def render_count(self) -> int:
        """Number of times the content has been evaluated since mounting."""
        return self._render_count

    def set_content(self, widget: QWidget) -> None:
        if self._content is widget:
            return
        if self._content is not None:
            raise ValueError("RenderBoundary already wraps a widget.")
        self._content = widget
        self._layout.addWidget(widget)

    def evaluate(self, render: Callable[[], None]) -> None:
        """Run ``render`` for this domain and record the pass."""
        render()
        self._render_count += 1
        self.rendered.emit(self._render_count)
