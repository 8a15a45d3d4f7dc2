from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Slot
from PySide6.QtWidgets import QWidget, QHBoxLayout, QSpinBox, QPushButton, QSizePolicy

from entrylist.config import DEFAULT_PAGE_SIZE, PAGE_SIZE_MIN, PAGE_SIZE_MAX
from entrylist.model.entries import coerce_page_size
from entrylist.app.ui.panels.base import BaseControl


class PageSizeControl(BaseControl):
    """
    Numeric draft + "Save page size" button.

    The spin box range is only a convenience for the user; whatever the draft
    holds is handed to the Coordinator unchanged on commit.
    """
    def __init__(self, on_commit: Callable[[int], None], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._on_commit = on_commit
        self._draft = DEFAULT_PAGE_SIZE

        row = QHBoxLayout(self.content)
        row.setContentsMargins(0, 0, 0, 0)

        self.spin = QSpinBox(self.content)
        self.spin.setRange(PAGE_SIZE_MIN, PAGE_SIZE_MAX)
        self.spin.setValue(self._draft)
        self.spin.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        row.addWidget(self.spin, 1)

        self.button = QPushButton(self.tr("Save page size"), self.content)
        row.addWidget(self.button)

        # Typed text goes through coercion too: a cleared field means 0
        self.spin.lineEdit().textEdited.connect(self.on_draft_change)
        self.spin.valueChanged.connect(self._on_value_changed)
        # Qt restores the last valid value on focus-out; put the draft back
        self.spin.editingFinished.connect(self.refresh)
        self.button.clicked.connect(self.on_commit)

        self.refresh()

    @property
    def draft(self) -> int:
        return self._draft

    @Slot(str)
    def on_draft_change(self, value: int | str) -> None:
        self._draft = coerce_page_size(value)
        self.refresh()

    @Slot(int)
    def _on_value_changed(self, value: int) -> None:
        # already taken from textEdited when the user typed it
        if value != self._draft:
            self.on_draft_change(value)

    @Slot()
    def on_commit(self) -> None:
        self._on_commit(self._draft)

    def _render(self) -> None:
        # leave the field alone while its text already stands for the draft
        if coerce_page_size(self.spin.text()) != self._draft:
            # setValue would re-enter on_draft_change and clamp the draft
            self.spin.blockSignals(True)
            self.spin.setValue(self._draft)
            self.spin.blockSignals(False)
