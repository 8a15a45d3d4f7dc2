from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Slot
from PySide6.QtWidgets import QWidget, QHBoxLayout, QLineEdit, QPushButton

from entrylist.app.ui.panels.base import BaseControl


class SearchControl(BaseControl):
    """
    Text draft + "Search" button.

    Typing only changes the local draft. The filter term reaches the
    Coordinator when the button is clicked (or Return is pressed), and the
    draft stays in the field afterwards.
    """
    def __init__(self, on_commit: Callable[[str], None], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._on_commit = on_commit
        self._draft = ""

        row = QHBoxLayout(self.content)
        row.setContentsMargins(0, 0, 0, 0)

        self.line_edit = QLineEdit(self.content)
        self.line_edit.setPlaceholderText(self.tr("Write stuff to filter stuff"))
        row.addWidget(self.line_edit, 1)

        self.button = QPushButton(self.tr("Search"), self.content)
        row.addWidget(self.button)

        # textEdited is user-only, so pushing the draft back in _render does not loop
        self.line_edit.textEdited.connect(self.on_draft_change)
        self.line_edit.returnPressed.connect(self.on_commit)
        self.button.clicked.connect(self.on_commit)

        self.refresh()

    @property
    def draft(self) -> str:
        return self._draft

    @Slot(str)
    def on_draft_change(self, text: str) -> None:
        self._draft = text
        self.refresh()

    @Slot()
    def on_commit(self) -> None:
        self._on_commit(self._draft)

    def _render(self) -> None:
        if self.line_edit.text() != self._draft:
            self.line_edit.setText(self._draft)
