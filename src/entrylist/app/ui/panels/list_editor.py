from __future__ import annotations

from typing import Callable, Iterable

from PySide6.QtCore import Slot
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QLineEdit, QPushButton, QGroupBox,
)

from entrylist.app.ui.panels.base import BaseControl


class ListEditor(BaseControl):
    """
    Shows the derived list and a small form to add entries.

    The list itself is read-only here: rows are replaced only through
    ``set_entries``. Add/remove go straight to the callbacks, and each
    "Remove" button is bound to the value its row displayed, not to a row
    index, so removing an earlier row cannot shift a later click onto the
    wrong entry.
    """
    def __init__(
        self,
        entries: Iterable[str],
        on_add_entry: Callable[[str], None],
        on_remove_entry: Callable[[str], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._on_add_entry = on_add_entry
        self._on_remove_entry = on_remove_entry
        self._entries: list[str] = list(entries)
        self._draft = ""

        # rows currently on screen, as (value, remove button)
        self._rows: list[tuple[str, QPushButton]] = []
        self._shown: list[str] | None = None

        root = QVBoxLayout(self.content)
        root.setContentsMargins(0, 0, 0, 0)

        self.rows_box = QGroupBox("", self.content)
        self.rows_layout = QVBoxLayout(self.rows_box)
        root.addWidget(self.rows_box)

        form = QHBoxLayout()
        self.name_edit = QLineEdit(self.content)
        form.addWidget(self.name_edit, 1)
        self.add_button = QPushButton(self.tr("Add"), self.content)
        form.addWidget(self.add_button)
        root.addLayout(form)
        root.addStretch()

        self.name_edit.textEdited.connect(self.on_draft_change)
        self.name_edit.returnPressed.connect(self.on_commit_add)
        self.add_button.clicked.connect(self.on_commit_add)

        self.refresh()

    # ---- props ----

    @property
    def entries(self) -> tuple[str, ...]:
        return tuple(self._entries)

    @property
    def draft(self) -> str:
        return self._draft

    def set_entries(self, entries: Iterable[str]) -> None:
        self._entries = list(entries)
        self.refresh()

    def displayed_values(self) -> list[str]:
        return [value for value, _ in self._rows]

    def remove_button(self, row: int) -> QPushButton:
        return self._rows[row][1]

    # ---- user actions ----

    @Slot(str)
    def on_draft_change(self, text: str) -> None:
        self._draft = text
        self.refresh()

    @Slot()
    def on_commit_add(self) -> None:
        # Return in the line edit bypasses the disabled button
        if not self._draft:
            return
        self._on_add_entry(self._draft)

    # ---- rendering ----

    def _render(self) -> None:
        if self._shown != self._entries:
            self._rebuild_rows()
        if self.name_edit.text() != self._draft:
            self.name_edit.setText(self._draft)
        self.add_button.setEnabled(bool(self._draft))

    def _rebuild_rows(self) -> None:
        while self.rows_layout.count():
            item = self.rows_layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.hide()
                widget.deleteLater()
        self._rows = []

        for value in self._entries:
            row = QWidget(self.rows_box)
            h = QHBoxLayout(row)
            h.setContentsMargins(0, 0, 0, 0)
            h.addWidget(QLabel(value, row), 1)
            button = QPushButton(self.tr("Remove"), row)
            button.clicked.connect(lambda _=False, v=value: self._on_remove_entry(v))
            h.addWidget(button)
            self.rows_layout.addWidget(row)
            self._rows.append((value, button))

        self._shown = list(self._entries)
