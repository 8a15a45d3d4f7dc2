"""
Main window: mounts the controls and routes each Coordinator signal to the
regions that read that slice of state.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import Slot
from PySide6.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QCheckBox, QFrame

from entrylist.config import VISIBLE_APP_NAME
from entrylist.app.state import Coordinator
from entrylist.app.ui.panels import ListEditor, PageSizeControl, SearchControl

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, coordinator: Coordinator) -> None:
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(640, 480)

        self.coordinator = coordinator
        options = coordinator.options

        # ---- Central: header on top + list below ----
        central = QWidget(self)
        v = QVBoxLayout(central)
        v.setSpacing(8)

        self.header = QFrame(central)
        header_layout = QVBoxLayout(self.header)
        header_layout.setContentsMargins(0, 0, 0, 0)

        self.show_header_check = QCheckBox(self.tr("Show header"), self.header)
        self.show_header_check.setChecked(options.show_header)
        header_layout.addWidget(self.show_header_check)

        # Hidden, never destroyed: the controls keep their drafts across toggles
        self.controls_cluster = QWidget(self.header)
        cluster_layout = QHBoxLayout(self.controls_cluster)
        cluster_layout.setContentsMargins(0, 0, 0, 0)
        self.search = SearchControl(coordinator.set_filter, parent=self.controls_cluster)
        self.page_size = PageSizeControl(coordinator.set_page_size, parent=self.controls_cluster)
        cluster_layout.addWidget(self.search, 1)
        cluster_layout.addWidget(self.page_size)
        header_layout.addWidget(self.controls_cluster)
        self.controls_cluster.setVisible(options.show_header)

        v.addWidget(self.header, 0)

        self.list_editor = ListEditor(
            coordinator.derived_list(),
            coordinator.add_entry,
            coordinator.remove_entry,
            parent=central,
        )
        v.addWidget(self.list_editor, 1)

        self.setCentralWidget(central)

        # ---- wiring ----
        self.show_header_check.toggled.connect(coordinator.set_show_header)
        coordinator.header_visibility_changed.connect(self._apply_header_visibility)
        coordinator.view_changed.connect(self.list_editor.set_entries)

    @Slot(bool)
    def _apply_header_visibility(self, visible: bool) -> None:
        """Only the header reads this flag; the list is left alone."""
        if self.show_header_check.isChecked() != visible:
            self.show_header_check.blockSignals(True)
            self.show_header_check.setChecked(visible)
            self.show_header_check.blockSignals(False)
        self.controls_cluster.setVisible(visible)
        logger.debug("Controls cluster %s", "shown" if visible else "hidden")
