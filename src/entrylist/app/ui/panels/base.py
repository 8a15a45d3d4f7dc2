from __future__ import annotations

from PySide6.QtWidgets import QWidget, QVBoxLayout

from entrylist.app.ui.boundary import RenderBoundary


class BaseControl(QWidget):
    """
    Base class for stateful controls.

    Each control owns a private draft and exactly one RenderBoundary. Widgets
    go on ``self.content``; ``refresh()`` re-evaluates this control only.
    """
    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.boundary = RenderBoundary(self)
        layout.addWidget(self.boundary)

        self.content = QWidget(self.boundary)
        self.boundary.set_content(self.content)

    @property
    def render_count(self) -> int:
        return self.boundary.render_count

    def refresh(self) -> None:
        self.boundary.evaluate(self._render)

    # ---- abstract API for subclasses ----
    def _render(self) -> None:
        """Push the control's current draft/props into its widgets."""
        raise NotImplementedError("`_render` must be implemented in subclass.")
