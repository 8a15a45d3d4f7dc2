"""
Stateful controls. Each one owns a draft and a single RenderBoundary.
"""
from __future__ import annotations

from entrylist.app.ui.panels.list_editor import ListEditor
from entrylist.app.ui.panels.page_size import PageSizeControl
from entrylist.app.ui.panels.search import SearchControl

__all__ = ["ListEditor", "PageSizeControl", "SearchControl"]
