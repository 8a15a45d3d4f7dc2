"""Integration tests for the mounted window.

The window is driven through its widgets only; the RenderBoundary counters
of the three controls show which update domains each transition touched.
"""

from __future__ import annotations

import pytest

from entrylist.app.state import Coordinator
from entrylist.app.ui.main_window import MainWindow
from entrylist.config import SEED_ENTRIES

pytestmark = pytest.mark.usefixtures("qapp")

# pylint: disable=redefined-outer-name


@pytest.fixture
def window(coordinator: Coordinator) -> MainWindow:
    return MainWindow(coordinator)


def counts(window: MainWindow) -> tuple[int, int, int]:
    """(search, page size, list editor) render counters."""
    return (
        window.search.render_count,
        window.page_size.render_count,
        window.list_editor.render_count,
    )


# ============================================================================
#                              Mounting
# ============================================================================


def test_mount_shows_seed_entries(window: MainWindow):
    assert window.list_editor.displayed_values() == list(SEED_ENTRIES)
    assert window.show_header_check.isChecked()
    assert not window.controls_cluster.isHidden()
    assert counts(window) == (1, 1, 1)


# ============================================================================
#                              Isolation
# ============================================================================


def test_search_draft_does_not_redraw_list_or_page_size(window: MainWindow):
    search, page, listing = counts(window)

    window.search.on_draft_change("o")
    window.search.on_draft_change("ot")

    assert counts(window) == (search + 2, page, listing)
    assert window.coordinator.options.filter == ""


def test_page_size_draft_does_not_redraw_list_or_search(window: MainWindow):
    search, page, listing = counts(window)

    window.page_size.spin.setValue(2)

    assert counts(window) == (search, page + 1, listing)
    assert window.coordinator.options.page_size == 10


def test_list_edits_do_not_redraw_inputs(window: MainWindow):
    search, page, listing = counts(window)

    window.list_editor.on_draft_change("otto")
    window.list_editor.add_button.click()
    window.list_editor.remove_button(0).click()

    s, p, _ = counts(window)
    assert (s, p) == (search, page)
    # draft edit + add + remove
    assert window.list_editor.render_count == listing + 3


def test_header_toggle_does_not_redraw_list(window: MainWindow):
    window.search.on_draft_change("draft text")
    window.page_size.on_draft_change(7)
    before = counts(window)

    window.show_header_check.setChecked(False)

    assert window.controls_cluster.isHidden()
    assert window.coordinator.options.show_header is False
    assert counts(window) == before

    window.show_header_check.setChecked(True)

    assert not window.controls_cluster.isHidden()
    assert counts(window) == before
    # still mounted, drafts survived
    assert window.search.draft == "draft text"
    assert window.page_size.draft == 7


def test_header_flag_set_on_coordinator_syncs_checkbox(window: MainWindow):
    window.coordinator.set_show_header(False)
    assert not window.show_header_check.isChecked()
    assert window.controls_cluster.isHidden()


def test_commit_redraws_list_exactly_once(window: MainWindow):
    search, page, listing = counts(window)

    window.search.on_draft_change("o")
    window.search.button.click()

    assert counts(window) == (search + 1, page, listing + 1)


# ============================================================================
#                              End to end
# ============================================================================


def test_filter_add_remove_through_widgets(window: MainWindow):
    editor = window.list_editor

    window.search.on_draft_change("o")
    window.search.button.click()
    assert editor.displayed_values() == ["loan", "otravaliev", "ecok"]

    editor.on_draft_change("otto")
    editor.add_button.click()
    assert window.coordinator.entries == SEED_ENTRIES + ("otto",)
    assert editor.displayed_values() == ["loan", "otravaliev", "ecok", "otto"]

    editor.remove_button(0).click()
    assert editor.displayed_values() == ["otravaliev", "ecok", "otto"]


def test_page_size_commit_paginates(window: MainWindow):
    window.page_size.spin.setValue(0)
    window.page_size.button.click()
    assert window.list_editor.displayed_values() == []

    window.page_size.spin.setValue(20)
    window.page_size.button.click()
    assert window.list_editor.displayed_values() == list(SEED_ENTRIES)


def test_duplicate_rows_remove_earliest(window: MainWindow):
    editor = window.list_editor
    editor.on_draft_change("loan")
    editor.add_button.click()
    assert editor.displayed_values() == list(SEED_ENTRIES) + ["loan"]

    # the last row shows "loan" too; the earliest "loan" is the one removed
    editor.remove_button(4).click()

    assert window.coordinator.entries == ("otravaliev", "mani", "ecok", "loan")
