"""Global pytest fixtures for entrylist."""

from __future__ import annotations

import os

import pytest

# Must be set before the first QApplication is created
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication  # noqa: E402

from entrylist.app.application import create_app  # noqa: E402
from entrylist.app.state import Coordinator  # noqa: E402


@pytest.fixture(scope="session")
def qapp() -> QApplication:
    """One headless QApplication shared by every widget test."""
    return create_app([])


@pytest.fixture
def coordinator() -> Coordinator:
    """A Coordinator with the default seed entries and options."""
    return Coordinator()


@pytest.fixture
def emitted():
    """Record every emission of the given signals.

    Example:
        ```py
        log = emitted(coordinator.view_changed)
        coordinator.set_filter("o")
        assert log == [["loan", "otravaliev", "ecok"]]
        ```
    """
    def _connect(signal) -> list:
        log: list = []
        signal.connect(lambda *args: log.append(args[0] if len(args) == 1 else args))
        return log

    return _connect
