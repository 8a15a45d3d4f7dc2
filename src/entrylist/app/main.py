"""
Run with: python -m entrylist
"""
from __future__ import annotations

import logging
import sys

from entrylist.config import LOG_LEVEL, LOG_FILE
from entrylist.logging_config import setup_logging
from entrylist.app.application import create_app
from entrylist.app.state import Coordinator
from entrylist.app.ui.main_window import MainWindow

logger = logging.getLogger(__name__)


def main() -> int:
    """Main entry point for the application."""
    setup_logging(level=LOG_LEVEL, log_file=LOG_FILE)

    app = create_app()
    coordinator = Coordinator()
    win = MainWindow(coordinator)
    win.show()
    logger.info("Window shown with %d entries.", len(coordinator.entries))
    return app.exec()

if __name__ == "__main__":
    sys.exit(main())
