from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication

import logging
import sys
import os

from entrylist.config import ORG_ID, APP_ID, VISIBLE_APP_NAME

logger = logging.getLogger(__name__)


def create_app(argv: list[str] | None = None) -> QApplication:
    """Create and configure the QApplication instance, or reuse the running one."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setApplicationName(APP_ID)

    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv if argv is None else argv)
    else:
        logger.debug("Reusing existing QApplication instance.")

    app.setApplicationDisplayName(VISIBLE_APP_NAME)

    return app
