"""
Buzzsaw - Buzz-in arbitration for game shows

Entry point for the application.
"""

import sys

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt

from config import init_config, APP_NAME, APP_VERSION, PATHS
from services.logging_config import setup_logging


def main() -> int:
    """Main entry point for Buzzsaw."""
    # Initialize configuration and directories
    init_config()
    setup_logging(log_file=PATHS.log_file)

    # High DPI scaling
    QApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )

    # Create application
    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setApplicationVersion(APP_VERSION)
    app.setOrganizationName(APP_NAME)

    # Create and show windows
    from app import BuzzsawApp
    buzzsaw = BuzzsawApp()
    app.aboutToQuit.connect(buzzsaw.shutdown)
    buzzsaw.show()

    # Run event loop
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
