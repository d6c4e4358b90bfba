"""Application entry point."""

from __future__ import annotations

import logging
import sys

from plainchess.ui.settings import AppSettings

_LOGGER = logging.getLogger(__name__)


def _configure_logging(settings: AppSettings) -> None:
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    """Launch the Plain Chess application."""
    from PyQt6.QtWidgets import QApplication

    from plainchess.ui.main_window import MainWindow
    from plainchess.ui.theme import APP_STYLE

    settings = AppSettings()
    _configure_logging(settings)

    app = QApplication(sys.argv if argv is None else argv)
    app.setApplicationName("Plain Chess")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)

    window = MainWindow(settings=settings)
    window.show()
    _LOGGER.info("Application started")

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
