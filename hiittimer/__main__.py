"""Allow running HIIT Timer as a module: python -m hiittimer."""

import logging
import sys

from PyQt6.QtWidgets import QApplication

from .app import HiitTimerApp


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = QApplication(sys.argv)
    app.setApplicationName("HIIT Timer")
    app.setOrganizationName("HIITTimer")

    window = HiitTimerApp()
    window.show()
    logging.getLogger(__name__).info("HIIT Timer ready")

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
