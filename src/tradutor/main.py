"""Main entry point for the translator application."""

import logging
import sys

from PySide6.QtWidgets import QApplication

from tradutor.coordinators import TranslationCoordinator
from tradutor.services import MyMemoryTranslationService, SettingsManager
from tradutor.ui import MainWindow


def main():
    """
    Bootstrap the application following the Composition Root pattern.
    This is the only place that knows how to instantiate and wire all components.
    """
    # 1. Load configuration and logging
    settings = SettingsManager()
    logging.basicConfig(
        level=settings.get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # 2. Initialize Application
    app = QApplication(sys.argv)
    app.setApplicationName("Tradutor Riofer")
    app.setOrganizationName("Riofer")

    # 3. Initialize Infrastructure
    translation_service = MyMemoryTranslationService(
        timeout=settings.get_request_timeout(),
        contact_email=settings.get_contact_email(),
    )

    # 4. Instantiate Coordinator (Dependency Injection)
    coordinator = TranslationCoordinator(translation_service=translation_service)

    # 5. Construct UI and wire signals
    main_window = MainWindow()
    main_window.set_coordinator(coordinator)

    # 6. Show UI and start event loop
    main_window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
