"""QApplication bootstrap."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
import sys

from PySide6.QtGui import QIcon
from PySide6.QtWidgets import QApplication

from lifecycleview.config.settings import AppSettings
from lifecycleview.core.controller import RootController
from lifecycleview.core.presentation import DocumentPresentationSync, PresentationContext
from lifecycleview.i18n.catalog import TranslationCatalog
from lifecycleview.i18n.translator import Translator
from lifecycleview.runtime_paths import asset_path, is_frozen, package_root
from lifecycleview.ui.root_window import RootWindow
from lifecycleview.ui.themes.service import ThemeService


def _configure_logging(settings: AppSettings) -> logging.Logger:
    logger = logging.getLogger("lifecycleview")
    if logger.handlers:
        return logger

    logger.setLevel(settings.log_level)
    handler = RotatingFileHandler(
        settings.log_dir / "startup.log",
        maxBytes=512_000,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def run_app() -> int:
    """Initialize and run the application."""
    app = QApplication(sys.argv)
    app.setStyle("Fusion")
    app.setApplicationName("LifecycleView")
    app.setOrganizationName("LifecycleView")
    settings = AppSettings()
    logger = _configure_logging(settings)
    logger.info(
        "startup mode frozen=%s package_root=%s settings=%s",
        is_frozen(), package_root(), settings.settings_location,
    )

    icon_path = asset_path("lifecycleview.png")
    if icon_path.exists():
        app.setWindowIcon(QIcon(str(icon_path)))

    store = settings.store
    context = PresentationContext(app)
    presentation = DocumentPresentationSync(context)
    controller = RootController(store, presentation)

    catalog = TranslationCatalog()
    translator = Translator(catalog)
    context.presentation_changed.connect(translator.set_locale)
    # Language and direction must be in place before the first paint.
    controller.mount()
    logger.info("initial locale=%s direction=%s", context.language_tag, context.text_direction)

    theme_service = ThemeService(app, store, user_theme_path=settings.user_theme_path)
    theme_service.follow_system()
    theme_service.apply()

    window = RootWindow(controller, translator, theme_service=theme_service)
    window.show()

    exit_code = app.exec()
    errors = catalog.load_errors()
    if errors:
        logger.warning("translation load warnings: %s", " | ".join(errors[:6]))
    return exit_code
