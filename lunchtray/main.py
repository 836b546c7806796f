"""Entry point for the lunch-tray Textual app."""

from __future__ import annotations

import locale
import logging
from pathlib import Path

from lunchtray.config import DEBUG_LOG_PATH
from lunchtray.lunch_tray_app import LunchTrayApp

logger = logging.getLogger(__name__)


def configure_logging(path: str = DEBUG_LOG_PATH) -> None:
    """Send debug logging to a file; the terminal belongs to Textual."""
    log_file = Path(path)
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=log_file,
        level=logging.DEBUG,
        format="%(asctime)s %(name)s %(message)s",
    )


def configure_locale() -> None:
    """Adopt the host locale so prices use its currency convention."""
    try:
        locale.setlocale(locale.LC_ALL, "")
    except locale.Error as exc:
        logger.warning("locale_unavailable error=%s", exc)


def main() -> None:
    """Run the Textual application."""
    configure_logging()
    configure_locale()
    LunchTrayApp().run()


if __name__ == "__main__":
    main()
