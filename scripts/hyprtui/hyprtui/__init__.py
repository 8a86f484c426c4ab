"""Terminal window switcher and calendar clock for Hyprland."""

from __future__ import annotations

import logging

__version__ = "0.1.0"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Nothing may reach stderr while the alternate screen is active.
logging.getLogger(__name__).addHandler(logging.NullHandler())


def setup_logging(log_file: str | None, verbose: bool = False) -> None:
    if not log_file:
        return
    handler = logging.FileHandler(log_file)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger = logging.getLogger(__name__)
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.INFO)
