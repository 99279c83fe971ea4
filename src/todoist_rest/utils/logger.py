"""Library logger writing to platformdirs user_log_dir.

Modules log through ``logging.getLogger(__name__)``. The ``todoist_rest``
parent logger only carries a ``NullHandler`` until the application calls
:func:`configure_logging`, so importing or using the library touches no files.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from platformdirs import user_log_dir

from todoist_rest.models.config_models import LoggingConfig

_APP_NAME = "todoist_rest"

_logger: logging.Logger | None = None


def configure_logging(settings: LoggingConfig | None = None) -> logging.Logger:
    """Attach the rotating log file to the library logger (once) and return it."""
    global _logger
    if _logger is not None:
        return _logger

    settings = settings or LoggingConfig()

    logger = logging.getLogger(_APP_NAME)
    logger.setLevel(settings.level)
    if not any(isinstance(h, logging.handlers.RotatingFileHandler) for h in logger.handlers):
        log_dir = Path(user_log_dir(_APP_NAME))
        log_dir.mkdir(parents=True, exist_ok=True)

        handler = logging.handlers.RotatingFileHandler(
            log_dir / settings.file_name,
            maxBytes=settings.max_bytes,
            backupCount=settings.backup_count,
            encoding="utf-8",
        )
        handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
                datefmt="%Y-%m-%dT%H:%M:%S",
            )
        )
        logger.addHandler(handler)
    logger.propagate = False

    _logger = logger
    return _logger
