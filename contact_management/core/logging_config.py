"""
Logging configuration for the Contact Management API.

Configures the root handler once and returns the application logger,
which is handed to the DI container and from there to every component.
"""
import logging

from contact_management.core.config import Settings

APP_LOGGER_NAME = "contact_management"
LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s: %(message)s"

# Third-party loggers that are too chatty at INFO
_QUIET_LOGGERS = {
    "sqlalchemy.engine": "WARNING",
    "sqlalchemy.pool": "WARNING",
    "uvicorn.access": "WARNING",
}


def configure_logging(settings: Settings) -> logging.Logger:
    """
    Configure logging for the application.

    Args:
        settings: Application settings (LOG_LEVEL)

    Returns:
        The application logger
    """
    log_level = getattr(logging, settings.log_level, logging.INFO)

    logging.basicConfig(level=log_level, format=LOG_FORMAT)

    for logger_name, level_name in _QUIET_LOGGERS.items():
        logging.getLogger(logger_name).setLevel(getattr(logging, level_name))

    logger = logging.getLogger(APP_LOGGER_NAME)
    logger.setLevel(log_level)
    return logger
