import logging

from fractional_months.config import Settings

PACKAGE_LOGGER = "fractional_months"

# Silent unless the application configures logging
logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """Send package logs to stderr at the configured level.

    Reads FRACTIONAL_MONTHS_LOG_LEVEL when no settings are given. Calling it
    again only updates the level.
    """
    if settings is None:
        settings = Settings.from_env()

    logger = logging.getLogger(PACKAGE_LOGGER)
    if not any(type(handler) is logging.StreamHandler for handler in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
        )
        logger.addHandler(handler)

    logger.setLevel(settings.level)
    return logger
