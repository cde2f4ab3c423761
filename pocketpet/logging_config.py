import logging

from pocketpet.constants import LOG_LEVEL

DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DEFAULT_DATEFMT = "%H:%M:%S"


def configure_logging(level=None):
    """Set up root logging once for the app. Level falls back to POCKETPET_LOG_LEVEL."""
    resolved_level = (level or LOG_LEVEL or "INFO").upper()
    logging.basicConfig(level=resolved_level, format=DEFAULT_FORMAT, datefmt=DEFAULT_DATEFMT)
    app_logger = logging.getLogger("pocketpet")
    app_logger.setLevel(resolved_level)
    return app_logger
