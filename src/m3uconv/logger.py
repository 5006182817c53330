import logging

from m3uconv import config

default_level = config.LOGGING_LEVEL
valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

logging.basicConfig(
    level=getattr(logging, default_level, logging.WARNING),
    format="%(asctime)s [%(levelname)s] [%(name)s.%(funcName)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

logger = logging.getLogger("m3uconv")

# Shortcut aliases
debug = logger.debug
info = logger.info
warning = logger.warning
error = logger.error
exception = logger.exception


def get_logger():
    normalized_level = default_level.upper()
    if normalized_level in valid_levels:
        logger.setLevel(getattr(logging, normalized_level))
    else:
        logging.getLogger().warning(
            f"Invalid logging level: {default_level}. Level not changed."
        )
    return logger


def set_logging_level(level: str):
    normalized_level = level.upper()
    if normalized_level not in valid_levels:
        logging.getLogger().warning(
            f"Invalid logging level: {level}. Level not changed."
        )
        return
    logger.setLevel(getattr(logging, normalized_level))
    logging.getLogger().info(f"Logging level changed to: {normalized_level}")
