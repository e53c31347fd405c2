import logging

from m3u_shuffle import config

default_level = config.LOGGING_LEVEL

logging.basicConfig(
    level=getattr(logging, default_level, logging.WARNING),
    format="%(asctime)s [%(levelname)s] [%(name)s.%(funcName)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

logger = logging.getLogger("m3u_shuffle")

# Shortcut aliases
debug = logger.debug
info = logger.info
warning = logger.warning
error = logger.error
exception = logger.exception


def get_logger():
    normalized_level = default_level.upper()
    if normalized_level in config.VALID_LOGGING_LEVELS:
        logger.setLevel(getattr(logging, normalized_level))
    else:
        logging.getLogger().warning(
            f"Invalid logging level: {default_level}. Level not changed."
        )
    return logger


def set_logging_level(level: str):
    normalized_level = level.upper()
    if normalized_level not in config.VALID_LOGGING_LEVELS:
        logging.getLogger().warning(
            f"Invalid logging level: {level}. Level not changed."
        )
        return
    new_level = getattr(logging, normalized_level)
    logging.getLogger().setLevel(new_level)
    logger.setLevel(new_level)
    logger.debug(f"Logging level changed to: {normalized_level}")
