# textcore/core/logging_config.py
"""
Logging setup for applications embedding textcore.

Library modules only create loggers ("text-core", "text-core.Encoding",
"text-core.CSV", "text-core.Search"); handlers are left to the application.
"""
import logging

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
ROOT_LOGGER_NAME = "text-core"


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Attach a stream handler to the text-core logger.

    Calling it again only updates the level.

    Args:
        level: Logging level for the text-core loggers

    Returns:
        The text-core logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    if not any(getattr(h, "_textcore_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._textcore_handler = True
        logger.addHandler(handler)

    return logger
