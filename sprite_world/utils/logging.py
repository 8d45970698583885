"""Console logging for hosts (app, scripts).

Only the ``sprite_world`` logger is configured; handlers the host installed
on the root logger are left alone.
"""

import logging
import sys

from sprite_world.config import LOG_LEVEL

PACKAGE_LOGGER = "sprite_world"
_HANDLER_NAME = "sprite_world.console"


def setup_logging(level: str = LOG_LEVEL) -> logging.Logger:
    """Attach a stdout handler to the package logger and set its level.

    Calling it again replaces the handler it installed earlier, so Streamlit
    reruns do not duplicate output.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logger = logging.getLogger(PACKAGE_LOGGER)

    for handler in list(logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    logger.addHandler(handler)
    logger.setLevel(numeric_level)
    logger.propagate = False
    return logger
