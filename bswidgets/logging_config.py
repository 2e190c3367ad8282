"""Route the ``bswidgets`` log records to a handler of the caller's choice."""

from __future__ import annotations

import logging
import sys
from typing import Optional, Union

PACKAGE_LOGGER = "bswidgets"

_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(
    level: Union[int, str] = logging.INFO,
    handler: Optional[logging.Handler] = None,
    *,
    logger_name: str = PACKAGE_LOGGER,
) -> logging.Logger:
    """Attach one formatted handler to the widget loggers.

    Only the ``bswidgets`` logger tree is configured by default, so the root
    logger of the embedding application is left alone and widget records stop
    propagating to it. Pass ``logger_name=""`` to configure the root logger
    instead.

    Parameters
    ----------
    level:
        A level number or name, e.g. ``"DEBUG"`` to see every render.
    handler:
        Where records go; ``sys.stderr`` when omitted.
    logger_name:
        The logger to configure.

    Returns
    -------
    logging.Logger
        The configured logger.
    """

    logger = logging.getLogger(logger_name)
    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))

    # Calling again replaces the handler.
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(level)
    if logger_name:
        logger.propagate = False
    return logger


__all__ = ["PACKAGE_LOGGER", "configure_logging"]
