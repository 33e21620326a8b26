"""Logging setup for scadexport.

Modules log through logging.getLogger(__name__); this only attaches a
console handler to the package loggers.
"""

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Top-level packages whose loggers get the handler
PACKAGE_LOGGERS = ("scadexport", "template_resolver", "core")


def setup_logging(level: int | str = logging.INFO) -> None:
    """Attach a console handler to the package loggers.

    Safe to call more than once: the level is updated but no second
    handler is added.
    """
    for name in PACKAGE_LOGGERS:
        pkg_logger = logging.getLogger(name)
        pkg_logger.setLevel(level)
        if not pkg_logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            pkg_logger.addHandler(handler)
