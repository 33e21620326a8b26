"""Notifiers for problems the user should see."""

import logging

logger = logging.getLogger(__name__)


class LoggingNotifier:
    """Reports notifications through the scadexport logger.

    Default notifier when no UI is attached.
    """

    def error(self, message: str) -> None:
        logger.warning("[NOTIFY] %s", message)
