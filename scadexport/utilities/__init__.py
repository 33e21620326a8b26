"""Utilities - logging."""

from scadexport.utilities.logging import setup_logging

__all__ = ["setup_logging"]
