"""scadexport - export naming for OpenSCAD files.

Host-side pieces around the template_resolver engine: configuration,
workspace folder lookup, notifications and logging setup.
"""

from scadexport.config import ExportConfig, load_config
from scadexport.notify import LoggingNotifier
from scadexport.utilities import setup_logging
from scadexport.workspace import WorkspaceFolders

__all__ = [
    "ExportConfig",
    "LoggingNotifier",
    "WorkspaceFolders",
    "load_config",
    "setup_logging",
]
