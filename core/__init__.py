"""Core types and interfaces for scadexport.

All data structures are dataclasses with attribute access.
Host integrations implement the protocols in core.interfaces.
"""

from core.interfaces import Filesystem, Notifier, ProjectRootLocator
from core.types import (
    DEFAULT_NAME_FORMAT,
    VERSION_MARKER,
    VERSION_PLACEHOLDER,
    ResolutionContext,
    VersionOutcome,
    VersionStatus,
)

__all__ = [
    # Types
    "ResolutionContext",
    "VersionOutcome",
    "VersionStatus",
    # Constants
    "DEFAULT_NAME_FORMAT",
    "VERSION_MARKER",
    "VERSION_PLACEHOLDER",
    # Interfaces
    "Filesystem",
    "Notifier",
    "ProjectRootLocator",
]
