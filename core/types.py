"""Core data types for scadexport naming resolution.

All data structures are dataclasses with attribute access.
Contexts are frozen: a resolution call never mutates its inputs.
"""

from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path

# Placeholder for the auto-incrementing version number
VERSION_MARKER = "#"
VERSION_PLACEHOLDER = "${#}"

DEFAULT_NAME_FORMAT = "${fileBasenameNoExtension}.${exportExtension}"


@dataclass(frozen=True)
class ResolutionContext:
    """Everything a single resolution call needs to know about its file.

    workspace_folder is None for files outside every known project root;
    workspace-relative variables then resolve to their literal placeholder.
    """

    file: Path
    workspace_folder: Path | None = None
    export_extension: str | None = None  # e.g. "stl", "3mf"


class VersionStatus(Enum):
    """Outcome of a version scan."""

    NOT_REQUESTED = auto()  # no ${#} in the pattern
    RESOLVED = auto()  # next free number found
    SCAN_FAILED = auto()  # destination directory unreadable


@dataclass(frozen=True)
class VersionOutcome:
    """Result of scanning a destination directory for the next version."""

    status: VersionStatus
    number: int | None = None

    # Numeric codes used by callers that only deal in integers
    NOT_REQUESTED_CODE = -1
    SCAN_FAILED_CODE = -2

    @classmethod
    def not_requested(cls) -> "VersionOutcome":
        return cls(VersionStatus.NOT_REQUESTED)

    @classmethod
    def scan_failed(cls) -> "VersionOutcome":
        return cls(VersionStatus.SCAN_FAILED)

    @classmethod
    def resolved(cls, number: int) -> "VersionOutcome":
        return cls(VersionStatus.RESOLVED, number)

    @property
    def code(self) -> int:
        """Integer form: the version number, -1 (not requested) or -2 (scan failed)."""
        if self.status is VersionStatus.RESOLVED:
            return self.number
        if self.status is VersionStatus.SCAN_FAILED:
            return self.SCAN_FAILED_CODE
        return self.NOT_REQUESTED_CODE
