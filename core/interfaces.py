"""Collaborator interfaces consumed by the resolver.

The resolver only computes names. Anything that touches the host
environment (workspace layout, user notifications, the filesystem)
comes in through one of these protocols.
"""

from pathlib import Path
from typing import Protocol


class ProjectRootLocator(Protocol):
    """Finds the project root governing a file."""

    def folder_for(self, path: Path) -> Path | None:
        """Return the root folder containing path, or None if ungoverned."""
        ...


class Notifier(Protocol):
    """Fire-and-forget user notifications."""

    def error(self, message: str) -> None: ...


class Filesystem(Protocol):
    """The three filesystem operations the version scan performs."""

    def exists(self, path: Path) -> bool: ...

    def make_dir(self, path: Path) -> None:
        """Create a single directory level (parent must exist)."""
        ...

    def list_dir(self, path: Path) -> list[str]:
        """Return the names of the immediate entries of path."""
        ...
