"""Project root lookup for files in a multi-root workspace."""

import logging
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)


class WorkspaceFolders:
    """ProjectRootLocator over a fixed set of root folders.

    Nested roots are allowed; a file belongs to the deepest root that
    contains it.

    Usage:
        folders = WorkspaceFolders(["/proj", "/proj/vendor/lib"])
        folders.folder_for(Path("/proj/vendor/lib/gear.scad"))  # /proj/vendor/lib
        folders.folder_for(Path("/tmp/scratch.scad"))  # None
    """

    def __init__(self, folders: Iterable[Path | str] = ()):
        self._folders = [Path(f).absolute() for f in folders]
        # Deepest first so nested roots win
        self._folders.sort(key=lambda p: len(p.parts), reverse=True)

    @property
    def folders(self) -> list[Path]:
        return list(self._folders)

    def folder_for(self, path: Path) -> Path | None:
        """Return the root folder containing path, or None."""
        path = Path(path).absolute()
        for folder in self._folders:
            if path == folder or folder in path.parents:
                return folder
        logger.debug("[WORKSPACE] %s is outside all workspace folders", path)
        return None
