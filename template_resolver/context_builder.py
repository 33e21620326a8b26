"""Build ResolutionContext objects from a file path.

Looks up the project root through a ProjectRootLocator so that the
variable extractors only deal with plain paths.
"""

import logging
from pathlib import Path

from core import ProjectRootLocator, ResolutionContext

logger = logging.getLogger(__name__)


class ContextBuilder:
    """Creates resolution contexts for files in a workspace."""

    def __init__(self, locator: ProjectRootLocator | None = None):
        self._locator = locator

    def build(
        self,
        file: Path | str,
        export_extension: str | None = None,
    ) -> ResolutionContext:
        """Build the context for one file.

        Args:
            file: File being exported (made absolute)
            export_extension: Extension of the export, e.g. "stl"

        Returns:
            ResolutionContext with workspace_folder set when the locator
            knows a root for the file
        """
        path = Path(file).absolute()
        workspace_folder = self._locator.folder_for(path) if self._locator else None
        if workspace_folder is None:
            logger.debug("[CONTEXT] No workspace folder for %s", path)
        return ResolutionContext(
            file=path,
            workspace_folder=workspace_folder,
            export_extension=export_extension,
        )


def build_context_for_file(
    file: Path | str,
    locator: ProjectRootLocator | None = None,
    export_extension: str | None = None,
) -> ResolutionContext:
    """Convenience wrapper around ContextBuilder.build()."""
    return ContextBuilder(locator).build(file, export_extension)
