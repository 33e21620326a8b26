"""Version number resolution for the ${#} marker.

The marker is resolved after every other variable: the partially resolved
pattern is turned into a regex, the destination directory is listed, and
the next number after the highest existing one is returned.

    part_v${#}.stl  +  [part_v1.stl, part_v3.stl]  ->  4

Numbers start at 1 and never have leading zeros. Gaps are not reused.
The regex is unanchored, so part_v9.stl.bak also counts as version 9.
Concurrent scans of the same directory are not coordinated and may
return the same number.
"""

import asyncio
import logging
import os
import re
from pathlib import Path

from core import VERSION_PLACEHOLDER, Filesystem, ResolutionContext, VersionOutcome

logger = logging.getLogger(__name__)

# No leading zeros, minimum value 1
_VERSION_GROUP = r"(?P<version>[1-9][0-9]*)"
# Later markers in the same name must carry the same number
_VERSION_BACKREF = r"(?P=version)"


class LocalFilesystem:
    """Filesystem collaborator backed by the local disk."""

    def exists(self, path: Path) -> bool:
        return path.exists()

    def make_dir(self, path: Path) -> None:
        # Single level only: a missing parent is an error
        path.mkdir(exist_ok=True)

    def list_dir(self, path: Path) -> list[str]:
        return os.listdir(path)


def build_version_regex(basename: str) -> re.Pattern[str] | None:
    """Compile a regex matching file names produced by a versioned basename.

    Args:
        basename: File name portion of a pattern, e.g. "part_v${#}.stl"

    Returns:
        Compiled pattern with a "version" group, or None if basename has
        no version marker.
    """
    parts = basename.split(VERSION_PLACEHOLDER)
    if len(parts) == 1:
        return None

    regex = re.escape(parts[0]) + _VERSION_GROUP
    for literal in parts[1:-1]:
        regex += re.escape(literal) + _VERSION_BACKREF
    regex += re.escape(parts[-1])
    return re.compile(regex)


def destination_directory(pattern: str, ctx: ResolutionContext) -> Path:
    """Directory the resolved pattern points into.

    Absolute patterns use their own directory; relative ones are taken
    relative to the directory of the file being exported.
    """
    if os.path.isabs(pattern):
        return Path(os.path.dirname(pattern))
    joined = os.path.normpath(os.path.join(os.path.dirname(ctx.file), pattern))
    return Path(os.path.dirname(joined))


class VersionScanner:
    """Finds the next free version number in a destination directory.

    Usage:
        scanner = VersionScanner()
        outcome = await scanner.next_version("out/part_v${#}.stl", ctx)
        if outcome.status is VersionStatus.RESOLVED:
            name = pattern.replace("${#}", str(outcome.number))
    """

    def __init__(self, filesystem: Filesystem | None = None):
        self._fs = filesystem or LocalFilesystem()

    def ensure_directory(self, directory: Path) -> None:
        """Create the destination directory if it does not exist yet.

        Raises:
            OSError: If the directory cannot be created
            ValueError: If the path contains a null byte
        """
        if not self._fs.exists(directory):
            logger.info("[VERSION] Creating export directory %s", directory)
            self._fs.make_dir(directory)

    async def next_version(self, pattern: str, ctx: ResolutionContext) -> VersionOutcome:
        """Compute the version number to substitute for ${#}.

        Args:
            pattern: Pattern with every other variable already resolved
            ctx: Context of the file being exported

        Returns:
            not_requested if pattern has no marker, scan_failed if the
            directory cannot be created or listed, otherwise resolved(max + 1).
            Entries count when the regex matches anywhere in their name.
        """
        if VERSION_PLACEHOLDER not in pattern:
            return VersionOutcome.not_requested()

        regex = build_version_regex(os.path.basename(pattern))
        if regex is None:
            # Marker only appears in a directory component
            logger.debug("[VERSION] No marker in file name of %s, using 1", pattern)
            return VersionOutcome.resolved(1)

        directory = destination_directory(pattern, ctx)
        try:
            self.ensure_directory(directory)
            entries = await asyncio.to_thread(self._fs.list_dir, directory)
        except (OSError, ValueError) as e:
            # ValueError: embedded null byte in the path
            logger.warning("[VERSION] Could not read export directory %s: %s", directory, e)
            return VersionOutcome.scan_failed()

        latest = 0
        for entry in entries:
            match = regex.search(entry)
            if match:
                latest = max(latest, int(match.group("version")))

        logger.debug("[VERSION] Latest version in %s is %d", directory, latest)
        return VersionOutcome.resolved(latest + 1)
