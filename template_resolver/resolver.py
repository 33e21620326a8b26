"""Naming pattern resolution.

Resolution runs in two phases:

1. Every ${name} placeholder is replaced by its evaluated value. Unknown
   names and the version marker ${#} are kept verbatim.
2. If ${#} survived, the destination directory is scanned and every
   marker is replaced by the next free version number.

Phase 1 is pure. Phase 2 is the only step that touches the filesystem.
"""

import logging
import re
from pathlib import Path

from core import (
    VERSION_MARKER,
    VERSION_PLACEHOLDER,
    Filesystem,
    Notifier,
    ProjectRootLocator,
    ResolutionContext,
    VersionStatus,
)
from scadexport.config import ExportConfig
from scadexport.notify import LoggingNotifier
from template_resolver.context_builder import ContextBuilder
from template_resolver.evaluator import evaluate
from template_resolver.registry import get_registry
from template_resolver.versioning import VersionScanner

logger = logging.getLogger(__name__)

# Non-greedy so "${a}.${b}" yields two matches
VARIABLE_PATTERN = re.compile(r"\$\{(.*?)\}")

SCAN_FAILED_MESSAGE = "Could not read files in directory specified for export"


class TemplateResolver:
    """Resolves naming patterns for exported files.

    Usage:
        resolver = TemplateResolver(config, locator=WorkspaceFolders(["/proj"]))
        name = await resolver.resolve_for_file("/proj/src/part.scad", export_extension="stl")
        # -> "part.stl"

    The config is read-only; the resolver keeps no state between calls.
    """

    def __init__(
        self,
        config: ExportConfig | None = None,
        *,
        locator: ProjectRootLocator | None = None,
        notifier: Notifier | None = None,
        filesystem: Filesystem | None = None,
    ):
        self._config = config or ExportConfig()
        self._context_builder = ContextBuilder(locator)
        self._notifier = notifier or LoggingNotifier()
        self._scanner = VersionScanner(filesystem)

    @property
    def config(self) -> ExportConfig:
        return self._config

    def substitute(self, pattern: str, ctx: ResolutionContext) -> str:
        """Replace every placeholder except ${#} (phase 1, no I/O)."""
        export_extension = ctx.export_extension or self._config.default_export_extension
        return VARIABLE_PATTERN.sub(
            lambda m: evaluate(m.group(1), ctx, export_extension),
            pattern,
        )

    async def resolve(self, pattern: str | None, ctx: ResolutionContext) -> str:
        """Resolve a naming pattern for a file.

        Args:
            pattern: Naming pattern; the configured default when None
            ctx: Context of the file being exported

        Returns:
            The resolved name. If the version scan fails the user is
            notified and ${#} is left in the result.
        """
        if pattern is None:
            pattern = self._config.export_name_format
        replaced = self.substitute(pattern, ctx)

        outcome = await self._scanner.next_version(replaced, ctx)
        logger.debug("[RESOLVER] Version for %s: %s", ctx.file, outcome.code)

        if outcome.status is VersionStatus.NOT_REQUESTED:
            return replaced
        if outcome.status is VersionStatus.SCAN_FAILED:
            self._notifier.error(SCAN_FAILED_MESSAGE)
            return replaced
        return replaced.replace(VERSION_PLACEHOLDER, str(outcome.number))

    async def resolve_for_file(
        self,
        file: Path | str,
        pattern: str | None = None,
        export_extension: str | None = None,
    ) -> str:
        """Build the context for file through the locator, then resolve."""
        ctx = self._context_builder.build(file, export_extension)
        return await self.resolve(pattern, ctx)

    def preview_variables(self, ctx: ResolutionContext) -> dict[str, str]:
        """Evaluate every known variable for ctx (diagnostics).

        Returns:
            Mapping of variable name to value, including the untouched
            version marker
        """
        export_extension = ctx.export_extension or self._config.default_export_extension
        preview = {}
        for name in [*get_registry().names(), VERSION_MARKER]:
            preview[name] = evaluate(name, ctx, export_extension)
            logger.debug("[RESOLVER] %s : %s", name, preview[name])
        return preview


_default_resolver: TemplateResolver | None = None


async def resolve(pattern: str | None, ctx: ResolutionContext) -> str:
    """Resolve a pattern with a default-configured resolver."""
    global _default_resolver
    if _default_resolver is None:
        _default_resolver = TemplateResolver()
    return await _default_resolver.resolve(pattern, ctx)
