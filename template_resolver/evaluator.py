"""Single-variable evaluation.

Maps one placeholder name to its value using the variable registry.
Anything that cannot be resolved comes back as the original placeholder
text, so callers can tell "no match" apart from an empty value.
"""

import dataclasses
import logging

from core import VERSION_MARKER, ResolutionContext
from template_resolver.registry import get_registry

logger = logging.getLogger(__name__)


def placeholder(name: str) -> str:
    """Return the ${name} form of a variable name."""
    return "${" + name + "}"


def evaluate(
    name: str,
    ctx: ResolutionContext,
    export_extension: str | None = None,
) -> str:
    """Evaluate a single variable against a resolution context.

    Args:
        name: Variable name without the ${} delimiters
        ctx: File location, project root and export extension
        export_extension: Overrides ctx.export_extension when non-empty

    Returns:
        The variable value, or "${name}" for the version marker, unknown
        names, and variables the context cannot supply.
    """
    original = placeholder(name)

    # Resolved later by the version scanner
    if name == VERSION_MARKER:
        return original

    var_def = get_registry().get(name)
    if var_def is None:
        logger.debug("[EVALUATE] Unknown variable %s left as-is", original)
        return original

    if export_extension:
        ctx = dataclasses.replace(ctx, export_extension=export_extension)

    try:
        value = var_def.extractor(ctx)
    except ValueError as e:
        logger.debug("[EVALUATE] Could not resolve %s for %s: %s", original, ctx.file, e)
        return original

    if value is None:
        logger.debug("[EVALUATE] No value for %s (file=%s)", original, ctx.file)
        return original
    return value
