"""Export variables: values supplied by the caller for this export."""

from core import ResolutionContext
from template_resolver.registry import Category, register_variable


@register_variable(
    name="exportExtension",
    category=Category.EXPORT,
    description="Extension of the exported file, without the dot",
    example="stl",
)
def extract_export_extension(ctx: ResolutionContext) -> str | None:
    # Empty string counts as "not supplied"
    return ctx.export_extension or None
