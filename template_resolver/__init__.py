"""Naming pattern resolution engine.

Resolves ${variable} placeholders in export naming patterns.

Usage:
    from template_resolver import TemplateResolver
    from core import ResolutionContext

    resolver = TemplateResolver()
    ctx = ResolutionContext(file=Path("/proj/src/part.scad"), workspace_folder=Path("/proj"))
    name = await resolver.resolve("${fileBasenameNoExtension}_v${#}.stl", ctx)

The resolver uses registered variable extractors for every placeholder
except ${#}, which is resolved by scanning the destination directory.
"""

from template_resolver.context_builder import ContextBuilder, build_context_for_file
from template_resolver.evaluator import evaluate
from template_resolver.registry import (
    Category,
    VariableDefinition,
    VariableRegistry,
    get_registry,
    register_variable,
)
from template_resolver.resolver import TemplateResolver, resolve
from template_resolver.variables.file import file_basename_no_ext
from template_resolver.versioning import LocalFilesystem, VersionScanner

__all__ = [
    # Main API
    "TemplateResolver",
    "resolve",
    "evaluate",
    "file_basename_no_ext",
    # Context Builder
    "ContextBuilder",
    "build_context_for_file",
    # Versioning
    "LocalFilesystem",
    "VersionScanner",
    # Registry
    "Category",
    "VariableDefinition",
    "VariableRegistry",
    "get_registry",
    "register_variable",
]

# Import all variable modules to register them
# This happens automatically when the package is imported
from template_resolver import variables  # noqa: F401
