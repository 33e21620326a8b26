"""Workspace variables: project root and paths relative to it.

All of these need the file's project root. Files outside every known
root resolve to None, which the evaluator renders as the literal
placeholder.
"""

import os

from core import ResolutionContext
from template_resolver.registry import Category, register_variable


@register_variable(
    name="workspaceFolder",
    category=Category.WORKSPACE,
    description="Absolute path of the project root",
    example="/proj",
)
def extract_workspace_folder(ctx: ResolutionContext) -> str | None:
    if ctx.workspace_folder is None:
        return None
    return str(ctx.workspace_folder) or None


@register_variable(
    name="workspaceFolderBasename",
    category=Category.WORKSPACE,
    description="Name of the project root folder",
    example="proj",
)
def extract_workspace_folder_basename(ctx: ResolutionContext) -> str | None:
    if ctx.workspace_folder is None:
        return None
    # A filesystem root has no name
    return ctx.workspace_folder.name or None


@register_variable(
    name="relativeFile",
    category=Category.WORKSPACE,
    description="File path relative to the project root",
    example="src/part.scad",
)
def extract_relative_file(ctx: ResolutionContext) -> str | None:
    if ctx.workspace_folder is None:
        return None
    # Raises ValueError on Windows when file and root sit on different drives
    return os.path.relpath(ctx.file, ctx.workspace_folder)
