"""File variables: derived from the file location alone."""

from pathlib import Path

from core import ResolutionContext
from template_resolver.registry import Category, register_variable


def file_basename_no_ext(path: Path | str) -> str:
    """Return the file name without its extension."""
    return Path(path).stem


@register_variable(
    name="file",
    category=Category.FILE,
    description="Absolute path of the file",
    example="/proj/src/part.scad",
)
def extract_file(ctx: ResolutionContext) -> str:
    return str(ctx.file)


@register_variable(
    name="relativeFileDirname",
    category=Category.FILE,
    description="Name of the folder containing the file",
    example="src",
)
def extract_relative_file_dirname(ctx: ResolutionContext) -> str:
    return ctx.file.parent.name


@register_variable(
    name="fileBasename",
    category=Category.FILE,
    description="File name including extension",
    example="part.scad",
)
def extract_file_basename(ctx: ResolutionContext) -> str:
    return ctx.file.name


@register_variable(
    name="fileBasenameNoExtension",
    category=Category.FILE,
    description="File name without extension",
    example="part",
)
def extract_file_basename_no_extension(ctx: ResolutionContext) -> str:
    return file_basename_no_ext(ctx.file)


@register_variable(
    name="fileDirname",
    category=Category.FILE,
    description="Absolute path of the folder containing the file",
    example="/proj/src",
)
def extract_file_dirname(ctx: ResolutionContext) -> str:
    return str(ctx.file.parent)


@register_variable(
    name="fileExtname",
    category=Category.FILE,
    description="File extension including the leading dot",
    example=".scad",
)
def extract_file_extname(ctx: ResolutionContext) -> str:
    return ctx.file.suffix
