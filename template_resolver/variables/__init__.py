"""Pattern variable extractors.

Each module in this package defines variable extractors using the
@register_variable decorator. Variables are organized by category:

- workspace: workspaceFolder, workspaceFolderBasename, relativeFile
- file: file, relativeFileDirname, fileBasename, fileBasenameNoExtension,
  fileDirname, fileExtname
- export: exportExtension

The version marker ${#} is not a registered variable; it is resolved by
template_resolver.versioning after every other variable is substituted.

Import this module to register all variables with the registry.
"""

from template_resolver.registry import get_registry

# Import all variable modules to trigger registration (noqa: F401 for side-effect imports)
from template_resolver.variables import (  # noqa: F401
    export,
    file,
    workspace,
)
from template_resolver.variables.file import file_basename_no_ext

__all__ = ["file_basename_no_ext", "get_registry"]
