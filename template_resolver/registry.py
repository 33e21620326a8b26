"""Variable registry and registration decorator.

This module provides the central registry for all naming-pattern variables.
Variables are registered using the @register_variable decorator, which
captures metadata alongside the extraction function.

An extractor returns the variable's value, or None when the context does
not carry enough information to produce one. The evaluator turns None into
the literal placeholder so unresolved names stay visible in the output.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from core import ResolutionContext

logger = logging.getLogger(__name__)

# Type alias for extractor functions
Extractor = Callable[["ResolutionContext"], "str | None"]


class Category(Enum):
    """Variable categories for organization and documentation."""

    WORKSPACE = auto()  # workspaceFolder, relativeFile
    FILE = auto()  # file, fileBasename, fileExtname
    EXPORT = auto()  # exportExtension


@dataclass(frozen=True)
class VariableDefinition:
    """Complete definition of a pattern variable."""

    name: str
    category: Category
    extractor: Extractor
    description: str = ""
    example: str = ""  # value for /proj/src/part.scad exported as stl


class VariableRegistry:
    """Singleton registry for all pattern variables.

    Variables are registered via the @register_variable decorator.
    The registry provides lookup and introspection capabilities.
    """

    _instance: "VariableRegistry | None" = None
    _variables: dict[str, VariableDefinition]

    def __new__(cls) -> "VariableRegistry":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._variables = {}
        return cls._instance

    def register(
        self,
        name: str,
        category: Category,
        extractor: Extractor,
        description: str = "",
        example: str = "",
    ) -> None:
        """Register a variable definition."""
        if name in self._variables:
            logger.warning("[REGISTRY] Variable '%s' already registered, overwriting", name)
        self._variables[name] = VariableDefinition(
            name=name,
            category=category,
            extractor=extractor,
            description=description,
            example=example,
        )

    def get(self, name: str) -> VariableDefinition | None:
        """Get a variable definition by name."""
        return self._variables.get(name)

    def all_variables(self) -> list[VariableDefinition]:
        """Get all registered variables."""
        return list(self._variables.values())

    def by_category(self, category: Category) -> list[VariableDefinition]:
        """Get all variables in a category."""
        return [v for v in self._variables.values() if v.category == category]

    def names(self) -> list[str]:
        """Get registered variable names in registration order."""
        return list(self._variables)

    def count(self) -> int:
        """Get total number of registered variables."""
        return len(self._variables)

    def unregister(self, name: str) -> bool:
        """Remove a variable (mainly for testing)."""
        if name in self._variables:
            del self._variables[name]
            return True
        return False


def register_variable(
    name: str,
    category: Category,
    description: str = "",
    example: str = "",
) -> Callable[[Extractor], Extractor]:
    """Decorator to register a variable extractor.

    Usage:
        @register_variable(
            name="fileBasename",
            category=Category.FILE,
            description="File name including extension",
            example="part.scad",
        )
        def extract_file_basename(ctx: ResolutionContext) -> str:
            return ctx.file.name
    """

    def decorator(func: Extractor) -> Extractor:
        VariableRegistry().register(name, category, func, description, example)
        return func

    return decorator


def get_registry() -> VariableRegistry:
    """Get the singleton variable registry."""
    return VariableRegistry()
