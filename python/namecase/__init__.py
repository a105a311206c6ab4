"""
namecase - identifier case conversion and inflection for code generators.

Turns one user-supplied name into the snake_case, PascalCase, camelCase,
kebab-case, Title Case and plural/singular identifiers that scaffolding
templates interpolate into file names and source text.
"""

__version__ = "0.1.0"

# DO NOT import the server here - fastmcp is only needed for the MCP entry points
from namecase.naming import (
    CaseVariant,
    generate_variants,
    pluralize,
    singularize,
    to_camel_case,
    to_kebab_case,
    to_pascal_case,
    to_snake_case,
    to_title_case,
)

__all__ = [
    "CaseVariant",
    "generate_variants",
    "pluralize",
    "singularize",
    "to_camel_case",
    "to_kebab_case",
    "to_pascal_case",
    "to_snake_case",
    "to_title_case",
]
