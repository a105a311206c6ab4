"""Tool implementations shared by the MCP server and the CLI."""

from namecase.tools.names import (
    NameToolError,
    convert_case,
    derive_case,
    derive_inflection,
    derive_variants,
    inflect,
    name_variants,
)

__all__ = [
    "NameToolError",
    "convert_case",
    "derive_case",
    "derive_inflection",
    "derive_variants",
    "inflect",
    "name_variants",
]
