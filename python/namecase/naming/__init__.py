"""
Name case engine for code generators.

Derives snake_case, PascalCase, camelCase, kebab-case and Title Case
identifiers plus plural/singular forms from a single user-supplied name.
Every function here is pure and accepts any string.
"""

from .core import generate_variants
from .parsers import split_words
from .cases import (
    CaseVariant,
    convert,
    to_camel_case,
    to_kebab_case,
    to_pascal_case,
    to_snake_case,
    to_title_case,
)
from .inflection import (
    PLURAL_RULES,
    SINGULAR_RULES,
    InflectionRule,
    matching_rule,
    pluralize,
    singularize,
)
from .validation import InvalidIdentifierError, is_valid_identifier, require_valid_identifier
from .constants import FE_STEM_PLURALS, VARIANT_KEYS

__all__ = [
    "generate_variants",
    "split_words",
    "CaseVariant",
    "convert",
    "to_camel_case",
    "to_kebab_case",
    "to_pascal_case",
    "to_snake_case",
    "to_title_case",
    "PLURAL_RULES",
    "SINGULAR_RULES",
    "InflectionRule",
    "matching_rule",
    "pluralize",
    "singularize",
    "InvalidIdentifierError",
    "is_valid_identifier",
    "require_valid_identifier",
    "FE_STEM_PLURALS",
    "VARIANT_KEYS",
]
