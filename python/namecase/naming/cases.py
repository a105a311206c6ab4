"""
Case conversion between identifier conventions.
"""

from enum import Enum

from .constants import KEBAB_SEPARATOR, SNAKE_SEPARATOR, TITLE_SEPARATOR
from .parsers import lower_chars, split_words
from .text import capitalize


class CaseVariant(str, Enum):
    """Supported identifier conventions. Values double as variant mapping keys."""

    SNAKE_CASE = "snake_case"
    PASCAL_CASE = "pascal_case"
    CAMEL_CASE = "camel_case"
    KEBAB_CASE = "kebab_case"
    TITLE_CASE = "title_case"


def to_snake_case(identifier: str) -> str:
    """
    Convert an identifier to snake_case.

    Examples:
        >>> to_snake_case("HelloWorld")
        'hello_world'

        >>> to_snake_case("user-profile")
        'user_profile'

        >>> to_snake_case("HTTPSConnection")
        'h_t_t_p_s_connection'
    """
    return SNAKE_SEPARATOR.join(lower_chars(word) for word in split_words(identifier))


def to_pascal_case(identifier: str) -> str:
    """
    Convert a snake_case (or single word) identifier to PascalCase.

    Only underscores are boundaries here. The first character of each word
    is upper-cased; the remainder keeps its case ("user_iD" → "UserID").

    Examples:
        >>> to_pascal_case("hello_world")
        'HelloWorld'

        >>> to_pascal_case("___")
        ''
    """
    return "".join(capitalize(word) for word in identifier.split(SNAKE_SEPARATOR))


def to_camel_case(identifier: str) -> str:
    """
    PascalCase with the first character lower-cased.

    Non-ASCII: lowering is per character, so a leading capital that has no
    lowercase mapping (such as 'ϒ' or 'ℋ') stays uppercase: "ϒx" → "ϒx".
    """
    pascal = to_pascal_case(identifier)
    return pascal[:1].lower() + pascal[1:]


def to_kebab_case(identifier: str) -> str:
    """snake_case with '-' in place of '_'."""
    return to_snake_case(identifier).replace(SNAKE_SEPARATOR, KEBAB_SEPARATOR)


def to_title_case(identifier: str) -> str:
    """
    Convert a snake_case identifier to space separated Title Case.

    Empty words from repeated underscores are skipped, so words are always
    separated by exactly one space.

    Examples:
        >>> to_title_case("user_profile")
        'User Profile'
    """
    return TITLE_SEPARATOR.join(
        capitalize(word) for word in identifier.split(SNAKE_SEPARATOR) if word
    )


_CONVERTERS = {
    CaseVariant.SNAKE_CASE: to_snake_case,
    CaseVariant.PASCAL_CASE: to_pascal_case,
    CaseVariant.CAMEL_CASE: to_camel_case,
    CaseVariant.KEBAB_CASE: to_kebab_case,
    CaseVariant.TITLE_CASE: to_title_case,
}


def convert(identifier: str, variant: CaseVariant | str) -> str:
    """
    Convert identifier to the given case variant.

    Args:
        identifier: Input name
        variant: CaseVariant member or its value ("snake_case", "kebab_case", ...)

    Raises:
        ValueError: If variant is not a known case variant
    """
    return _CONVERTERS[CaseVariant(variant)](identifier)
