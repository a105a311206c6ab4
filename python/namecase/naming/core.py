"""
Core name variation generation.
"""

from .cases import to_camel_case, to_kebab_case, to_pascal_case, to_snake_case, to_title_case
from .constants import VARIANT_KEYS
from .inflection import pluralize, singularize


def generate_variants(name: str) -> dict[str, str]:
    """
    Generate every identifier a generator needs from one user-supplied name.

    Pascal, camel and Title Case are derived from the snake_case form, so
    "UserProfile", "userProfile", "user_profile" and "user-profile" all map
    to the same family.

    Args:
        name: Name as typed on the command line (any case convention)

    Returns:
        Dictionary with keys:
        - name: Original input name
        - snake_case: user_profile
        - pascal_case: UserProfile
        - camel_case: userProfile
        - kebab_case: user-profile
        - title_case: User Profile
        - plural / singular: inflected original name
        - plural_snake_case: user_profiles (table names)
        - plural_pascal_case: UserProfiles
        - singular_snake_case: user_profile
        - singular_pascal_case: UserProfile

    Examples:
        >>> generate_variants("Category")["plural_snake_case"]
        'categories'

    Edge Cases:
        - Empty name: every value is ""
        - Acronyms split per letter: "APIKey" → "a_p_i_key"
    """
    snake = to_snake_case(name)
    pascal = to_pascal_case(snake)

    variants = {
        "name": name,
        "snake_case": snake,
        "pascal_case": pascal,
        "camel_case": to_camel_case(snake),
        "kebab_case": to_kebab_case(snake),
        "title_case": to_title_case(snake),
        "plural": pluralize(name),
        "singular": singularize(name),
        "plural_snake_case": pluralize(snake),
        "plural_pascal_case": pluralize(pascal),
        "singular_snake_case": singularize(snake),
        "singular_pascal_case": singularize(pascal),
    }

    return {key: variants[key] for key in VARIANT_KEYS}
