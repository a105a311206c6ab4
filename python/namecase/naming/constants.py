"""
Constants for case conversion and inflection.
"""

# Characters that always end a word, regardless of letter case
WORD_SEPARATORS = ("_", "-")

SNAKE_SEPARATOR = "_"
KEBAB_SEPARATOR = "-"
TITLE_SEPARATOR = " "

# Pluralize: words ending in one of these take "es" (box → boxes)
SIBILANT_SUFFIXES = ("s", "sh", "ch", "x", "z")

# Pluralize: a trailing 'y' after a vowel just takes "s" (day → days)
VOWEL_Y_ENDINGS = ("ay", "ey", "iy", "oy", "uy")

# Singularize: "ves" preceded by this letter came from an 'f' stem (wolves → wolf)
F_STEM_MARKER = "l"

# Singularize: "ves" plurals whose stem ends in "fe".
# Matched against the final word of the name (pocket_knives → pocket_knife).
FE_STEM_PLURALS = frozenset(
    {
        "knives",
        "penknives",
        "jackknives",
        "wives",
        "housewives",
        "midwives",
        "lives",
    }
)

# Keys returned by generate_variants, in display order
VARIANT_KEYS = (
    "name",
    "snake_case",
    "pascal_case",
    "camel_case",
    "kebab_case",
    "title_case",
    "plural",
    "singular",
    "plural_snake_case",
    "plural_pascal_case",
    "singular_snake_case",
    "singular_pascal_case",
)

INFLECTION_DIRECTIONS = ("plural", "singular")
