"""
Pluralization and singularization for generated identifiers.

Both directions are ordered rule tables: each rule is tested against the
lower-cased word and the first match rewrites the original-cased word.
These are best-effort English heuristics, not dictionary lookups, and some
irregular plurals come out wrong on purpose ("leaves" → "leave").
"""

from dataclasses import dataclass
from typing import Callable

from .constants import (
    F_STEM_MARKER,
    FE_STEM_PLURALS,
    SIBILANT_SUFFIXES,
    VOWEL_Y_ENDINGS,
)


@dataclass(frozen=True)
class InflectionRule:
    """One step of an inflection table."""

    name: str
    matches: Callable[[str], bool]  # receives the lower-cased word
    apply: Callable[[str], str]  # receives the original word


def _final_segment(lower_word: str) -> str:
    return lower_word.rsplit("_", 1)[-1].rsplit("-", 1)[-1]


def _is_f_stem_ves(lower_word: str) -> bool:
    return len(lower_word) > 3 and lower_word[-4] == F_STEM_MARKER


def _is_fe_stem_ves(lower_word: str) -> bool:
    return _final_segment(lower_word) in FE_STEM_PLURALS


PLURAL_RULES: tuple[InflectionRule, ...] = (
    InflectionRule(
        "sibilant",
        lambda lower: lower.endswith(SIBILANT_SUFFIXES),
        lambda word: word + "es",
    ),
    InflectionRule(
        "consonant_y",
        lambda lower: lower.endswith("y") and not lower.endswith(VOWEL_Y_ENDINGS),
        lambda word: word[:-1] + "ies",
    ),
    InflectionRule(
        "fe",
        lambda lower: lower.endswith("fe"),
        lambda word: word[:-2] + "ves",
    ),
    InflectionRule(
        "f",
        lambda lower: lower.endswith("f"),
        lambda word: word[:-1] + "ves",
    ),
    InflectionRule(
        "regular",
        lambda lower: True,
        lambda word: word + "s",
    ),
)

SINGULAR_RULES: tuple[InflectionRule, ...] = (
    InflectionRule(
        "ies",
        lambda lower: lower.endswith("ies"),
        lambda word: word[:-3] + "y",
    ),
    InflectionRule(
        "ves_f",
        lambda lower: lower.endswith("ves") and _is_f_stem_ves(lower),
        lambda word: word[:-3] + "f",
    ),
    InflectionRule(
        "ves_fe",
        lambda lower: lower.endswith("ves") and _is_fe_stem_ves(lower),
        lambda word: word[:-3] + "fe",
    ),
    InflectionRule(
        "sibilant_es",
        lambda lower: lower.endswith("es") and lower[:-2].endswith(SIBILANT_SUFFIXES),
        lambda word: word[:-2],
    ),
    InflectionRule(
        "trailing_s",
        lambda lower: lower.endswith("s") and len(lower) > 1,
        lambda word: word[:-1],
    ),
)


def apply_rules(word: str, rules: tuple[InflectionRule, ...]) -> str:
    """Rewrite word with the first matching rule, or return it unchanged."""
    if not word:
        return word

    lower_word = word.lower()
    for rule in rules:
        if rule.matches(lower_word):
            return rule.apply(word)
    return word


def matching_rule(word: str, rules: tuple[InflectionRule, ...]) -> InflectionRule | None:
    """Return the rule that would rewrite word, if any."""
    if not word:
        return None

    lower_word = word.lower()
    return next((rule for rule in rules if rule.matches(lower_word)), None)


def pluralize(word: str) -> str:
    """
    Convert a singular word to its plural form.

    Examples:
        >>> pluralize("cat")
        'cats'

        >>> pluralize("box")
        'boxes'

        >>> pluralize("city")
        'cities'

        >>> pluralize("leaf")
        'leaves'

    Edge Cases:
        - Empty string: returned unchanged
        - Case of the input is kept: "Box" → "Boxes"
        - Already plural words are pluralized again: "cats" → "catses"
    """
    return apply_rules(word, PLURAL_RULES)


def singularize(word: str) -> str:
    """
    Convert a plural word to its singular form.

    "ves" words are only rewritten when the stem is recognizably an f/fe
    stem: an 'l' before "ves" (wolves → wolf) or a known fe plural
    (knives → knife). Anything else falls through to the trailing-s rule.

    Examples:
        >>> singularize("cities")
        'city'

        >>> singularize("boxes")
        'box'

        >>> singularize("leaves")
        'leave'

    Edge Cases:
        - Empty string or "s": returned unchanged
        - Singular input: "status" → "statu" (no false-plural detection)
    """
    return apply_rules(word, SINGULAR_RULES)
