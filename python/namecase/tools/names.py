"""
Name tools - the naming engine as text/JSON operations.

Each operation has a raising form (derive_variants, derive_case,
derive_inflection) used by the CLI, and an MCP-facing form (name_variants,
convert_case, inflect) that turns NameToolError into a readable
"Error: ..." string, so MCP clients always get a result.
"""

import logging
from typing import Any, Literal, Optional, Union

from namecase.naming import (
    CaseVariant,
    InvalidIdentifierError,
    PLURAL_RULES,
    SINGULAR_RULES,
    convert,
    generate_variants,
    matching_rule,
    require_valid_identifier,
)
from namecase.naming.constants import INFLECTION_DIRECTIONS
from namecase.naming.text import pad_right

logger = logging.getLogger("namecase.tools")

OutputFormat = Literal["text", "json"]


class NameToolError(ValueError):
    """Bad tool input: unknown variant or direction, or a rejected name."""


def _variant_names() -> str:
    return ", ".join(v.value for v in CaseVariant)


def _convert(name: str, variant: str) -> str:
    try:
        return convert(name, variant)
    except ValueError:
        raise NameToolError(
            f"Unknown case variant '{variant}'. Expected one of: {_variant_names()}"
        ) from None


def format_variants_as_text(variants: dict[str, str]) -> str:
    """
    Render a variant mapping as an aligned two-column table.

    Values are printed in full; they are identifiers meant to be copied.

    Example:
        name                  UserProfile
        snake_case            user_profile
        ...
    """
    if not variants:
        return ""
    width = max(len(key) for key in variants) + 2
    return "\n".join(pad_right(key, width) + value for key, value in variants.items())


def derive_variants(
    name: str,
    output_format: OutputFormat = "text",
    strict: bool = False,
) -> Union[dict[str, str], str]:
    """
    Raising form of name_variants.

    Raises:
        NameToolError: strict is set and name is not a valid identifier
    """
    if strict:
        try:
            require_valid_identifier(name)
        except InvalidIdentifierError as e:
            raise NameToolError(str(e)) from e

    variants = generate_variants(name)
    logger.debug(f"name_variants({name!r}) -> {len(variants)} variants")

    if output_format == "json":
        return variants
    return format_variants_as_text(variants)


def derive_case(
    name: str,
    variant: str,
    output_format: OutputFormat = "text",
) -> Union[dict[str, str], str]:
    """
    Raising form of convert_case.

    Raises:
        NameToolError: variant is not a known case variant
    """
    value = _convert(name, variant)

    if output_format == "json":
        return {"name": name, "variant": CaseVariant(variant).value, "value": value}
    return value


def derive_inflection(
    word: str,
    direction: str = "plural",
    variant: Optional[str] = None,
    output_format: OutputFormat = "text",
) -> Union[dict[str, Any], str]:
    """
    Raising form of inflect.

    Raises:
        NameToolError: unknown direction or case variant
    """
    if direction not in INFLECTION_DIRECTIONS:
        raise NameToolError(f"Unknown direction '{direction}'. Expected 'plural' or 'singular'")

    source = _convert(word, variant) if variant is not None else word

    rules = PLURAL_RULES if direction == "plural" else SINGULAR_RULES
    rule = matching_rule(source, rules)
    result = rule.apply(source) if rule else source

    if output_format == "json":
        return {
            "word": word,
            "source": source,
            "direction": direction,
            "result": result,
            "rule": rule.name if rule else None,
        }
    return result


def name_variants(
    name: str,
    output_format: OutputFormat = "text",
    strict: bool = False,
) -> Union[dict[str, str], str]:
    """
    Derive every identifier form of a name.

    Args:
        name: Name to derive from (PascalCase, camelCase, snake_case or kebab-case)
        output_format: "text" (aligned table, default) or "json" (dict)
        strict: Reject names that are not valid identifiers

    Returns:
        Text table, variant dict, or an "Error: ..." message
    """
    try:
        return derive_variants(name, output_format=output_format, strict=strict)
    except NameToolError as e:
        logger.warning(f"name_variants rejected name: {e}")
        return f"Error: {e}"


def convert_case(
    name: str,
    variant: str,
    output_format: OutputFormat = "text",
) -> Union[dict[str, str], str]:
    """
    Convert a name to a single case variant.

    Args:
        name: Input name
        variant: One of snake_case, pascal_case, camel_case, kebab_case, title_case
        output_format: "text" (just the converted name) or "json"

    Returns:
        Converted name, {"name", "variant", "value"} dict, or an "Error: ..." message
    """
    try:
        return derive_case(name, variant, output_format=output_format)
    except NameToolError as e:
        logger.warning(f"convert_case failed: {e}")
        return f"Error: {e}"


def inflect(
    word: str,
    direction: Literal["plural", "singular"] = "plural",
    variant: Optional[str] = None,
    output_format: OutputFormat = "text",
) -> Union[dict[str, Any], str]:
    """
    Pluralize or singularize a word, optionally after a case conversion.

    Args:
        word: Word or identifier to inflect
        direction: "plural" or "singular"
        variant: Case variant applied before inflecting (e.g. "snake_case" for table names)
        output_format: "text" (just the result) or "json" (result plus the rule that fired)

    Returns:
        Inflected word, result dict, or an "Error: ..." message
    """
    try:
        return derive_inflection(word, direction, variant=variant, output_format=output_format)
    except NameToolError as e:
        logger.warning(f"inflect failed: {e}")
        return f"Error: {e}"
