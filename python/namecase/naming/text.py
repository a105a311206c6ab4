"""
Text helpers for formatting names in terminal and tool output.

capitalize backs Pascal/Title Case and pad_right the variant table. The
rest (truncate, pad_left, center, normalize_whitespace) are public helpers
for generator code that lays out names in templates and status messages.
"""

ELLIPSIS = "..."


def capitalize(text: str) -> str:
    """Upper-case the first character, leave the rest as-is ("hELLO" → "HELLO")."""
    return text[:1].upper() + text[1:]


def truncate(text: str, max_length: int) -> str:
    """
    Truncate text to max_length characters, marking the cut with an ellipsis.

    Examples:
        >>> truncate("user_profile_image", 10)
        'user_pr...'

        >>> truncate("user", 10)
        'user'

    Edge Cases:
        - max_length <= 3: only the ellipsis fits, returns "..."
    """
    if len(text) <= max_length:
        return text
    if max_length <= len(ELLIPSIS):
        return ELLIPSIS
    return text[: max_length - len(ELLIPSIS)] + ELLIPSIS


def pad_left(text: str, width: int) -> str:
    return text.rjust(width)


def pad_right(text: str, width: int) -> str:
    return text.ljust(width)


def center(text: str, width: int) -> str:
    return text.center(width)


def normalize_whitespace(text: str) -> str:
    """Collapse every whitespace run to a single space and strip the ends."""
    return " ".join(text.split())
