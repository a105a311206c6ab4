"""
Identifier parsing: word boundary detection.
"""

from .constants import WORD_SEPARATORS

# Scanner states (class of the previous character)
_START = 0  # Nothing consumed yet, or just after a separator
_IN_LOWER_RUN = 1  # Inside a run of non-uppercase characters
_IN_UPPER_TRANSITION = 2  # Previous character was uppercase


def split_words(identifier: str) -> list[str]:
    """
    Split an identifier into words.

    Boundaries are detected in a single left-to-right pass:
    - '_' and '-' are explicit boundaries and are discarded
    - every uppercase letter starts a new word

    Consecutive uppercase letters are NOT grouped into an acronym, so
    "HTTPServer" yields one word per capital. File names produced by the
    generators depend on this exact mapping.

    Args:
        identifier: Free-form name (PascalCase, camelCase, snake_case, kebab-case)

    Returns:
        Words in their original case, without empty entries

    Examples:
        >>> split_words("UserProfile")
        ['User', 'Profile']

        >>> split_words("user-profile_image")
        ['user', 'profile', 'image']

        >>> split_words("HTTPS")
        ['H', 'T', 'T', 'P', 'S']

    Edge Cases:
        - Empty string: []
        - Separators only: "__" → []
        - Digits stay with the preceding word: "OAuth2Client" → ["O", "Auth2", "Client"]
    """
    words: list[str] = []
    current: list[str] = []
    state = _START

    for char in identifier:
        if char in WORD_SEPARATORS:
            if current:
                words.append("".join(current))
                current = []
            state = _START
        elif char.isupper():
            if state != _START:
                words.append("".join(current))
                current = []
            current.append(char)
            state = _IN_UPPER_TRANSITION
        else:
            current.append(char)
            state = _IN_LOWER_RUN

    if current:
        words.append("".join(current))

    return words


def lower_chars(text: str) -> str:
    """Lower-case one character at a time, with no context-sensitive rules."""
    return "".join(char.lower() for char in text)
