"""
Identifier validation for callers of the naming engine.

The conversion functions accept any string. Generators that turn a name
into file paths or type names check it here first.
"""


class InvalidIdentifierError(ValueError):
    """Raised when a name cannot be used as a generated identifier."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(
            f"'{identifier}' is not a valid identifier: it must start with a letter "
            f"or underscore and contain only letters, digits and underscores"
        )


def is_valid_identifier(identifier: str) -> bool:
    """
    Check that identifier is usable as a type or module name.

    Examples:
        >>> is_valid_identifier("user_name")
        True

        >>> is_valid_identifier("123user")
        False

        >>> is_valid_identifier("user-name")
        False
    """
    if not identifier:
        return False

    first, rest = identifier[0], identifier[1:]
    if not (first.isalpha() or first == "_"):
        return False

    return all(char.isalnum() or char == "_" for char in rest)


def require_valid_identifier(identifier: str) -> str:
    """Return identifier unchanged, or raise InvalidIdentifierError."""
    if not is_valid_identifier(identifier):
        raise InvalidIdentifierError(identifier)
    return identifier
