"""
Tests for case conversion and word boundary detection.
"""

import pytest

from namecase.naming import (
    CaseVariant,
    convert,
    split_words,
    to_camel_case,
    to_kebab_case,
    to_pascal_case,
    to_snake_case,
    to_title_case,
)

SAMPLE_NAMES = [
    "",
    "x",
    "HelloWorld",
    "helloWorld",
    "hello_world",
    "hello-world",
    "HTTPSConnection",
    "OAuth2Client",
    "__init__",
    "user--profile",
    "ÜberName",
    "!!!",
    "123",
    "with space",
]


class TestSplitWords:
    """Test word boundary detection."""

    def test_pascal_case(self):
        assert split_words("UserProfile") == ["User", "Profile"]

    def test_camel_case(self):
        assert split_words("userProfile") == ["user", "Profile"]

    def test_separators(self):
        assert split_words("user_profile-image") == ["user", "profile", "image"]

    def test_uppercase_after_separator_does_not_create_empty_word(self):
        assert split_words("User_Profile") == ["User", "Profile"]

    def test_acronyms_split_per_letter(self):
        assert split_words("HTTPS") == ["H", "T", "T", "P", "S"]

    def test_digits_stay_with_previous_word(self):
        assert split_words("OAuth2Client") == ["O", "Auth2", "Client"]

    def test_empty_and_separator_only(self):
        assert split_words("") == []
        assert split_words("__--") == []


class TestSnakeCase:
    """Test to_snake_case."""

    def test_pascal_input(self):
        assert to_snake_case("HelloWorld") == "hello_world"

    def test_single_word(self):
        assert to_snake_case("hello") == "hello"

    def test_camel_input(self):
        assert to_snake_case("userProfileImage") == "user_profile_image"

    def test_kebab_input(self):
        assert to_snake_case("user-profile") == "user_profile"

    def test_acronym_quirk(self):
        """Consecutive capitals are not grouped."""
        assert to_snake_case("HTTPSConnection") == "h_t_t_p_s_connection"

    def test_empty(self):
        assert to_snake_case("") == ""

    def test_redundant_separators_collapse(self):
        assert to_snake_case("__init__") == "init"
        assert to_snake_case("user--profile") == "user_profile"

    def test_non_ascii(self):
        assert to_snake_case("ÜberName") == "über_name"

    def test_non_alphabetic_passthrough(self):
        assert to_snake_case("123") == "123"
        assert to_snake_case("!!!") == "!!!"

    @pytest.mark.parametrize("name", SAMPLE_NAMES)
    def test_idempotent(self, name):
        once = to_snake_case(name)
        assert to_snake_case(once) == once


class TestPascalCase:
    """Test to_pascal_case."""

    def test_snake_input(self):
        assert to_pascal_case("hello_world") == "HelloWorld"

    def test_single_word(self):
        assert to_pascal_case("hello") == "Hello"

    def test_multiple_words(self):
        assert to_pascal_case("user_profile_image") == "UserProfileImage"

    def test_remainder_case_preserved(self):
        assert to_pascal_case("user_iD") == "UserID"
        assert to_pascal_case("UserProfile") == "UserProfile"

    def test_hyphen_is_not_a_boundary(self):
        assert to_pascal_case("user-profile") == "User-profile"

    def test_empty_and_underscores_only(self):
        assert to_pascal_case("") == ""
        assert to_pascal_case("___") == ""

    def test_round_trip_through_snake(self):
        assert to_pascal_case(to_snake_case("UserProfile")) == "UserProfile"


class TestCamelCase:
    """Test to_camel_case."""

    def test_snake_input(self):
        assert to_camel_case("user_profile") == "userProfile"

    def test_pascal_input(self):
        assert to_camel_case("UserProfile") == "userProfile"

    def test_empty(self):
        assert to_camel_case("") == ""

    @pytest.mark.parametrize("name", SAMPLE_NAMES + ["_Abc", "ABC_DEF"])
    def test_first_character_lowered(self, name):
        result = to_camel_case(name)
        if result:
            assert not result[0].isupper()

    @pytest.mark.parametrize("name", ["\u03d2x", "\u210bx"])
    def test_capital_without_lowercase_form_kept(self, name):
        """'ϒ' and 'ℋ' are uppercase but have no lowercase mapping."""
        assert name[0].isupper()
        assert to_camel_case(name) == name


class TestKebabCase:
    """Test to_kebab_case."""

    def test_pascal_input(self):
        assert to_kebab_case("UserProfile") == "user-profile"

    @pytest.mark.parametrize("name", SAMPLE_NAMES)
    def test_matches_snake_with_hyphens(self, name):
        assert to_kebab_case(name) == to_snake_case(name).replace("_", "-")


class TestTitleCase:
    """Test to_title_case."""

    def test_snake_input(self):
        assert to_title_case("user_profile") == "User Profile"

    def test_single_space_between_words(self):
        assert to_title_case("user__profile_") == "User Profile"

    def test_remainder_case_preserved(self):
        assert to_title_case("api_KEY") == "Api KEY"

    def test_empty(self):
        assert to_title_case("") == ""


class TestConvert:
    """Test dispatch by CaseVariant."""

    def test_accepts_enum_members(self):
        assert convert("UserProfile", CaseVariant.KEBAB_CASE) == "user-profile"

    def test_accepts_values(self):
        assert convert("user_profile", "pascal_case") == "UserProfile"
        assert convert("user_profile", "title_case") == "User Profile"

    def test_unknown_variant(self):
        with pytest.raises(ValueError):
            convert("user", "screaming_case")

    def test_snake_then_pascal_keeps_boundaries(self):
        """A→snake→Pascal equals A→Pascal for inputs already in snake_case."""
        for name in ["user_profile", "order_line_item", "user"]:
            assert convert(convert(name, "snake_case"), "pascal_case") == convert(name, "pascal_case")
