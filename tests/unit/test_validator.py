from tests.helpers.autocomplete_imports import AutocompleteValidity, autocomplete

is_valid_autocomplete = autocomplete.is_valid_autocomplete


def test_missing_attribute_fails_on_field_name_only():
    for value in (None, ""):
        validity = is_valid_autocomplete(value)

        assert validity == AutocompleteValidity(attribute=False, prefix=True, section=True)
        assert validity.is_valid is False


def test_single_known_token_is_valid():
    validity = is_valid_autocomplete("email")

    assert validity == AutocompleteValidity(attribute=True, prefix=True, section=True)
    assert validity.is_valid


def test_single_unknown_token_is_invalid():
    validity = is_valid_autocomplete("bogus")

    assert validity == AutocompleteValidity(attribute=False, prefix=True, section=True)
    assert not validity.is_valid


def test_field_names_are_case_sensitive():
    assert not is_valid_autocomplete("Email").is_valid


def test_on_and_off_are_accepted():
    assert is_valid_autocomplete("on").is_valid
    assert is_valid_autocomplete("off").is_valid


def test_prefix_and_field_name():
    validity = is_valid_autocomplete("shipping address-line1")

    assert validity.attribute and validity.prefix and validity.section
    assert validity.is_valid


def test_unknown_prefix_is_invalid():
    validity = is_valid_autocomplete("foo email")

    assert validity == AutocompleteValidity(attribute=True, prefix=False, section=True)
    assert not validity.is_valid


def test_section_prefix_and_field_name():
    validity = is_valid_autocomplete("section-billing shipping cc-number")

    assert validity == AutocompleteValidity(attribute=True, prefix=True, section=True)


def test_section_token_requires_marker():
    validity = is_valid_autocomplete("billing shipping cc-number")

    assert validity == AutocompleteValidity(attribute=True, prefix=True, section=False)
    assert not validity.is_valid


def test_bare_section_marker_is_accepted():
    assert is_valid_autocomplete("section- home tel").is_valid


def test_three_tokens_report_every_bad_part():
    validity = is_valid_autocomplete("group foo bar")

    assert validity == AutocompleteValidity(attribute=False, prefix=False, section=False)


def test_four_tokens_fall_back_to_whole_value():
    validity = is_valid_autocomplete("section-a shipping home email")

    assert validity == AutocompleteValidity(attribute=False, prefix=True, section=True)


def test_double_space_is_not_collapsed():
    # splits into ["home", "", "email"]: the empty token is not a prefix
    validity = is_valid_autocomplete("home  email")

    assert validity == AutocompleteValidity(attribute=True, prefix=False, section=False)


def test_trailing_space_yields_empty_field_name():
    validity = is_valid_autocomplete("email ")

    assert validity == AutocompleteValidity(attribute=False, prefix=False, section=True)
