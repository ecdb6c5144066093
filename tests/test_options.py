"""Unit tests for ConversionOptions.build().

WHY: Options arrive as dicts from HTTP clients, keyword arguments from
Python callers, and camelCase names from JavaScript habits. Every field
must be validated independently, and strict vs. tolerant policy must be
decided before any other field is checked.

RULES:
- Tolerant mode never raises; strict mode raises InvalidOptionError
  naming the offending field.
"""

import pytest

from case_converter.core.options import ConversionOptions
from case_converter.errors import InvalidOptionError


class TestDefaults:

    def test_build_without_arguments_returns_defaults(self):
        opts = ConversionOptions.build()
        assert opts == ConversionOptions()
        assert opts.normalize_diacritics is False
        assert opts.locale is None
        assert opts.throw_on_invalid is False
        assert opts.preserve_numbers is True
        assert opts.preserve_acronyms is False
        assert opts.pascal_case is False

    def test_options_are_frozen(self):
        opts = ConversionOptions.build()
        with pytest.raises(Exception):
            opts.pascal_case = True  # type: ignore[misc]


class TestSources:

    def test_mapping_with_snake_case_keys(self):
        opts = ConversionOptions.build({"preserve_acronyms": True, "pascal_case": True})
        assert opts.preserve_acronyms is True
        assert opts.pascal_case is True

    def test_mapping_with_camel_case_aliases(self):
        opts = ConversionOptions.build({
            "preserveAcronyms": True,
            "pascalCase": True,
            "normalizeDiacritics": True,
            "preserveNumbers": False,
        })
        assert opts.preserve_acronyms is True
        assert opts.pascal_case is True
        assert opts.normalize_diacritics is True
        assert opts.preserve_numbers is False

    def test_keyword_overrides_win_over_mapping(self):
        opts = ConversionOptions.build({"pascal_case": True}, pascal_case=False)
        assert opts.pascal_case is False

    def test_existing_record_is_copied_and_overridden(self):
        base = ConversionOptions(pascal_case=True)
        opts = ConversionOptions.build(base, preserve_acronyms=True)
        assert opts.pascal_case is True
        assert opts.preserve_acronyms is True

    def test_unknown_keys_are_ignored(self):
        opts = ConversionOptions.build({"shout": True})
        assert opts == ConversionOptions()

    def test_options_bag_of_wrong_kind_is_ignored(self):
        opts = ConversionOptions.build(["pascal_case"])  # type: ignore[arg-type]
        assert opts == ConversionOptions()


class TestBooleanFields:

    @pytest.mark.parametrize("field", [
        "normalize_diacritics",
        "preserve_numbers",
        "preserve_acronyms",
        "pascal_case",
    ])
    def test_strict_mode_rejects_non_bool(self, field):
        with pytest.raises(InvalidOptionError) as exc_info:
            ConversionOptions.build({field: "yes", "throw_on_invalid": True})
        assert exc_info.value.field == field
        assert field in str(exc_info.value)

    def test_tolerant_mode_coerces_by_truthiness(self):
        opts = ConversionOptions.build(preserve_numbers=0, pascal_case="yes")
        assert opts.preserve_numbers is False
        assert opts.pascal_case is True

    def test_non_bool_throw_flag_that_is_truthy_raises(self):
        with pytest.raises(InvalidOptionError) as exc_info:
            ConversionOptions.build(throw_on_invalid="yes")
        assert exc_info.value.field == "throw_on_invalid"

    def test_non_bool_throw_flag_that_is_falsy_is_tolerant(self):
        opts = ConversionOptions.build(throw_on_invalid=0, pascal_case="yes")
        assert opts.throw_on_invalid is False
        assert opts.pascal_case is True

    def test_error_is_a_type_error(self):
        with pytest.raises(TypeError):
            ConversionOptions.build(throw_on_invalid=True, pascal_case=1)


class TestLocale:

    def test_locale_is_normalized(self):
        assert ConversionOptions.build(locale="en_US").locale == "en-us"
        assert ConversionOptions.build(locale=" TR ").locale == "tr"

    @pytest.mark.parametrize("tag", ["", "e", "!!", "en--us", "12-ab"])
    def test_malformed_locale_falls_back_to_none(self, tag):
        assert ConversionOptions.build(locale=tag).locale is None

    def test_malformed_locale_does_not_raise_in_strict_mode(self):
        opts = ConversionOptions.build(locale="!!", throw_on_invalid=True)
        assert opts.locale is None

    def test_non_string_locale_tolerant(self):
        assert ConversionOptions.build(locale=5).locale is None

    def test_non_string_locale_strict(self):
        with pytest.raises(InvalidOptionError) as exc_info:
            ConversionOptions.build(locale=5, throw_on_invalid=True)
        assert exc_info.value.field == "locale"
