"""Tests for case conversion and name cleanup helpers."""

import pytest

from mapping_suggester.domain.services.tokens.case_utils import (
    clean_field_name,
    contains_keywords,
    generate_case_variations,
    to_camel_case,
    to_snake_case,
)


class TestToSnakeCase:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("First Name", "first_name"),
            ("createdAt", "created_at"),
            ("already_snake", "already_snake"),
            ("E-Mail", "e_mail"),
            ("  padded  name ", "padded_name"),
            ("", ""),
        ],
    )
    def test_conversion(self, text: str, expected: str):
        assert to_snake_case(text) == expected


class TestToCamelCase:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("first_name", "firstName"),
            ("First Name", "firstName"),
            ("userId", "userId"),
            ("EMAIL", "email"),
            ("e-mail address", "eMailAddress"),
        ],
    )
    def test_conversion(self, text: str, expected: str):
        assert to_camel_case(text) == expected


class TestGenerateCaseVariations:
    def test_spaced_name(self):
        assert generate_case_variations("First Name") == {
            "first name",
            "first_name",
            "firstName",
        }

    def test_single_word_collapses(self):
        assert generate_case_variations("email") == {"email"}

    def test_empty_string_yields_nothing(self):
        assert generate_case_variations("") == set()


class TestCleanFieldName:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("field_email", "email"),
            ("column_total", "total"),
            ("col_name", "name"),
            ("email_field", "email"),
            ("price_col", "price"),
            ("Field_Email", "Email"),
            ("email", "email"),
        ],
    )
    def test_strips_prefixes_and_suffixes(self, text: str, expected: str):
        assert clean_field_name(text) == expected


class TestContainsKeywords:
    def test_case_insensitive_substring(self):
        assert contains_keywords("PhoneNumber", ["phone"])
        assert contains_keywords("work_EMAIL", ["Email"])

    def test_no_match(self):
        assert not contains_keywords("status", ["phone", "mail"])

    def test_empty_keywords(self):
        assert not contains_keywords("anything", [])
