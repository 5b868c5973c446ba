"""Tests for selecting constant custom properties by name."""

import re

import pytest

from cssconsts.constants import ConstantMatcher, NO_LOWER_CASE


class TestDefaultMatcher:
    """Default rule: names without lowercase ASCII letters."""

    @pytest.mark.parametrize("name", [
        "--CONSTANT-HERE",
        "--BRAND_RED",
        "--SPACING-2",
        "--Z",
    ])
    def test_uppercase_names_match(self, name):
        assert ConstantMatcher().matches(name)

    @pytest.mark.parametrize("name", [
        "--not-a-constant",
        "--Mixed-Case",
        "--SIZEs",
    ])
    def test_names_with_lowercase_do_not_match(self, name):
        assert not ConstantMatcher().matches(name)

    def test_default_pattern_is_shared_constant(self):
        assert ConstantMatcher().pattern is NO_LOWER_CASE


class TestCustomPattern:
    """Caller-supplied patterns are searched against the full name."""

    def test_compiled_pattern(self):
        matcher = ConstantMatcher(re.compile(r'^--const-'))

        assert matcher.matches("--const-primary")
        assert not matcher.matches("--PRIMARY")

    def test_pattern_string_is_compiled(self):
        matcher = ConstantMatcher(r'^--theme-')

        assert matcher.matches("--theme-bg")
        assert not matcher.matches("--bg")

    def test_pattern_sees_prefix(self):
        """The -- prefix is part of the tested name."""
        matcher = ConstantMatcher(r'^--')

        assert matcher.matches("--anything")

    def test_search_semantics(self):
        """Unanchored patterns match anywhere in the name."""
        matcher = ConstantMatcher(r'color')

        assert matcher.matches("--brand-color-1")
