"""Tests for harvesting constants from the :root rule."""

import re

from cssconsts.constants import ConstantCollector, ConstantMatcher
from cssconsts.stylesheet import parse_stylesheet


def decl_names(rule):
    return [decl.name for decl in rule.declarations]


class TestConstantCollector:
    """Collection, ordering and removal."""

    def test_collects_and_removes_matching_declarations(self):
        sheet = parse_stylesheet(":root { --RED: #f00; --GAP: 4px; }")

        constants = ConstantCollector().collect(sheet)

        assert constants == {"RED": "#f00", "GAP": "4px"}
        assert sheet.nodes[0].declarations == []

    def test_non_matching_declarations_stay(self):
        """Lowercase custom properties and ordinary properties are untouched."""
        sheet = parse_stylesheet(":root { --RED: #f00; --theme: dark; color: black; }")

        constants = ConstantCollector().collect(sheet)

        assert constants == {"RED": "#f00"}
        assert decl_names(sheet.nodes[0]) == ["--theme", "color"]

    def test_prefix_required_even_if_pattern_matches(self):
        sheet = parse_stylesheet(":root { COLOR: red; --A: 1; }")

        constants = ConstantCollector(ConstantMatcher(r'.*')).collect(sheet)

        assert constants == {"A": "1"}
        assert decl_names(sheet.nodes[0]) == ["COLOR"]

    def test_later_constant_sees_earlier_one(self):
        sheet = parse_stylesheet(":root { --A: red; --B: var(--A); }")

        constants = ConstantCollector().collect(sheet)

        assert constants == {"A": "red", "B": "red"}

    def test_earlier_constant_does_not_see_later_one(self):
        """Declaration order is authoritative; forward references stay."""
        sheet = parse_stylesheet(":root { --B: var(--A); --A: red; }")

        constants = ConstantCollector().collect(sheet)

        assert constants == {"B": "var(--A)", "A": "red"}

    def test_transitive_chain(self):
        sheet = parse_stylesheet(":root { --A: 2px; --B: var(--A); --C: calc(var(--B) * 2); }")

        constants = ConstantCollector().collect(sheet)

        assert constants["C"] == "calc(2px * 2)"

    def test_redeclaration_overwrites(self):
        sheet = parse_stylesheet(":root { --A: red; --A: blue; }")

        constants = ConstantCollector().collect(sheet)

        assert constants == {"A": "blue"}

    def test_only_first_root_rule_is_harvested(self):
        sheet = parse_stylesheet(":root { --A: 1; } :root { --B: 2; }")

        constants = ConstantCollector().collect(sheet)

        assert constants == {"A": "1"}
        assert decl_names(sheet.nodes[1]) == ["--B"]

    def test_root_inside_at_rule_is_found(self):
        sheet = parse_stylesheet("@media screen { :root { --A: 1; } }")

        constants = ConstantCollector().collect(sheet)

        assert constants == {"A": "1"}

    def test_nested_rules_in_root_are_not_harvested(self):
        sheet = parse_stylesheet(":root { --A: 1; .x { --B: 2; } }")

        constants = ConstantCollector().collect(sheet)

        assert constants == {"A": "1"}
        nested = sheet.nodes[0].nodes[0]
        assert decl_names(nested) == ["--B"]

    def test_selector_must_match_exactly(self):
        sheet = parse_stylesheet("html:root { --A: 1; } :root, html { --B: 2; }")

        assert ConstantCollector().collect(sheet) == {}

    def test_custom_matcher(self):
        sheet = parse_stylesheet(":root { --const-a: 1; --B: 2; }")

        constants = ConstantCollector(ConstantMatcher(re.compile(r'^--const-'))).collect(sheet)

        assert constants == {"const-a": "1"}
        assert decl_names(sheet.nodes[0]) == ["--B"]

    def test_no_root_rule(self):
        sheet = parse_stylesheet(".a { --A: 1; }")

        assert ConstantCollector().collect(sheet) == {}
        assert decl_names(sheet.nodes[0]) == ["--A"]


class TestSeededCollection:
    """Extending an existing table in place."""

    def test_seed_is_mutated_and_returned(self):
        seed = {"X": "1"}
        sheet = parse_stylesheet(":root { --Y: var(--X); }")

        constants = ConstantCollector().collect(sheet, seed)

        assert constants is seed
        assert constants == {"X": "1", "Y": "1"}

    def test_local_overrides_seed(self):
        seed = {"X": "1"}
        sheet = parse_stylesheet(":root { --X: 2; }")

        assert ConstantCollector().collect(sheet, seed) == {"X": "2"}
