"""Tests for tree_i18n.i18n.plurals module."""

import pytest

from tree_i18n.i18n.lookup import resolve_submap
from tree_i18n.i18n.plurals import find_parameter_name, find_plural_key
from tests.factories.i18n import make_tree


@pytest.fixture
def staircase_tree():
    """Plural family with thresholds 0, 5 and 10 plus an empty-suffix variant."""
    return make_tree(
        {
            "cart": {
                "items-": "no threshold",
                "items-0": "zero to four",
                "items-5": "five to nine",
                "items-10": "ten or more",
                "items-abc": "ignored",
                "itemsx-1": "other family",
            }
        }
    )


def _select(tree, key, value):
    return find_plural_key(resolve_submap(tree, key), key, value)


@pytest.mark.unit
class TestFindPluralKey:
    """Tests for find_plural_key()."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (0, "cart.items-0"),
            (4, "cart.items-0"),
            (5, "cart.items-5"),
            (9, "cart.items-5"),
            (10, "cart.items-10"),
            (1000, "cart.items-10"),
        ],
    )
    def test_staircase_selection(self, staircase_tree, value, expected):
        """The largest threshold not exceeding the value wins."""
        assert _select(staircase_tree, "cart.items", value) == expected

    def test_no_threshold_selects_empty_suffix(self, staircase_tree):
        """Values below every threshold select the base- variant."""
        assert _select(staircase_tree, "cart.items", -1) == "cart.items-"

    def test_empty_suffix_selected_when_family_has_no_thresholds(self):
        """Without numeric variants the base- key is selected for any value."""
        tree = make_tree({"cart": {"items-": "always"}})
        assert _select(tree, "cart.items", 42) == "cart.items-"

    def test_malformed_suffix_ignored(self):
        """Non-integer suffixes neither match nor raise."""
        tree = make_tree({"items": {"count-abc": "bad", "count-2": "{n} ok"}})
        assert _select(tree, "items.count", 7) == "items.count-2"

    def test_malformed_suffix_only(self):
        """A family of only malformed suffixes falls back to base-."""
        tree = make_tree({"items": {"count-abc": "bad"}})
        assert _select(tree, "items.count", 3) == "items.count-"

    def test_other_family_with_same_prefix_ignored(self):
        """Keys of a family whose name merely starts with the base are ignored."""
        tree = make_tree({"x": {"itemsx-1": "other", "items-3": "mine"}})
        assert _select(tree, "x.items", 2) == "x.items-"

    def test_negative_looking_suffix_ignored(self):
        """A second separator in the suffix disqualifies the key."""
        tree = make_tree({"x": {"count--1": "bad", "count-0": "ok"}})
        assert _select(tree, "x.count", 0) == "x.count-0"

    def test_equal_thresholds_last_in_mapping_order_wins(self):
        """Variants parsing to the same threshold resolve to the last one."""
        tree = make_tree({"x": {"count-5": "first", "count-05": "second"}})
        assert _select(tree, "x.count", 6) == "x.count-05"

    def test_top_level_family(self):
        """A single-segment key selects among root-level variants."""
        tree = make_tree({"count-0": "a", "count-2": "b"})
        assert _select(tree, "count", 3) == "count-2"

    def test_missing_family(self, staircase_tree):
        """A missing submap still yields the base- key."""
        assert _select(staircase_tree, "nowhere.items", 3) == "nowhere.items-"


@pytest.mark.unit
class TestFindParameterName:
    """Tests for find_parameter_name()."""

    def test_single_placeholder(self):
        """The placeholder name is extracted."""
        assert find_parameter_name("{n} items") == "n"

    def test_first_placeholder_wins(self):
        """With several placeholders the first one is used."""
        assert find_parameter_name("{count} of {total}") == "count"

    def test_no_placeholder(self):
        """Templates without placeholders give an empty name."""
        assert find_parameter_name("no items") == ""

    def test_none_template(self):
        """A missing template gives an empty name."""
        assert find_parameter_name(None) == ""
