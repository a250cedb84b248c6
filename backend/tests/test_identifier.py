"""
Unit tests for the hierarchical Identifier value object.

Run with: pytest tests/test_identifier.py -v
"""

import pytest

from chatcore.domain.value_objects.identifier import Identifier


class TestIdentifierEquality:
    """Equality compares the whole parent chain."""

    def test_equal_when_ids_and_parents_match(self):
        assert Identifier(5, Identifier(1)) == Identifier(5, Identifier(1))

    def test_not_equal_when_parent_differs(self):
        assert Identifier(5, Identifier(1)) != Identifier(5, Identifier(2))
        assert Identifier(5, Identifier(1)) != Identifier(5)

    def test_hash_follows_equality(self):
        ids = {Identifier(5, Identifier(1)), Identifier(5, Identifier(1))}
        assert len(ids) == 1

    def test_rejects_non_integer_id(self):
        with pytest.raises(ValueError):
            Identifier("1")


class TestIdentifierOrdering:
    """Numeric id first, then the parent chain."""

    def test_numeric_id_decides_first(self):
        assert Identifier(1, Identifier(9)) < Identifier(2, Identifier(0))

    def test_parent_breaks_ties(self):
        assert Identifier(3, Identifier(1)) < Identifier(3, Identifier(2))

    def test_missing_parent_sorts_first(self):
        assert Identifier(3) < Identifier(3, Identifier(0))

    def test_sorting_a_mixed_list(self):
        ids = [
            Identifier(2, Identifier(1)),
            Identifier(1, Identifier(2)),
            Identifier(1),
            Identifier(1, Identifier(1)),
        ]
        assert sorted(ids) == [
            Identifier(1),
            Identifier(1, Identifier(1)),
            Identifier(1, Identifier(2)),
            Identifier(2, Identifier(1)),
        ]


class TestIdentifierText:
    """String form and parsing."""

    def test_str_lists_root_first(self):
        assert str(Identifier(5, Identifier(1))) == "[UUID:1.5]"

    def test_parse_wrapped_and_bare_forms(self):
        expected = Identifier(5, Identifier(1))
        assert Identifier.parse("[UUID:1.5]") == expected
        assert Identifier.parse("1.5") == expected

    def test_parse_inverts_str_for_deep_chains(self):
        identifier = Identifier(9, Identifier(4, Identifier(2, Identifier(1))))
        assert Identifier.parse(str(identifier)) == identifier
        assert identifier.root == Identifier(1)
        assert identifier.path() == [1, 2, 4, 9]

    @pytest.mark.parametrize("text", ["", "[UUID:]", "1..5", "a.b", "-1", "[UUID:1.5"])
    def test_parse_rejects_malformed_text(self, text):
        with pytest.raises(ValueError):
            Identifier.parse(text)
