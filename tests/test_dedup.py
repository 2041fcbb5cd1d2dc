"""Unit tests for value deduplication.

WHY: Shared values are the whole point of the compact layout, and the
canonical order is what makes two compiles byte-identical.

HOW: Tests run collect_values() over the fixture tables and check set
contents, canonical ordering and first-use owners.

RULES:
- Canonical order is ascending byte-lexicographic
"""

from compact_ruleset.core.dedup import canonical_order, collect_values
from compact_ruleset.core.ir import RuleLocation

from conftest import all_rules


class TestCollectValues:

    def test_empty_table(self, empty_table):
        sets = collect_values(empty_table)
        assert sets.strings == ()
        assert sets.phonemes == ()

    def test_single_rule(self, single_rule_table):
        sets = collect_values(single_rule_table)
        assert sets.strings == (b"", b" ")
        assert sets.phonemes == (bytes([3, 2]),)

    def test_small_table_strings(self, small_table):
        sets = collect_values(small_table)
        assert sets.strings == (b"", b" ", b"$", b".", b"a", b"ai", b"b", b"z")

    def test_small_table_phonemes(self, small_table):
        sets = collect_values(small_table)
        assert sets.phonemes == (
            b"",
            bytes([3, 2]),
            bytes([4, 4, 3]),
            bytes([7, 20]),
            bytes([26]),
            bytes([43]),
            bytes([63]),
        )

    def test_cardinality_matches_set_of_rule_values(self, english_table):
        rules = all_rules(english_table)
        expected_strings = set()
        expected_phonemes = set()
        for rule in rules:
            left, bracket, right, phonemes = rule.encoded()
            expected_strings.update((left, bracket, right))
            expected_phonemes.add(phonemes)
        sets = collect_values(english_table)
        assert len(sets.strings) == len(expected_strings)
        assert len(sets.phonemes) == len(expected_phonemes)
        assert set(sets.strings) == expected_strings

    def test_sets_are_sorted(self, english_table):
        sets = collect_values(english_table)
        assert list(sets.strings) == sorted(sets.strings)
        assert list(sets.phonemes) == sorted(sets.phonemes)


class TestOwners:
    """The first rule to use each value is recorded for error messages."""

    def test_string_owner_is_first_use(self, small_table):
        sets = collect_values(small_table)
        assert sets.string_owners[b""] == RuleLocation(0, 0, "left")
        assert sets.string_owners[b"$"] == RuleLocation(1, 0, "left")
        assert sets.string_owners[b"ai"] == RuleLocation(1, 1, "bracket")

    def test_shared_phoneme_owner(self, small_table):
        sets = collect_values(small_table)
        assert sets.phoneme_owners[bytes([7, 20])] == RuleLocation(1, 0, "phonemes")

    def test_every_value_has_an_owner(self, english_table):
        sets = collect_values(english_table)
        assert set(sets.string_owners) == set(sets.strings)
        assert set(sets.phoneme_owners) == set(sets.phonemes)


class TestCanonicalOrder:

    def test_prefix_sorts_first(self):
        assert canonical_order([b"ab", b"a", b""]) == (b"", b"a", b"ab")

    def test_unsigned_byte_order(self):
        assert canonical_order([b"\xff", b"\x7f", b"\x80"]) == (b"\x7f", b"\x80", b"\xff")

    def test_stable_across_input_order(self):
        values = [b"z", b"$", b"#:", b"", b"a"]
        assert canonical_order(values) == canonical_order(reversed(values))
