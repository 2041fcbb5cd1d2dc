"""Unit tests for blob assembly.

WHY: The assembler produces the only artifact that ships. Its layout is
consumed by fixed-width reads on a device, so every offset must be
exact, relocation must happen once, and size limits must be enforced
before anything is packed.

HOW: Tests compare small tables against hand-computed bytes, inspect
each stage (layout, relocation, packing) separately, and build
oversized tables to trigger the size limits.

RULES:
- Header entry 27 is the data start; entry g+1 - entry g = 8 × group length
- Relocation adds the data start to every record field exactly once
- Same table in, same bytes out
"""

import struct

import pytest

from compact_ruleset.core import assembler
from compact_ruleset.core.assembler import (
    check_blob_size,
    compile_blob,
    compile_ruleset,
    layout_rule_records,
    pack_ruleset,
    relocate_records,
)
from compact_ruleset.core.data_blob import build_data_blob
from compact_ruleset.core.dedup import collect_values
from compact_ruleset.core.errors import BlobTooLargeError, ValueTooLongError
from compact_ruleset.core.ir import (
    ANYTHING,
    GROUP_COUNT,
    MAX_BLOB_SIZE,
    OFFSET_TABLE_SIZE,
    PhonemeCode as P,
    Rule,
    RuleLocation,
    RuleTable,
)

from conftest import SINGLE_RULE_BLOB, SMALL_TABLE_GROUPS, make_table


def _header(blob):
    return struct.unpack_from("<28H", blob, 0)


def _records(blob, count):
    return [struct.unpack_from("<4H", blob, OFFSET_TABLE_SIZE + 8 * i) for i in range(count)]


def _oversized_table(count=400):
    # Each rule carries its own 203-byte bracket, so nothing deduplicates
    rules = [Rule(ANYTHING, "{:03d}".format(i) + "x" * 200, ANYTHING) for i in range(count)]
    return make_table({"a": rules})


class TestKnownLayouts:
    """Tables small enough to check byte by byte."""

    def test_empty_table_is_bare_header(self, empty_table):
        blob = compile_blob(empty_table)
        assert len(blob) == OFFSET_TABLE_SIZE
        assert _header(blob) == (56,) * 28

    def test_single_rule_blob(self, single_rule_table):
        assert compile_blob(single_rule_table) == SINGLE_RULE_BLOB

    def test_single_rule_compiled_facts(self, single_rule_table):
        compiled = compile_ruleset(single_rule_table)
        assert compiled.size == 70
        assert compiled.data_offset == 64
        assert compiled.group_offsets[0] == 56
        assert compiled.group_offsets[1:] == (64,) * 27
        assert compiled.strings == (b"", b" ")
        assert compiled.phonemes == (bytes([3, 2]),)
        assert compiled.table is single_rule_table

    def test_small_table_header(self, small_table):
        header = _header(compile_blob(small_table))
        assert header[0] == 56
        assert header[1] == 72
        assert header[2] == 96
        assert header[3:27] == (112,) * 24
        assert header[27] == 128

    def test_group_lengths(self, small_table):
        compiled = compile_ruleset(small_table)
        lengths = [compiled.group_length(g) for g in range(GROUP_COUNT)]
        assert lengths[0] == 2
        assert lengths[1] == 3
        assert lengths[2] == 2
        assert lengths[26] == 2
        assert sum(lengths) == small_table.rule_count

    def test_shared_value_referenced_by_one_offset(self, small_table):
        blob = compile_blob(small_table)
        records = _records(blob, small_table.rule_count)
        # Group "a" rules 0 and 1 both say EH EY
        assert records[2][3] == records[3][3]
        # Every rule with an empty left context points at the same entry
        empty_lefts = {r[0] for r, (_, _, rule) in zip(records, small_table.iter_rules())
                       if rule.left == ANYTHING}
        assert len(empty_lefts) == 1

    def test_empty_groups_between_populated_ones(self):
        table = make_table({
            "c": [Rule(ANYTHING, "c", ANYTHING, (P.KK1,))],
            "x": [Rule(ANYTHING, "x", ANYTHING, (P.KK2, P.SS))],
        })
        header = _header(compile_blob(table))
        assert header[0:4] == (56, 56, 56, 56)
        assert header[4] == 64
        assert header[24] == 64
        assert header[25] == 72
        assert header[27] == 72


class TestStages:

    def test_layout_records_are_data_relative(self, single_rule_table):
        data_blob = build_data_blob(collect_values(single_rule_table))
        layout = layout_rule_records(single_rule_table, data_blob)
        assert layout.records == ((0, 1, 0, 3),)
        assert layout.data_start == 64

    def test_relocate_adds_data_start_once(self):
        assert relocate_records(((0, 1, 0, 3), (5, 0, 0, 9)), 64) == (
            (64, 65, 64, 67),
            (69, 64, 64, 73),
        )

    def test_relocate_does_not_touch_input(self):
        records = ((0, 1, 2, 3),)
        relocate_records(records, 100)
        assert records == ((0, 1, 2, 3),)

    def test_header_and_data_unchanged_by_relocation(self, small_table):
        data_blob = build_data_blob(collect_values(small_table))
        layout = layout_rule_records(small_table, data_blob)
        blob = pack_ruleset(layout, data_blob)
        assert _header(blob) == layout.group_offsets
        assert blob[layout.data_start:] == data_blob.data

    def test_every_field_lands_on_a_length_byte(self, english_table):
        compiled = compile_ruleset(english_table)
        blob = compiled.blob
        data_blob = build_data_blob(collect_values(english_table))
        valid = {compiled.data_offset + o for o in data_blob.string_offsets.values()}
        valid_phonemes = {compiled.data_offset + o for o in data_blob.phoneme_offsets.values()}
        for left, bracket, right, phonemes in _records(blob, english_table.rule_count):
            assert {left, bracket, right} <= valid
            assert phonemes in valid_phonemes


class TestDeterminism:

    def test_same_table_same_bytes(self, english_table):
        assert compile_blob(english_table) == compile_blob(english_table)

    def test_equal_tables_same_bytes(self):
        first = make_table(SMALL_TABLE_GROUPS)
        second = make_table({k: list(v) for k, v in SMALL_TABLE_GROUPS.items()})
        assert compile_blob(first) == compile_blob(second)

    def test_data_order_independent_of_rule_order(self):
        forward = make_table({"a": [Rule(ANYTHING, "ab", ANYTHING), Rule(ANYTHING, "a", ANYTHING)]})
        backward = make_table({"a": [Rule(ANYTHING, "a", ANYTHING), Rule(ANYTHING, "ab", ANYTHING)]})
        assert compile_ruleset(forward).strings == compile_ruleset(backward).strings
        assert compile_blob(forward)[72:] == compile_blob(backward)[72:]


class TestLimits:
    """Oversized values and blobs fail loudly, before packing."""

    def test_check_blob_size_boundary(self):
        check_blob_size(MAX_BLOB_SIZE)
        with pytest.raises(BlobTooLargeError) as exc_info:
            check_blob_size(MAX_BLOB_SIZE + 1)
        assert exc_info.value.overflow == 1

    def test_pack_checks_size_once(self, monkeypatch, small_table):
        sizes = []
        monkeypatch.setattr(assembler, "check_blob_size", sizes.append)
        compiled = compile_ruleset(small_table)
        assert sizes == [compiled.size]

    def test_blob_too_large(self):
        table = _oversized_table()
        with pytest.raises(BlobTooLargeError) as exc_info:
            compile_ruleset(table)
        # 56 header + 400 records + "" + 400 brackets + empty phonemes
        assert exc_info.value.size == 56 + 400 * 8 + 1 + 400 * 204 + 1
        assert exc_info.value.limit == MAX_BLOB_SIZE
        assert exc_info.value.overflow == exc_info.value.size - MAX_BLOB_SIZE

    def test_size_checked_before_records_are_relocated(self, monkeypatch):
        def _fail(*args, **kwargs):
            raise AssertionError("records should not be relocated for an oversized table")

        monkeypatch.setattr(assembler, "relocate_records", _fail)
        with pytest.raises(BlobTooLargeError):
            compile_ruleset(_oversized_table())

    def test_context_of_256_bytes(self):
        table = make_table({"a": [Rule(ANYTHING, "a", "x" * 256)]})
        with pytest.raises(ValueTooLongError) as exc_info:
            compile_ruleset(table)
        assert exc_info.value.owner == RuleLocation(1, 0, "right")

    def test_phoneme_sequence_of_256_codes(self):
        table = make_table({"b": [Rule(ANYTHING, "b", ANYTHING, (P.BB2,) * 256)]})
        with pytest.raises(ValueTooLongError) as exc_info:
            compile_ruleset(table)
        assert exc_info.value.owner == RuleLocation(2, 0, "phonemes")

    def test_value_of_255_bytes_compiles(self):
        table = make_table({"a": [Rule(ANYTHING, "a" * 255, ANYTHING)]})
        compiled = compile_ruleset(table)
        assert b"a" * 255 in compiled.strings
        assert compiled.size == 56 + 8 + 1 + 256 + 1

    def test_many_rules_share_values_within_limit(self):
        rules = [Rule(ANYTHING, "a", ANYTHING, (P.AE,))] * 5000
        compiled = compile_ruleset(RuleTable.from_mapping({"a": rules}))
        assert compiled.data_offset == 56 + 5000 * 8
        assert compiled.size == compiled.data_offset + 1 + 2 + 2
