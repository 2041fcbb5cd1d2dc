"""Assemble the final offset-indexed ruleset blob.

WHY: The runtime must find a group's rules and every value of every rule
with nothing but fixed-width reads. This module turns a rule table and
its data region into that self-contained byte sequence.

HOW: Three stages, each a plain function:
  1. layout_rule_records — group offset table plus one 4-field record per
     rule, fields holding data-region-relative offsets
  2. the data region is placed right after the last record; its absolute
     start is the offset table's 28th entry
  3. relocate_records — add that start to every record field, once
pack_ruleset() writes header, relocated records and data region as
little-endian bytes. compile_ruleset() runs the whole pipeline.

RULES:
- Header: 28 × uint16; entry g = first record of group g, entry 27 = data start
- Record: 4 × uint16 absolute offsets (left, bracket, right, phonemes)
- Group length = (entry[g+1] - entry[g]) / 8
- Relocation touches record fields only, never the header or the data
- The total size is checked against 65,535 before anything is packed
- Same table in, byte-identical blob out
"""

from __future__ import annotations

import logging
import struct
from dataclasses import dataclass
from typing import List, Tuple

from compact_ruleset.core.data_blob import DataBlob, build_data_blob
from compact_ruleset.core.dedup import collect_values
from compact_ruleset.core.errors import BlobTooLargeError
from compact_ruleset.core.ir import (
    GROUP_COUNT,
    MAX_BLOB_SIZE,
    OFFSET_TABLE_ENTRIES,
    OFFSET_TABLE_SIZE,
    RECORD_SIZE,
    CompiledRuleset,
    RuleTable,
)

logger = logging.getLogger(__name__)

Record = Tuple[int, int, int, int]

_HEADER_STRUCT = struct.Struct("<{}H".format(OFFSET_TABLE_ENTRIES))
_RECORD_STRUCT = struct.Struct("<4H")


@dataclass(frozen=True)
class RecordLayout:
    """Output of the layout stage.

    Attributes:
        group_offsets: 28 absolute offsets; the last is the data start.
        records: One (left, bracket, right, phonemes) tuple per rule, in
            table order, holding data-region-relative offsets.
    """

    group_offsets: Tuple[int, ...]
    records: Tuple[Record, ...]

    @property
    def data_start(self) -> int:
        return self.group_offsets[GROUP_COUNT]


def check_blob_size(size: int) -> None:
    """Raise BlobTooLargeError if ``size`` exceeds 16-bit addressing."""
    if size > MAX_BLOB_SIZE:
        raise BlobTooLargeError(size, MAX_BLOB_SIZE)


def layout_rule_records(table: RuleTable, data_blob: DataBlob) -> RecordLayout:
    """Lay out the group offset table and the data-relative rule records.

    WHY: Record positions depend only on rule counts, so the whole header
    is known before the data region is placed.

    HOW: Walk groups 0..26 in order. Each group starts at the current
    write position; each rule advances it by RECORD_SIZE. The position
    after the last group becomes entry 27.

    Args:
        table: The validated source table.
        data_blob: The data region built from the same table.

    Returns:
        RecordLayout with absolute group offsets and relative records.
    """
    position = OFFSET_TABLE_SIZE
    group_offsets: List[int] = []
    records: List[Record] = []

    for group in table.groups:
        group_offsets.append(position)
        for rule in group:
            left, bracket, right, phonemes = rule.encoded()
            records.append((
                data_blob.string_offsets[left],
                data_blob.string_offsets[bracket],
                data_blob.string_offsets[right],
                data_blob.phoneme_offsets[phonemes],
            ))
            position += RECORD_SIZE

    # End of the last group doubles as the start of the data region
    group_offsets.append(position)

    return RecordLayout(group_offsets=tuple(group_offsets), records=tuple(records))


def relocate_records(records, data_start: int) -> Tuple[Record, ...]:
    """Turn data-relative record fields into absolute blob offsets."""
    return tuple(
        (left + data_start, bracket + data_start, right + data_start, phonemes + data_start)
        for left, bracket, right, phonemes in records
    )


def pack_ruleset(layout: RecordLayout, data_blob: DataBlob) -> bytes:
    """Pack header, relocated records and data region into the final blob.

    The size is checked before anything is relocated or written.

    Raises:
        BlobTooLargeError: If the packed blob would exceed 65,535 bytes.
    """
    size = layout.data_start + len(data_blob)
    check_blob_size(size)

    out = bytearray(_HEADER_STRUCT.pack(*layout.group_offsets))
    for record in relocate_records(layout.records, layout.data_start):
        out += _RECORD_STRUCT.pack(*record)
    out += data_blob.data
    return bytes(out)


def compile_ruleset(table: RuleTable) -> CompiledRuleset:
    """Compile a rule table into its compact blob.

    WHY: This is the single entry point build scripts and the CLI call.
    It is a pure function of the table: no I/O, no shared state.

    HOW: collect_values → build_data_blob → layout_rule_records →
    pack_ruleset.

    Args:
        table: The validated source table.

    Returns:
        CompiledRuleset holding the blob and its layout facts.

    Raises:
        ValueTooLongError: A value exceeds 255 bytes.
        BlobTooLargeError: The blob exceeds 65,535 bytes.
    """
    value_sets = collect_values(table)
    data_blob = build_data_blob(value_sets)

    layout = layout_rule_records(table, data_blob)
    blob = pack_ruleset(layout, data_blob)

    logger.debug(
        "Compiled %d rules into %d bytes (data region at %d, %d strings, %d phoneme sequences)",
        table.rule_count, len(blob), layout.data_start,
        len(value_sets.strings), len(value_sets.phonemes),
    )

    return CompiledRuleset(
        blob=blob,
        group_offsets=layout.group_offsets,
        data_offset=layout.data_start,
        strings=value_sets.strings,
        phonemes=value_sets.phonemes,
        table=table,
    )


def compile_blob(table: RuleTable) -> bytes:
    """Compile ``table`` and return only the blob bytes."""
    return compile_ruleset(table).blob
