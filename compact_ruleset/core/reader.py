"""Decode a compiled ruleset blob the way the runtime does.

WHY: The blob is only useful if a consumer holding nothing but the
bytes can find every rule again. Reading it back with the same
fixed-width arithmetic the embedded runtime uses proves the layout and
powers the rule listing and the CLI's --verify check.

HOW: RulesetReader parses the 28-entry header once, validates it, then
answers group length, rule and value lookups by offset arithmetic.

RULES:
- rule count of group g = (header[g+1] - header[g]) / 8
- field f of rule r in group g is the uint16 at header[g] + r*8 + f*2
- a value is 1 length byte L followed by L bytes
- every read is bounds-checked; violations raise MalformedBlobError
"""

from __future__ import annotations

import struct
from typing import Iterator, List, Tuple

from compact_ruleset.core.errors import MalformedBlobError
from compact_ruleset.core.ir import (
    FIELDS_PER_RECORD,
    GROUP_COUNT,
    OFFSET_SIZE,
    OFFSET_TABLE_ENTRIES,
    OFFSET_TABLE_SIZE,
    RECORD_SIZE,
    TEXT_ENCODING,
    Rule,
    RuleTable,
)


class RulesetReader:
    """Read-only view over a compiled ruleset blob.

    Args:
        blob: The complete blob, header first.

    Raises:
        MalformedBlobError: If the header is truncated or inconsistent.
    """

    def __init__(self, blob: bytes) -> None:
        self._blob = bytes(blob)
        if len(self._blob) < OFFSET_TABLE_SIZE:
            raise MalformedBlobError(
                "Blob is {} bytes, shorter than the {}-byte offset table".format(
                    len(self._blob), OFFSET_TABLE_SIZE,
                )
            )
        self._offsets: Tuple[int, ...] = struct.unpack_from(
            "<{}H".format(OFFSET_TABLE_ENTRIES), self._blob, 0,
        )
        self._validate_header()

    def _validate_header(self) -> None:
        offsets = self._offsets
        if offsets[0] != OFFSET_TABLE_SIZE:
            raise MalformedBlobError(
                "Group 0 starts at {}, expected {}".format(offsets[0], OFFSET_TABLE_SIZE)
            )
        for group in range(GROUP_COUNT):
            span = offsets[group + 1] - offsets[group]
            if span < 0:
                raise MalformedBlobError(
                    "Group {} ends before it starts ({} < {})".format(
                        group, offsets[group + 1], offsets[group],
                    )
                )
            if span % RECORD_SIZE:
                raise MalformedBlobError(
                    "Group {} spans {} bytes, not a multiple of {}".format(
                        group, span, RECORD_SIZE,
                    )
                )
        if offsets[GROUP_COUNT] > len(self._blob):
            raise MalformedBlobError(
                "Data region starts at {}, past the end of a {}-byte blob".format(
                    offsets[GROUP_COUNT], len(self._blob),
                )
            )

    @property
    def blob(self) -> bytes:
        return self._blob

    @property
    def group_offsets(self) -> Tuple[int, ...]:
        return self._offsets

    @property
    def data_offset(self) -> int:
        return self._offsets[GROUP_COUNT]

    def rule_count(self, group: int) -> int:
        self._check_group(group)
        return (self._offsets[group + 1] - self._offsets[group]) // RECORD_SIZE

    def _check_group(self, group: int) -> None:
        if not 0 <= group < GROUP_COUNT:
            raise IndexError("Group {} out of range 0..{}".format(group, GROUP_COUNT - 1))

    def read_value(self, offset: int) -> bytes:
        """Read the length-prefixed value whose length byte is at ``offset``."""
        if not self.data_offset <= offset < len(self._blob):
            raise MalformedBlobError(
                "Value offset {} outside the data region [{}, {})".format(
                    offset, self.data_offset, len(self._blob),
                )
            )
        length = self._blob[offset]
        end = offset + 1 + length
        if end > len(self._blob):
            raise MalformedBlobError(
                "Value at {} claims {} bytes but the blob ends at {}".format(
                    offset, length, len(self._blob),
                )
            )
        return self._blob[offset + 1:end]

    def record_offsets(self, group: int, index: int) -> Tuple[int, ...]:
        """Return the four absolute field offsets of one rule record."""
        count = self.rule_count(group)
        if not 0 <= index < count:
            raise IndexError("Rule {} out of range for group {} ({} rules)".format(
                index, group, count,
            ))
        base = self._offsets[group] + index * RECORD_SIZE
        return tuple(
            struct.unpack_from("<H", self._blob, base + f * OFFSET_SIZE)[0]
            for f in range(FIELDS_PER_RECORD)
        )

    def read_rule(self, group: int, index: int) -> Rule:
        """Reconstitute rule ``index`` of ``group``."""
        left, bracket, right, phonemes = (
            self.read_value(offset) for offset in self.record_offsets(group, index)
        )
        try:
            return Rule(
                left.decode(TEXT_ENCODING),
                bracket.decode(TEXT_ENCODING),
                right.decode(TEXT_ENCODING),
                tuple(phonemes),
            )
        except ValueError as exc:
            raise MalformedBlobError(
                "Group {} rule {} has an invalid phoneme sequence: {}".format(group, index, exc)
            ) from None

    def iter_group(self, group: int) -> Iterator[Rule]:
        for index in range(self.rule_count(group)):
            yield self.read_rule(group, index)

    def iter_values(self) -> Iterator[Tuple[int, bytes]]:
        """Walk the data region, yielding (offset, value) for each entry."""
        offset = self.data_offset
        while offset < len(self._blob):
            value = self.read_value(offset)
            yield offset, value
            offset += 1 + len(value)

    def to_rule_table(self) -> RuleTable:
        """Decode every group back into a RuleTable."""
        groups: List[Tuple[Rule, ...]] = [
            tuple(self.iter_group(group)) for group in range(GROUP_COUNT)
        ]
        return RuleTable(tuple(groups))
