"""Serialize deduplicated values into one length-prefixed data region.

WHY: The runtime reads every value through a 16-bit offset that points
at a length byte followed by the raw bytes. Building that region once,
and remembering where each value landed, lets the rule records refer to
values by offset instead of carrying copies.

HOW: append_values() writes one set into a shared bytearray and returns
value → offset. build_data_blob() calls it twice on the same buffer,
strings first and phoneme sequences second, so both sets share one
address space.

RULES:
- Entry layout: 1 length byte L, then L raw bytes
- Offsets are relative to the start of the data region
- Values longer than 255 bytes are rejected before anything is written
- Strings precede phoneme sequences
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Mapping, Optional

from compact_ruleset.core.dedup import ValueSets
from compact_ruleset.core.errors import ValueTooLongError
from compact_ruleset.core.ir import MAX_VALUE_LENGTH, RuleLocation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DataBlob:
    """The combined data region and the offset of every value in it.

    Attributes:
        data: Length-prefixed strings followed by length-prefixed phonemes.
        string_offsets: String value → offset of its length byte.
        phoneme_offsets: Phoneme sequence → offset of its length byte.
        phoneme_start: Offset where the phoneme entries begin.
    """

    data: bytes
    string_offsets: Dict[bytes, int]
    phoneme_offsets: Dict[bytes, int]
    phoneme_start: int

    def __len__(self) -> int:
        return len(self.data)


def append_values(
    buffer: bytearray,
    values: Iterable[bytes],
    owners: Optional[Mapping[bytes, RuleLocation]] = None,
) -> Dict[bytes, int]:
    """Append each value to ``buffer`` as a length-prefixed entry.

    Args:
        buffer: The growing data region; modified in place.
        values: Values in the order they are to be laid out.
        owners: Optional value → rule location, used in error messages.

    Returns:
        Mapping of value → offset of its length byte within ``buffer``.

    Raises:
        ValueTooLongError: If any value exceeds 255 bytes. ``buffer`` is
            left untouched in that case.
    """
    values = list(values)
    for value in values:
        if len(value) > MAX_VALUE_LENGTH:
            owner = owners.get(value) if owners is not None else None
            raise ValueTooLongError(value, MAX_VALUE_LENGTH, owner)

    index: Dict[bytes, int] = {}
    for value in values:
        index[value] = len(buffer)
        buffer.append(len(value))
        buffer.extend(value)
    return index


def build_data_blob(value_sets: ValueSets) -> DataBlob:
    """Lay out strings then phoneme sequences in one data region."""
    buffer = bytearray()
    string_offsets = append_values(buffer, value_sets.strings, value_sets.string_owners)
    phoneme_start = len(buffer)
    phoneme_offsets = append_values(buffer, value_sets.phonemes, value_sets.phoneme_owners)

    logger.debug(
        "Data blob: %d strings (%d bytes), %d phoneme sequences (%d bytes)",
        len(string_offsets), phoneme_start,
        len(phoneme_offsets), len(buffer) - phoneme_start,
    )

    return DataBlob(
        data=bytes(buffer),
        string_offsets=string_offsets,
        phoneme_offsets=phoneme_offsets,
        phoneme_start=phoneme_start,
    )
