"""Aggregate statistics over a rule table, for regression sanity checks.

WHY: When someone edits the rule table, a quick look at rule counts,
dedup ratios and longest values catches mistakes (a rule pasted twice,
a runaway phoneme list) before the blob lands in firmware. The numbers
also predict the compiled size, so they cross-check the compiler.

HOW: analyze() walks the table independently of the compiler and counts
raw and distinct values. Byte counts include one prefix byte per value,
matching both a nul-terminated and a length-prefixed layout.

RULES:
- Never consulted by the compiler; purely diagnostic
- distinct_*_bytes must equal the compiled data region's two parts
- expected_blob_size must equal the compiled blob length
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from compact_ruleset.core.ir import OFFSET_TABLE_SIZE, RECORD_SIZE, RuleTable


@dataclass(frozen=True)
class RuleTableStats:
    """Raw and deduplicated counts for one rule table."""

    rules: int
    strings: int
    phoneme_sequences: int
    distinct_strings: int
    distinct_phoneme_sequences: int
    string_bytes: int
    phoneme_bytes: int
    distinct_string_bytes: int
    distinct_phoneme_bytes: int
    longest_string: int
    longest_phoneme_sequence: int

    @property
    def data_blob_size(self) -> int:
        return self.distinct_string_bytes + self.distinct_phoneme_bytes

    @property
    def expected_blob_size(self) -> int:
        return OFFSET_TABLE_SIZE + self.rules * RECORD_SIZE + self.data_blob_size

    def lines(self) -> List[str]:
        """Render the report, one line per statistic pair."""
        return [
            "Rules: {}".format(self.rules),
            "strs: {}, bins: {}".format(self.strings, self.phoneme_sequences),
            "dstrs: {}, dbins: {}".format(self.distinct_strings, self.distinct_phoneme_sequences),
            "strlen: {}, binlen: {}".format(self.string_bytes, self.phoneme_bytes),
            "dstrlen: {}, dbinlen: {}".format(
                self.distinct_string_bytes, self.distinct_phoneme_bytes,
            ),
            "strlongest: {}, binlongest: {}".format(
                self.longest_string, self.longest_phoneme_sequence,
            ),
            "bloblen: {}".format(self.expected_blob_size),
        ]


def analyze(table: RuleTable) -> RuleTableStats:
    """Compute RuleTableStats for ``table``."""
    strings = set()
    sequences = set()
    rules = 0
    string_bytes = 0
    phoneme_bytes = 0
    longest_string = 0
    longest_sequence = 0

    for _, _, rule in table.iter_rules():
        rules += 1
        left, bracket, right, phonemes = rule.encoded()
        for text in (left, bracket, right):
            strings.add(text)
            string_bytes += len(text) + 1
            longest_string = max(longest_string, len(text))
        sequences.add(phonemes)
        phoneme_bytes += len(phonemes) + 1
        longest_sequence = max(longest_sequence, len(phonemes))

    return RuleTableStats(
        rules=rules,
        strings=rules * 3,
        phoneme_sequences=rules,
        distinct_strings=len(strings),
        distinct_phoneme_sequences=len(sequences),
        string_bytes=string_bytes,
        phoneme_bytes=phoneme_bytes,
        distinct_string_bytes=sum(len(s) + 1 for s in strings),
        distinct_phoneme_bytes=sum(len(p) + 1 for p in sequences),
        longest_string=longest_string,
        longest_phoneme_sequence=longest_sequence,
    )
