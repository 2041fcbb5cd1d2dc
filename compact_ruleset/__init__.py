"""Compact ruleset compiler for letter-to-sound text-to-speech rules.

WHY: A text-to-speech engine on a microcontroller cannot afford to parse
a verbose rule table or build string tables at boot. This package turns
the human-authored rule table into one deduplicated, offset-indexed
binary blob the runtime can walk with fixed-width reads.

HOW: Three-stage pipeline: deduplicate values (core.dedup), lay them
out as a length-prefixed data region (core.data_blob), then pack the
group offset table and rule records around it (core.assembler).
Pluggable formatters render the blob for a host build (C source, raw
binary, reports).

RULES:
- compile_ruleset() is pure: same table in, same bytes out
- Values over 255 bytes and blobs over 65,535 bytes are errors, never
  truncated
- All formatters consume the same CompiledRuleset
"""

from compact_ruleset.core.assembler import compile_blob, compile_ruleset
from compact_ruleset.core.errors import (
    BlobTooLargeError,
    MalformedBlobError,
    MalformedTableError,
    RulesetError,
    ValueTooLongError,
)
from compact_ruleset.core.ir import (
    ANYTHING,
    NOTHING,
    CompiledRuleset,
    PhonemeCode,
    Rule,
    RuleTable,
)
from compact_ruleset.core.reader import RulesetReader

__version__ = "0.1.0"

__all__ = [
    "ANYTHING",
    "NOTHING",
    "BlobTooLargeError",
    "CompiledRuleset",
    "MalformedBlobError",
    "MalformedTableError",
    "PhonemeCode",
    "Rule",
    "RuleTable",
    "RulesetError",
    "RulesetReader",
    "ValueTooLongError",
    "compile_blob",
    "compile_ruleset",
]
