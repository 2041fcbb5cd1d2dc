"""Collect the distinct values referenced by a rule table.

WHY: The 706-rule English table references 2,118 context strings and 706
phoneme sequences, but only a few hundred of each are distinct. Storing
every distinct value once is what makes the blob small enough for an
embedded target.

HOW: One pass over every rule of every group. The left, bracket and
right fields go into the string set, the phoneme payload into the
phoneme set. Both sets are then sorted into canonical order.

RULES:
- Values are compared by exact byte equality
- Canonical order is ascending byte-lexicographic (Python bytes ordering),
  so the same table always lays out the same way
- The first rule to use a value is remembered for error messages only
- No failure modes: the table was validated when it was constructed
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple

from compact_ruleset.core.ir import RULE_FIELDS, RuleLocation, RuleTable


@dataclass(frozen=True)
class ValueSets:
    """The deduplicated string and phoneme sets of a rule table.

    Attributes:
        strings: Distinct left/bracket/right values, canonically ordered.
        phonemes: Distinct phoneme sequences, canonically ordered.
        string_owners: Value → first rule field that uses it.
        phoneme_owners: Sequence → first rule that uses it.
    """

    strings: Tuple[bytes, ...]
    phonemes: Tuple[bytes, ...]
    string_owners: Dict[bytes, RuleLocation] = field(default_factory=dict)
    phoneme_owners: Dict[bytes, RuleLocation] = field(default_factory=dict)


def canonical_order(values) -> Tuple[bytes, ...]:
    """Sort byte values ascending byte-lexicographically."""
    return tuple(sorted(values))


def collect_values(table: RuleTable) -> ValueSets:
    """Scan ``table`` once and return its deduplicated value sets.

    Args:
        table: A validated RuleTable.

    Returns:
        ValueSets with both sets in canonical order.
    """
    string_owners: Dict[bytes, RuleLocation] = {}
    phoneme_owners: Dict[bytes, RuleLocation] = {}

    for group_idx, rule_idx, rule in table.iter_rules():
        values = rule.encoded()
        for name, value in zip(RULE_FIELDS[:3], values[:3]):
            if value not in string_owners:
                string_owners[value] = RuleLocation(group_idx, rule_idx, name)
        if values[3] not in phoneme_owners:
            phoneme_owners[values[3]] = RuleLocation(group_idx, rule_idx, RULE_FIELDS[3])

    return ValueSets(
        strings=canonical_order(string_owners),
        phonemes=canonical_order(phoneme_owners),
        string_owners=string_owners,
        phoneme_owners=phoneme_owners,
    )
