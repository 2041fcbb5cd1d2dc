"""Shared test fixtures for the compact_ruleset test suite.

WHY: Most test modules need the same handful of tables: an empty one,
the single-rule table whose exact bytes are known, a small multi-group
table with shared values, and the built-in English table.

HOW: Pytest fixtures build fresh RuleTable objects. The single-rule
table's expected blob is spelled out byte by byte so layout tests can
compare against it directly.

RULES:
- SMALL_TABLE_GROUPS deliberately repeats values across rules and groups
- SINGLE_RULE_BLOB is the authoritative layout of the single-rule table
"""

import struct
from typing import List

import pytest

from compact_ruleset.core.ir import ANYTHING, NOTHING, PhonemeCode as P, Rule, RuleTable
from compact_ruleset.rules import ENGLISH_RULES


# ---------------------------------------------------------------------------
# Single-rule table: group 0 holds { "", " ", "", [PA4, PA3] }
# ---------------------------------------------------------------------------

SINGLE_RULE = Rule(ANYTHING, " ", ANYTHING, (3, 2))

# Header: group 0 at 56, groups 1..26 and the data start at 64
_SINGLE_HEADER = struct.pack("<28H", 56, *([64] * 27))
# Record: left "" @ 64, bracket " " @ 65, right "" @ 64, phonemes @ 67
_SINGLE_RECORD = struct.pack("<4H", 64, 65, 64, 67)
# Data: "" , " " , [3, 2]
_SINGLE_DATA = bytes([0x00, 0x01, 0x20, 0x02, 0x03, 0x02])

SINGLE_RULE_BLOB = _SINGLE_HEADER + _SINGLE_RECORD + _SINGLE_DATA


# ---------------------------------------------------------------------------
# Small multi-group table with shared values
# ---------------------------------------------------------------------------

SMALL_TABLE_GROUPS = {
    "punctuation": [
        Rule(ANYTHING, " ", ANYTHING, (P.PA4, P.PA3)),
        Rule(ANYTHING, ".", ANYTHING, (P.PA5, P.PA5, P.PA4)),
    ],
    "a": [
        Rule(NOTHING, "a", NOTHING, (P.EH, P.EY)),
        Rule(ANYTHING, "ai", ANYTHING, (P.EH, P.EY)),
        Rule(ANYTHING, "a", ANYTHING, (P.AE,)),
    ],
    "b": [
        Rule("b", "b", ANYTHING),
        Rule(ANYTHING, "b", ANYTHING, (P.BB2,)),
    ],
    "z": [
        Rule("z", "z", ANYTHING),
        Rule(ANYTHING, "z", ANYTHING, (P.ZZ,)),
    ],
}


def make_table(groups: dict) -> RuleTable:
    """Build a RuleTable from {group name: [rules]}."""
    return RuleTable.from_mapping(groups)


def all_rules(table: RuleTable) -> List[Rule]:
    return [rule for _, _, rule in table.iter_rules()]


@pytest.fixture
def empty_table():
    """A table with all 27 groups empty."""
    return RuleTable.empty()


@pytest.fixture
def single_rule_table():
    """Only group 0, one rule: {"", " ", "", [3, 2]}."""
    return make_table({"punctuation": [SINGLE_RULE]})


@pytest.fixture
def small_table():
    """Four populated groups with values shared across rules."""
    return make_table(SMALL_TABLE_GROUPS)


@pytest.fixture
def english_table():
    """The built-in English rule table."""
    return ENGLISH_RULES
