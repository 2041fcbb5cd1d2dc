"""Rule table sources: the built-in English table and JSON files.

WHY: The compiler takes a RuleTable and does not care where it came
from. This package is where tables come from.

RULES:
- ENGLISH_RULES is the default table for the CLI
- JSON tables go through load_rule_table(), which validates structure
"""

from compact_ruleset.rules.english import ENGLISH_RULES
from compact_ruleset.rules.loader import dump_rule_table, load_rule_table, parse_rule_table

__all__ = [
    "ENGLISH_RULES",
    "dump_rule_table",
    "load_rule_table",
    "parse_rule_table",
]
