"""Human-readable listing of the rules as stored in the blob.

WHY: The blob is inscrutable to the eye. Decoding it back through the
same offset arithmetic the runtime uses, and printing every rule, is
the quickest way to confirm the runtime will see what the author wrote.

HOW: Reads the compiled blob with RulesetReader, never the source
table, and prints one block per group and one line per rule with the
left, bracket and right contexts and the phoneme names.

RULES:
- Everything printed comes from the blob bytes
- Rule line: "  Rule N l: '...', b: '...', r: '...', p: 'EH EY'"
- Output suffix: "-listing.txt"
"""

from __future__ import annotations

from typing import List

from compact_ruleset.core.ir import GROUP_COUNT, GROUP_NAMES, CompiledRuleset, Rule
from compact_ruleset.core.reader import RulesetReader
from compact_ruleset.formatters.base import BaseFormatter, FormatterOutput


def _format_rule(index: int, rule: Rule) -> str:
    return "  Rule {} l: '{}', b: '{}', r: '{}', p: '{}'".format(
        index, rule.left, rule.bracket, rule.right,
        " ".join(code.name for code in rule.phonemes),
    )


class ListingFormatter(BaseFormatter):
    """Formatter that lists every rule decoded from the blob."""

    @property
    def name(self) -> str:
        return "Rule listing"

    def format(self, compiled: CompiledRuleset) -> List[FormatterOutput]:
        reader = RulesetReader(compiled.blob)
        lines: List[str] = []
        for group in range(GROUP_COUNT):
            count = reader.rule_count(group)
            lines.append("Rule section {} ({}) has {} rules".format(
                group, GROUP_NAMES[group], count,
            ))
            for index, rule in enumerate(reader.iter_group(group)):
                lines.append(_format_rule(index, rule))

        return [
            FormatterOutput(
                suffix="-listing.txt",
                content="\n".join(lines) + "\n",
            )
        ]
