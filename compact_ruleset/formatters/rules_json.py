"""Rule table JSON formatter.

WHY: Custom tables are easiest to start from the built-in one. Exporting
the compiled table in the loader's own format gives an editable copy
that --rules will accept back unchanged.

RULES:
- Same document format as rules.loader (phonemes by name)
- Output suffix: "-rules.json"
"""

from __future__ import annotations

import json
from typing import List

from compact_ruleset.core.ir import CompiledRuleset
from compact_ruleset.formatters.base import BaseFormatter, FormatterOutput
from compact_ruleset.rules.loader import dump_rule_table


class RulesJsonFormatter(BaseFormatter):
    """Formatter that exports the source rule table as JSON."""

    @property
    def name(self) -> str:
        return "Rule table JSON"

    def format(self, compiled: CompiledRuleset) -> List[FormatterOutput]:
        content = json.dumps(dump_rule_table(compiled.table), indent=2, ensure_ascii=False)
        return [
            FormatterOutput(
                suffix="-rules.json",
                content=content + "\n",
            )
        ]
