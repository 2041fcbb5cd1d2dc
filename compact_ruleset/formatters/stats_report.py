"""Plain text statistics report for a compiled ruleset.

WHY: A short report next to the generated sources makes table edits
reviewable: a jump in rule count or blob size shows up in the diff.

HOW: Runs the independent table analysis, then appends the layout facts
of the compiled blob. If the analysis and the compiler disagree on the
blob size the report says so instead of hiding it.

RULES:
- Output suffix: "-stats.txt"
- Statistics never influence the blob
"""

from __future__ import annotations

import logging
from typing import List

from compact_ruleset.core.ir import GROUP_COUNT, GROUP_NAMES, CompiledRuleset
from compact_ruleset.core.stats import analyze
from compact_ruleset.formatters.base import BaseFormatter, FormatterOutput

logger = logging.getLogger(__name__)


class StatsReportFormatter(BaseFormatter):
    """Formatter that reports rule counts, dedup ratios and layout."""

    @property
    def name(self) -> str:
        return "Statistics report"

    def format(self, compiled: CompiledRuleset) -> List[FormatterOutput]:
        stats = analyze(compiled.table)
        lines = stats.lines()

        if stats.expected_blob_size != compiled.size:
            logger.warning(
                "Table analysis predicts %d bytes but the blob is %d bytes",
                stats.expected_blob_size, compiled.size,
            )
            lines.append("MISMATCH: compiled blob is {} bytes".format(compiled.size))

        lines.append("")
        lines.append("data offset: {}".format(compiled.data_offset))
        for group in range(GROUP_COUNT):
            lines.append("group {:2d} {:<11} offset {:5d}  rules {:3d}".format(
                group, GROUP_NAMES[group],
                compiled.group_offsets[group], compiled.group_length(group),
            ))

        return [
            FormatterOutput(
                suffix="-stats.txt",
                content="\n".join(lines) + "\n",
            )
        ]
