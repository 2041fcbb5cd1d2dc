"""Output formatter registry — pluggable emitters for the compiled blob.

WHY: The CLI needs a single lookup to find the right formatter by name.
A central dict makes it trivial to add new formats: create the formatter
class, import it here, add one line.

HOW: FORMATTERS maps string keys to formatter *classes* (not instances).
Callers instantiate as needed: ``formatter = FORMATTERS["binary"]()``.
Formatters that take options (the C source pair) have defaults for all
of them.

RULES:
- Keys are snake_case identifiers (used in CLI flags, config, etc.)
- Values are BaseFormatter subclasses (not instances)
- Every formatter listed here must be importable without side effects
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from compact_ruleset.formatters.binary import BinaryFormatter
from compact_ruleset.formatters.c_source import CSourceFormatter
from compact_ruleset.formatters.listing import ListingFormatter
from compact_ruleset.formatters.rules_json import RulesJsonFormatter
from compact_ruleset.formatters.stats_report import StatsReportFormatter

if TYPE_CHECKING:
    from compact_ruleset.formatters.base import BaseFormatter

FORMATTERS: dict[str, type[BaseFormatter]] = {
    "c_source": CSourceFormatter,
    "binary": BinaryFormatter,
    "stats": StatsReportFormatter,
    "listing": ListingFormatter,
    "rules_json": RulesJsonFormatter,
}
