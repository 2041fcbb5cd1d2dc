"""Load and dump rule tables as JSON.

WHY: The built-in English table covers the common case, but a build may
need a tuned or entirely different table. A JSON file is easy to edit,
diff and generate from other tools, and the compiler can take it as-is.

HOW: The document is validated against rule_table.schema.json with
jsonschema, then each rule becomes a Rule and the groups a RuleTable.
dump_rule_table() writes the same format, so the built-in table can be
exported as a starting point.

RULES:
- Top level: {"groups": [...27 arrays of rule objects...]}
- Rule object: {"left", "bracket", "right", "phonemes"}; all required
- phonemes: PhonemeCode names ("EH") or integer codes (7), mixed freely
- Schema violations and unknown phonemes raise MalformedTableError with
  the group and rule index when known
- Value lengths are not limited here; the compiler reports them
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import jsonschema

from compact_ruleset.core.errors import MalformedTableError
from compact_ruleset.core.ir import PhonemeCode, Rule, RuleTable

logger = logging.getLogger(__name__)

_SCHEMA_PATH = Path(__file__).resolve().parent / "rule_table.schema.json"

_CACHED_SCHEMA: Optional[dict] = None


def _get_schema() -> dict:
    """Load and cache the rule table JSON schema."""
    global _CACHED_SCHEMA
    if _CACHED_SCHEMA is None:
        with open(_SCHEMA_PATH, encoding="utf-8") as f:
            _CACHED_SCHEMA = json.load(f)
    return _CACHED_SCHEMA


def _error_location(error: jsonschema.ValidationError) -> tuple:
    """Extract (group, rule index) from a validation error's path."""
    path = list(error.absolute_path)
    group = path[1] if len(path) > 1 and path[0] == "groups" else None
    index = path[2] if len(path) > 2 and path[0] == "groups" else None
    return group, index


def _parse_phoneme(item: Any) -> int:
    if isinstance(item, str):
        try:
            return PhonemeCode[item]
        except KeyError:
            raise ValueError("Unknown phoneme symbol '{}'".format(item)) from None
    return item


def parse_rule_table(data: Dict[str, Any]) -> RuleTable:
    """Build a RuleTable from an already decoded JSON document.

    Raises:
        MalformedTableError: If the document does not match the schema or
            a phoneme is unknown.
    """
    try:
        jsonschema.validate(instance=data, schema=_get_schema())
    except jsonschema.ValidationError as exc:
        group, index = _error_location(exc)
        raise MalformedTableError(exc.message, group=group, index=index) from None

    groups: List[tuple] = []
    for group_idx, group in enumerate(data["groups"]):
        rules = []
        for rule_idx, item in enumerate(group):
            try:
                phonemes = tuple(_parse_phoneme(p) for p in item["phonemes"])
                rules.append(Rule(item["left"], item["bracket"], item["right"], phonemes))
            except ValueError as exc:
                raise MalformedTableError(str(exc), group=group_idx, index=rule_idx) from None
        groups.append(tuple(rules))

    table = RuleTable(tuple(groups))
    logger.debug("Parsed rule table with %d rules", table.rule_count)
    return table


def load_rule_table(path: str | Path) -> RuleTable:
    """Load a rule table from a JSON file.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        MalformedTableError: If the file is not valid JSON or not a valid table.
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise MalformedTableError("{} is not valid JSON: {}".format(path.name, exc)) from None
    return parse_rule_table(data)


def dump_rule_table(table: RuleTable) -> Dict[str, Any]:
    """Convert ``table`` to the JSON document format (phonemes by name)."""
    return {
        "groups": [
            [
                {
                    "left": rule.left,
                    "bracket": rule.bracket,
                    "right": rule.right,
                    "phonemes": [code.name for code in rule.phonemes],
                }
                for rule in group
            ]
            for group in table.groups
        ],
    }
