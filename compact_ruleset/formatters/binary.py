"""Raw binary formatter.

WHY: Some firmware builds pull binary resources in with the linker or an
``incbin`` directive rather than compiling C arrays, and a raw file is
the easiest thing to hash, diff or inspect with a hex viewer.

RULES:
- Output is exactly the blob bytes, nothing added
- Output suffix: ".bin"
"""

from __future__ import annotations

from typing import List

from compact_ruleset.core.ir import CompiledRuleset
from compact_ruleset.formatters.base import BaseFormatter, FormatterOutput


class BinaryFormatter(BaseFormatter):
    """Formatter that writes the blob as-is."""

    @property
    def name(self) -> str:
        return "Raw binary"

    def format(self, compiled: CompiledRuleset) -> List[FormatterOutput]:
        return [
            FormatterOutput(
                suffix=".bin",
                content=bytes(compiled.blob),
            )
        ]
