"""Formatter interface and the output file container.

WHY: The C pair, the raw binary and the reports are all renderings of
one CompiledRuleset. The CLI renders every selected output before it
writes any, so each formatter has to hand back plain in-memory files.

HOW: BaseFormatter declares ``name`` and ``format(compiled)``.
FormatterOutput holds a suffix and the rendered content; ``is_binary``
tells the CLI whether the content is bytes to write as-is or text.

RULES:
- ``format()`` returns a list; the C formatter returns two outputs
- ``suffix`` follows the stem directly: ``".h"``, ``"-stats.txt"``
- Text content is written as UTF-8, bytes content unchanged
- Formatters never touch the filesystem
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from compact_ruleset.core.ir import CompiledRuleset


@dataclass
class FormatterOutput:
    """One rendered output file.

    Attributes:
        suffix: Appended to the stem, e.g. ``".c"`` → ``"tts_rules_compact.c"``.
        content: Text (sources, reports) or bytes (the raw blob).
    """

    suffix: str
    content: str | bytes

    @property
    def is_binary(self) -> bool:
        return isinstance(self.content, bytes)


class BaseFormatter(ABC):
    """Renders a CompiledRuleset into one or more output files.

    New formats subclass this and are added to FORMATTERS in
    formatters/__init__.py.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Display name used in status lines, e.g. 'C source'."""

    @abstractmethod
    def format(self, compiled: CompiledRuleset) -> list[FormatterOutput]:
        """Render ``compiled``; must not modify it."""
