"""C header and source formatter for embedding the blob in firmware.

WHY: The embedded runtime is built from C sources; the simplest way to
ship the blob is as a const byte array the linker places in flash.

HOW: Produces two files. The header declares the array with its exact
size inside an include guard and an ``extern "C"`` block, so it links
from both C and C++. The source includes the header and defines the
array as a hex dump, each line prefixed with the offset of its first
byte in a comment for easy cross-referencing with the offset table.

RULES:
- Header suffix ".h", source suffix ".c"; the source includes "{stem}.h"
- Include guard: "__" + stem upper-cased + "_H"
- Declared size == defined size == number of emitted bytes == len(blob)
- Hex bytes are lower case ("0x1c"), ``bytes_per_line`` per line
- Offset comments are 4 hex digits: ``/*01a0*/``
- No trailing whitespace on any line
"""

from __future__ import annotations

import re
from typing import List, Optional

from compact_ruleset.config import (
    DEFAULT_ARRAY_NAME,
    DEFAULT_STEM,
    load_bytes_per_line,
    validate_bytes_per_line,
    validate_c_identifier,
    validate_stem,
)
from compact_ruleset.core.ir import CompiledRuleset
from compact_ruleset.formatters.base import BaseFormatter, FormatterOutput


def _include_guard(stem: str) -> str:
    return "__{}_H".format(re.sub(r"[^A-Za-z0-9_]", "_", stem).upper())


def render_header(stem: str, array_name: str, size: int) -> str:
    """Render the declaration-only header for an array of ``size`` bytes."""
    guard = _include_guard(stem)
    lines = [
        "#ifndef {}".format(guard),
        "#define {}".format(guard),
        "",
        "#ifdef __cplusplus",
        'extern "C" {',
        "#endif",
        "",
        "#include <stdint.h>",
        "",
        "extern const uint8_t {}[{}];".format(array_name, size),
        "",
        "#ifdef __cplusplus",
        "}",
        "#endif",
        "",
        "#endif",
    ]
    return "\n".join(lines) + "\n"


def render_source(stem: str, array_name: str, blob: bytes, bytes_per_line: int) -> str:
    """Render the array definition as a commented hex dump."""
    lines = [
        '#include "{}.h"'.format(stem),
        "const uint8_t {}[{}] = {{".format(array_name, len(blob)),
    ]
    for start in range(0, len(blob), bytes_per_line):
        chunk = blob[start:start + bytes_per_line]
        hex_bytes = " ".join("0x{:02x},".format(b) for b in chunk)
        lines.append("/*{:04x}*/  {}".format(start, hex_bytes))
    lines.append("};")
    return "\n".join(lines) + "\n"


class CSourceFormatter(BaseFormatter):
    """Formatter that produces a C header/source pair defining the blob.

    Args:
        stem: File stem; the source includes "{stem}.h".
        array_name: C identifier of the byte array.
        bytes_per_line: Hex bytes per source line.

    Raises:
        ValueError: If ``stem`` is empty or has a directory part,
            ``array_name`` is not a C identifier, or ``bytes_per_line``
            is less than 1.
    """

    def __init__(
        self,
        stem: Optional[str] = None,
        array_name: Optional[str] = None,
        bytes_per_line: Optional[int] = None,
    ) -> None:
        self.stem = validate_stem(stem if stem is not None else DEFAULT_STEM)
        self.array_name = validate_c_identifier(
            array_name if array_name is not None else DEFAULT_ARRAY_NAME, "array name",
        )
        self.bytes_per_line = validate_bytes_per_line(
            bytes_per_line if bytes_per_line is not None else load_bytes_per_line()
        )

    @property
    def name(self) -> str:
        return "C source"

    def format(self, compiled: CompiledRuleset) -> List[FormatterOutput]:
        return [
            FormatterOutput(
                suffix=".h",
                content=render_header(self.stem, self.array_name, compiled.size),
            ),
            FormatterOutput(
                suffix=".c",
                content=render_source(
                    self.stem, self.array_name, compiled.blob, self.bytes_per_line,
                ),
            ),
        ]
