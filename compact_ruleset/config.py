"""Configuration defaults for emitted artifacts, and .env loading.

WHY: Host builds differ in what they want the generated files and the
C array to be called, and in how chatty the compiler should be. Keeping
those knobs as plain module-level constants, overridable from the
environment, means a build system can set them without touching code.

HOW: python-dotenv loads the .env file on import. Constants read from
os.environ with documented defaults. validate_c_identifier() gives a
clear error when a configured name cannot be used in C source.

RULES:
- COMPACT_RULESET_STEM: output file stem (default "tts_rules_compact")
- COMPACT_RULESET_ARRAY_NAME: C array identifier (default "g_abyTTS")
- COMPACT_RULESET_BYTES_PER_LINE: hex bytes per source line (default 16),
  read when a C source formatter is created so a bad value is a normal error
- COMPACT_RULESET_FORMATS: comma-separated formatter keys (default "c_source")
- COMPACT_RULESET_LOG_LEVEL: logging level name (default "WARNING")
- Configuration never affects the blob bytes, only how they are emitted
"""

from __future__ import annotations

import os
import re

from dotenv import load_dotenv

# Load .env from the project root (where the compiler is run from)
load_dotenv()

DEFAULT_STEM = os.getenv("COMPACT_RULESET_STEM", "tts_rules_compact")
DEFAULT_ARRAY_NAME = os.getenv("COMPACT_RULESET_ARRAY_NAME", "g_abyTTS")
DEFAULT_FORMATS = os.getenv("COMPACT_RULESET_FORMATS", "c_source")
LOG_LEVEL = os.getenv("COMPACT_RULESET_LOG_LEVEL", "WARNING").upper()

_C_IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def validate_c_identifier(name: str, what: str = "C identifier") -> str:
    """Check that ``name`` can be used as a C identifier.

    RULES:
    - Letters, digits and underscores only, not starting with a digit
    - Raises ValueError naming what the identifier was for

    Returns:
        ``name`` unchanged, for chaining.
    """
    if not _C_IDENTIFIER_RE.match(name or ""):
        raise ValueError(
            "Invalid {} '{}': use letters, digits and underscores, "
            "not starting with a digit.".format(what, name)
        )
    return name


def validate_bytes_per_line(count: int) -> int:
    """Check that ``count`` is a usable hex dump line width."""
    if count < 1:
        raise ValueError("Bytes per line must be at least 1, got {}".format(count))
    return count


def validate_stem(stem: str) -> str:
    """Check that ``stem`` can name the generated files.

    WHY: The C source includes "{stem}.h"; an empty stem or one with a
    directory part would produce a source that includes a header the
    compiler never wrote under that name.

    RULES:
    - Must not be empty or whitespace
    - Must not contain a path separator
    """
    if not stem or not stem.strip():
        raise ValueError("Output stem must not be empty.")
    if "/" in stem or "\\" in stem:
        raise ValueError(
            "Invalid output stem '{}': use --output-dir for the directory.".format(stem)
        )
    return stem


def load_bytes_per_line() -> int:
    """Read the configured hex dump line width from the environment.

    HOW: Reads COMPACT_RULESET_BYTES_PER_LINE (default 16) at call time.

    RULES:
    - Raises ValueError if the value is not a positive integer
    """
    raw = os.getenv("COMPACT_RULESET_BYTES_PER_LINE", "16").strip()
    try:
        count = int(raw)
    except ValueError:
        raise ValueError(
            "COMPACT_RULESET_BYTES_PER_LINE must be an integer, got '{}'".format(raw)
        ) from None
    return validate_bytes_per_line(count)
