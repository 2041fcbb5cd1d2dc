"""Command-line interface for the compact ruleset compiler.

WHY: The compiler runs as a build step. Build systems need one command
that takes a rule table, produces the embeddable artifacts next to the
firmware sources, and fails loudly (non-zero exit, nothing written)
when the table cannot be compiled.

HOW: Uses argparse to accept an optional rule table file, output format
selection, naming options and an output directory. Compiles the table,
optionally decodes the blob again to verify it, runs the selected
formatters and saves (or prints) their outputs. Status messages go to
stderr; stdout carries output only with --stdout.

RULES:
- No --rules: compile the built-in English table
- --formats: comma-separated formatter keys, or "all" (default from config)
- Output naming: {stem}{suffix}; existing files are overwritten
- --stem must be non-empty and must not contain a directory part
- All outputs are rendered before any file is written
- --stdout prints text outputs instead of saving; binary outputs are skipped
- --verify decodes the blob and compares it with the source table
- Compile/config errors: "Error: ..." on stderr, exit status 1
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from compact_ruleset.config import (
    DEFAULT_ARRAY_NAME,
    DEFAULT_FORMATS,
    DEFAULT_STEM,
    LOG_LEVEL,
    validate_stem,
)
from compact_ruleset.core.assembler import compile_ruleset
from compact_ruleset.core.errors import RulesetError
from compact_ruleset.core.ir import CompiledRuleset, RuleTable
from compact_ruleset.core.reader import RulesetReader
from compact_ruleset.formatters import FORMATTERS
from compact_ruleset.formatters.base import BaseFormatter, FormatterOutput
from compact_ruleset.formatters.c_source import CSourceFormatter
from compact_ruleset.rules import ENGLISH_RULES, load_rule_table

logger = logging.getLogger(__name__)


def _status(msg: str) -> None:
    """Print a status message to stderr.

    WHY: Status output must not pollute stdout so --stdout can be piped.
    """
    print(msg, file=sys.stderr, flush=True)


def _error(msg: str) -> None:
    print("Error: {}".format(msg), file=sys.stderr)
    sys.exit(1)


def _parse_formats(value: Optional[str]) -> List[str]:
    """Resolve the --formats value to a list of registered keys.

    RULES:
    - "all" selects every registered formatter, in registry order
    - Unknown keys raise ValueError listing the available ones
    """
    raw = value if value else DEFAULT_FORMATS
    keys = [k.strip() for k in raw.split(",") if k.strip()]
    if keys == ["all"]:
        return list(FORMATTERS.keys())
    for key in keys:
        if key not in FORMATTERS:
            available = ", ".join(sorted(FORMATTERS.keys()))
            raise ValueError("Unknown format '{}'. Available formats: {}".format(key, available))
    return keys


def _make_formatter(key: str, args: argparse.Namespace) -> BaseFormatter:
    if key == "c_source":
        return CSourceFormatter(
            stem=args.stem,
            array_name=args.array_name,
            bytes_per_line=args.bytes_per_line,
        )
    return FORMATTERS[key]()


def _verify(compiled: CompiledRuleset) -> None:
    """Decode the blob and check it reproduces the source table.

    Raises:
        RulesetError: If any group or rule differs.
    """
    decoded = RulesetReader(compiled.blob).to_rule_table()
    for group, (expected, actual) in enumerate(zip(compiled.table.groups, decoded.groups)):
        if len(expected) != len(actual):
            raise RulesetError("Verification failed: group {} has {} rules, blob has {}".format(
                group, len(expected), len(actual),
            ))
        for index, (want, got) in enumerate(zip(expected, actual)):
            if want != got:
                raise RulesetError("Verification failed: group {} rule {} decodes as {}".format(
                    group, index, got,
                ))


def _load_table(rules_path: Optional[str]) -> RuleTable:
    if not rules_path:
        _status("Using built-in English rule table")
        return ENGLISH_RULES
    path = Path(rules_path)
    if not path.is_file():
        raise FileNotFoundError("Rule table not found: {}".format(path))
    _status("Loading rule table: {}".format(path))
    return load_rule_table(path)


def _save_output(output: FormatterOutput, stem: str, output_dir: Path) -> Path:
    """Write one formatter output to ``{output_dir}/{stem}{suffix}``.

    RULES:
    - String content written as UTF-8 text
    - Bytes content written in binary mode
    - Existing files are overwritten
    """
    path = output_dir / "{}{}".format(stem, output.suffix)
    if output.is_binary:
        path.write_bytes(output.content)
    else:
        path.write_text(output.content, encoding="utf-8")
    return path


def run(args: argparse.Namespace) -> None:
    """Execute the compile pipeline for parsed arguments.

    Raises:
        ValueError: Configuration or compilation errors.
        OSError: Rule file or output directory problems.
    """
    validate_stem(args.stem)
    format_keys = _parse_formats(args.formats)
    formatters = [_make_formatter(key, args) for key in format_keys]

    output_dir = Path(args.output_dir).resolve() if args.output_dir else Path.cwd()
    if not args.stdout and not output_dir.is_dir():
        raise NotADirectoryError("Output directory does not exist: {}".format(output_dir))

    table = _load_table(args.rules)

    _status("Compiling {} rules...".format(table.rule_count))
    compiled = compile_ruleset(table)
    _status("  Blob: {} bytes ({} strings, {} phoneme sequences, data at {})".format(
        compiled.size, len(compiled.strings), len(compiled.phonemes), compiled.data_offset,
    ))

    if args.verify:
        _verify(compiled)
        _status("  Verified: blob decodes to the source table")

    # Render everything before touching the filesystem
    outputs: List[FormatterOutput] = []
    for formatter in formatters:
        _status("  Running {} formatter...".format(formatter.name))
        outputs.extend(formatter.format(compiled))

    if args.stdout:
        for output in outputs:
            if output.is_binary:
                _status("  Skipped binary output {}{} (not printable)".format(args.stem, output.suffix))
                continue
            sys.stdout.write(output.content)
        sys.stdout.flush()
        return

    saved: List[Path] = []
    for output in outputs:
        saved.append(_save_output(output, args.stem, output_dir))

    _status("")
    _status("Done! Saved {} file(s) to {}".format(len(saved), output_dir))
    for path in saved:
        _status("  {}".format(path.name))


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable: tests can inspect the parser without running a compile.
    """
    parser = argparse.ArgumentParser(
        prog="compact-ruleset",
        description="Compile a letter-to-sound rule table into a compact, "
                    "offset-indexed binary blob and emit it for embedding.",
    )

    parser.add_argument(
        "--rules",
        default=None,
        help="Path to a JSON rule table (default: built-in English rules).",
    )

    parser.add_argument(
        "--formats",
        default=None,
        help="Comma-separated list of output formats, or 'all'. "
             "Available: {}. Default: {}.".format(
                 ", ".join(sorted(FORMATTERS.keys())), DEFAULT_FORMATS,
             ),
    )

    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory to save output files (default: current directory).",
    )

    parser.add_argument(
        "--stem",
        default=DEFAULT_STEM,
        help="Output file stem (default: %(default)s).",
    )

    parser.add_argument(
        "--array-name",
        default=DEFAULT_ARRAY_NAME,
        help="Name of the C byte array (default: %(default)s).",
    )

    parser.add_argument(
        "--bytes-per-line",
        type=int,
        default=None,
        help="Hex bytes per line in the C source "
             "(default: COMPACT_RULESET_BYTES_PER_LINE or 16).",
    )

    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print text outputs to stdout instead of saving files.",
    )

    parser.add_argument(
        "--verify",
        action="store_true",
        help="Decode the compiled blob and check it against the rule table.",
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging.",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else getattr(logging, LOG_LEVEL, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        run(args)
    except KeyboardInterrupt:
        _status("\nCancelled by user.")
        sys.exit(130)
    except (ValueError, OSError) as e:
        # Config errors, malformed tables, oversize values or blobs, file problems
        logger.debug("Compilation failed", exc_info=True)
        _error(str(e))


if __name__ == "__main__":
    main()
