"""Tests for the command-line interface.

WHY: The CLI is how a firmware build invokes the compiler. It must write
the selected artifacts, print status to stderr only, and exit non-zero
without writing anything when the table cannot be compiled.

HOW: Tests call main() with explicit argv, write into tmp_path, and
capture stdout/stderr with capsys.

RULES:
- Successful runs return normally; failures raise SystemExit(1)
- Nothing is written when compilation fails
"""

import dataclasses
import json

import pytest

from compact_ruleset.cli import _parse_formats, _verify, build_parser, main
from compact_ruleset.config import DEFAULT_ARRAY_NAME, DEFAULT_STEM
from compact_ruleset.core.assembler import compile_blob, compile_ruleset
from compact_ruleset.core.errors import RulesetError
from compact_ruleset.core.ir import Rule
from compact_ruleset.formatters import FORMATTERS
from compact_ruleset.rules import ENGLISH_RULES, dump_rule_table

from conftest import make_table


def _write_rules(path, table):
    path.write_text(json.dumps(dump_rule_table(table)), encoding="utf-8")
    return str(path)


def _run(tmp_path, *extra):
    main(["--output-dir", str(tmp_path), "--stem", "rules", *extra])


class TestParser:

    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.rules is None
        assert args.stem == DEFAULT_STEM
        assert args.array_name == DEFAULT_ARRAY_NAME
        assert args.stdout is False
        assert args.verify is False

    def test_bytes_per_line_is_int(self):
        args = build_parser().parse_args(["--bytes-per-line", "12"])
        assert args.bytes_per_line == 12


class TestParseFormats:

    def test_all(self):
        assert _parse_formats("all") == list(FORMATTERS)

    def test_comma_list(self):
        assert _parse_formats("binary, stats") == ["binary", "stats"]

    def test_unknown(self):
        with pytest.raises(ValueError, match="Unknown format 'pdf'"):
            _parse_formats("binary,pdf")


class TestCompileToFiles:

    def test_default_c_source(self, tmp_path):
        _run(tmp_path, "--formats", "c_source")
        assert sorted(p.name for p in tmp_path.iterdir()) == ["rules.c", "rules.h"]
        header = (tmp_path / "rules.h").read_text(encoding="utf-8")
        assert "extern const uint8_t {}[9385];".format(DEFAULT_ARRAY_NAME) in header

    def test_all_formats(self, tmp_path):
        _run(tmp_path, "--formats", "all")
        assert sorted(p.name for p in tmp_path.iterdir()) == [
            "rules-listing.txt",
            "rules-rules.json",
            "rules-stats.txt",
            "rules.bin",
            "rules.c",
            "rules.h",
        ]
        assert (tmp_path / "rules.bin").read_bytes() == compile_blob(ENGLISH_RULES)

    def test_custom_rules_file(self, tmp_path, small_table):
        rules_path = _write_rules(tmp_path / "small.json", small_table)
        out_dir = tmp_path / "out"
        out_dir.mkdir()
        _run(out_dir, "--rules", rules_path, "--formats", "binary")
        assert (out_dir / "rules.bin").read_bytes() == compile_blob(small_table)

    def test_existing_files_overwritten(self, tmp_path):
        (tmp_path / "rules.bin").write_bytes(b"stale")
        _run(tmp_path, "--formats", "binary")
        assert (tmp_path / "rules.bin").read_bytes() == compile_blob(ENGLISH_RULES)

    def test_array_name_and_line_width(self, tmp_path):
        _run(tmp_path, "--formats", "c_source", "--array-name", "kSpeech", "--bytes-per-line", "4")
        source = (tmp_path / "rules.c").read_text(encoding="utf-8")
        assert "const uint8_t kSpeech[9385] = {" in source
        assert "/*0004*/  " in source

    def test_status_goes_to_stderr(self, tmp_path, capsys):
        _run(tmp_path, "--formats", "binary")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Compiling 706 rules" in captured.err
        assert "rules.bin" in captured.err

    def test_verify(self, tmp_path, capsys):
        _run(tmp_path, "--formats", "binary", "--verify")
        assert "Verified" in capsys.readouterr().err


class TestStdout:

    def test_prints_text_outputs(self, tmp_path, capsys, monkeypatch):
        monkeypatch.chdir(tmp_path)
        main(["--formats", "c_source", "--stdout"])
        captured = capsys.readouterr()
        assert captured.out.startswith("#ifndef ")
        assert "[9385] = {" in captured.out
        assert list(tmp_path.iterdir()) == []

    def test_binary_skipped(self, tmp_path, capsys, monkeypatch):
        monkeypatch.chdir(tmp_path)
        main(["--formats", "binary,stats", "--stdout"])
        captured = capsys.readouterr()
        assert captured.out.startswith("Rules: 706\n")
        assert "Skipped binary output" in captured.err
        assert list(tmp_path.iterdir()) == []


class TestFailures:
    """Every failure exits 1 with a message and writes nothing."""

    def _assert_failed(self, exc_info, capsys, text):
        assert exc_info.value.code == 1
        err = capsys.readouterr().err
        assert "Error: " in err
        assert text in err

    def test_value_too_long(self, tmp_path, capsys):
        table = make_table({"a": [Rule("", "a", "x" * 256)]})
        rules_path = _write_rules(tmp_path / "long.json", table)
        out_dir = tmp_path / "out"
        out_dir.mkdir()
        with pytest.raises(SystemExit) as exc_info:
            _run(out_dir, "--rules", rules_path, "--formats", "all")
        self._assert_failed(exc_info, capsys, "exceeds the 255-byte limit")
        assert list(out_dir.iterdir()) == []

    def test_malformed_rules_file(self, tmp_path, capsys):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"groups": []}), encoding="utf-8")
        with pytest.raises(SystemExit) as exc_info:
            _run(tmp_path, "--rules", str(path))
        self._assert_failed(exc_info, capsys, "Malformed rule table")

    def test_missing_rules_file(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            _run(tmp_path, "--rules", str(tmp_path / "nope.json"))
        self._assert_failed(exc_info, capsys, "Rule table not found")

    def test_unknown_format(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            _run(tmp_path, "--formats", "pdf")
        self._assert_failed(exc_info, capsys, "Unknown format")
        assert list(tmp_path.iterdir()) == []

    def test_missing_output_dir(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--output-dir", str(tmp_path / "missing")])
        self._assert_failed(exc_info, capsys, "Output directory does not exist")

    def test_empty_stem(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--output-dir", str(tmp_path), "--stem", ""])
        self._assert_failed(exc_info, capsys, "Output stem must not be empty")
        assert list(tmp_path.iterdir()) == []

    def test_empty_stem_without_c_source(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--output-dir", str(tmp_path), "--stem", "", "--formats", "binary"])
        self._assert_failed(exc_info, capsys, "Output stem must not be empty")
        assert list(tmp_path.iterdir()) == []

    def test_stem_with_directory(self, tmp_path, capsys):
        (tmp_path / "sub").mkdir()
        with pytest.raises(SystemExit) as exc_info:
            _run(tmp_path, "--stem", "sub/rules")
        self._assert_failed(exc_info, capsys, "Invalid output stem")
        assert list((tmp_path / "sub").iterdir()) == []

    def test_bad_line_width_in_environment(self, tmp_path, capsys, monkeypatch):
        monkeypatch.setenv("COMPACT_RULESET_BYTES_PER_LINE", "abc")
        with pytest.raises(SystemExit) as exc_info:
            _run(tmp_path, "--formats", "c_source")
        self._assert_failed(exc_info, capsys, "COMPACT_RULESET_BYTES_PER_LINE must be an integer")
        assert list(tmp_path.iterdir()) == []

    def test_line_width_flag_overrides_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv("COMPACT_RULESET_BYTES_PER_LINE", "abc")
        _run(tmp_path, "--formats", "c_source", "--bytes-per-line", "8")
        assert (tmp_path / "rules.c").exists()

    def test_invalid_array_name(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            _run(tmp_path, "--array-name", "bad-name")
        self._assert_failed(exc_info, capsys, "Invalid array name")
        assert list(tmp_path.iterdir()) == []


class TestVerify:

    def test_matching_table_passes(self, small_table):
        _verify(compile_ruleset(small_table))

    def test_mismatch_raises(self, small_table, single_rule_table):
        compiled = compile_ruleset(small_table)
        wrong = dataclasses.replace(compiled, table=single_rule_table)
        with pytest.raises(RulesetError, match="Verification failed"):
            _verify(wrong)
