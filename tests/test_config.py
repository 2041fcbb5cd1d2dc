"""Unit tests for configuration defaults and validators.

WHY: Configured names end up in generated C source. A bad identifier
must fail with a clear message before anything is written.

HOW: Tests call the validators directly and reload the config module
under patched environment variables.

RULES:
- Environment variables override the defaults at import time
"""

import importlib

import pytest

from compact_ruleset import config
from compact_ruleset.config import (
    load_bytes_per_line,
    validate_bytes_per_line,
    validate_c_identifier,
    validate_stem,
)


class TestValidateCIdentifier:

    @pytest.mark.parametrize("name", ["g_abyTTS", "_rules", "a1", "R"])
    def test_valid(self, name):
        assert validate_c_identifier(name) == name

    @pytest.mark.parametrize("name", ["", "1abc", "my-rules", "two words", "rules.c"])
    def test_invalid(self, name):
        with pytest.raises(ValueError, match="Invalid array name"):
            validate_c_identifier(name, "array name")


class TestValidateBytesPerLine:

    def test_valid(self):
        assert validate_bytes_per_line(1) == 1
        assert validate_bytes_per_line(16) == 16

    @pytest.mark.parametrize("count", [0, -4])
    def test_invalid(self, count):
        with pytest.raises(ValueError, match="at least 1"):
            validate_bytes_per_line(count)


class TestValidateStem:

    @pytest.mark.parametrize("stem", ["tts_rules_compact", "rules", "my-rules.v2"])
    def test_valid(self, stem):
        assert validate_stem(stem) == stem

    @pytest.mark.parametrize("stem", ["", "   "])
    def test_empty(self, stem):
        with pytest.raises(ValueError, match="must not be empty"):
            validate_stem(stem)

    @pytest.mark.parametrize("stem", ["build/rules", "build\\rules", "/rules"])
    def test_directory_part(self, stem):
        with pytest.raises(ValueError, match="--output-dir"):
            validate_stem(stem)


class TestLoadBytesPerLine:
    """The line width is read from the environment when it is needed."""

    def test_default(self, monkeypatch):
        monkeypatch.delenv("COMPACT_RULESET_BYTES_PER_LINE", raising=False)
        assert load_bytes_per_line() == 16

    def test_override(self, monkeypatch):
        monkeypatch.setenv("COMPACT_RULESET_BYTES_PER_LINE", " 8 ")
        assert load_bytes_per_line() == 8

    def test_not_an_integer(self, monkeypatch):
        monkeypatch.setenv("COMPACT_RULESET_BYTES_PER_LINE", "abc")
        with pytest.raises(ValueError, match="must be an integer, got 'abc'"):
            load_bytes_per_line()

    def test_zero(self, monkeypatch):
        monkeypatch.setenv("COMPACT_RULESET_BYTES_PER_LINE", "0")
        with pytest.raises(ValueError, match="at least 1"):
            load_bytes_per_line()

    def test_bad_value_does_not_break_import(self, monkeypatch):
        monkeypatch.setenv("COMPACT_RULESET_BYTES_PER_LINE", "abc")
        try:
            importlib.reload(config)
        finally:
            monkeypatch.undo()
            importlib.reload(config)


class TestEnvironment:

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("COMPACT_RULESET_STEM", "speech_rules")
        monkeypatch.setenv("COMPACT_RULESET_ARRAY_NAME", "kRules")
        monkeypatch.setenv("COMPACT_RULESET_FORMATS", "binary,stats")
        monkeypatch.setenv("COMPACT_RULESET_LOG_LEVEL", "debug")
        try:
            reloaded = importlib.reload(config)
            assert reloaded.DEFAULT_STEM == "speech_rules"
            assert reloaded.DEFAULT_ARRAY_NAME == "kRules"
            assert reloaded.DEFAULT_FORMATS == "binary,stats"
            assert reloaded.LOG_LEVEL == "DEBUG"
        finally:
            monkeypatch.undo()
            importlib.reload(config)
