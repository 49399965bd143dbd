"""
Unit tests for Settings and CLI override parsing.
"""

from pathlib import Path

import pytest

from adjuster.cli.shared import parse_config_overrides, setup_settings
from adjuster.config import Settings
from adjuster.error_handling import ConfigurationError


def test_defaults():
    settings = Settings.from_env()
    assert settings.log_level == "WARNING"
    assert settings.log_file is None
    assert settings.int_bits == 0
    assert settings.width is None
    assert settings.explain is False
    settings.ensure()


def test_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("ADJUSTER_LOG_LEVEL", "debug")
    monkeypatch.setenv("ADJUSTER_LOG_FILE", str(tmp_path / "run.log"))
    monkeypatch.setenv("ADJUSTER_INT_BITS", "32")
    monkeypatch.setenv("ADJUSTER_EXPLAIN", "yes")
    settings = Settings.from_env()
    assert settings.log_level == "DEBUG"
    assert settings.log_file == tmp_path / "run.log"
    assert settings.width == 32
    assert settings.explain is True


def test_non_integer_width_env(monkeypatch):
    monkeypatch.setenv("ADJUSTER_INT_BITS", "wide")
    with pytest.raises(ConfigurationError, match="ADJUSTER_INT_BITS"):
        Settings.from_env()


@pytest.mark.parametrize("bits", [1, 129, -8])
def test_ensure_rejects_bad_width(bits):
    with pytest.raises(ConfigurationError, match="int_bits"):
        Settings(int_bits=bits).ensure()


def test_ensure_rejects_bad_log_level():
    with pytest.raises(ConfigurationError, match="log level"):
        Settings(log_level="LOUD").ensure()


def test_apply_overrides():
    settings = Settings()
    settings.apply_overrides({"int_bits": 16, "log_level": "info", "log_file": "out.log"})
    assert settings.int_bits == 16
    assert settings.log_level == "INFO"
    assert settings.log_file == Path("out.log")


def test_apply_unknown_override():
    with pytest.raises(ConfigurationError, match="threshold"):
        Settings().apply_overrides({"threshold": 6})


def test_parse_config_overrides():
    parsed = parse_config_overrides(["int_bits=32", "explain=true", "log_level = INFO", "x=-3", "y=²"])
    assert parsed == {"int_bits": 32, "explain": True, "log_level": "INFO", "x": -3, "y": "²"}
    assert parse_config_overrides(None) == {}


def test_setup_settings_precedence(monkeypatch):
    """Options beat the environment and --set beats options."""
    monkeypatch.setenv("ADJUSTER_INT_BITS", "8")
    settings = setup_settings(int_bits=16, config_overrides=["int_bits=32"])
    assert settings.int_bits == 32
    settings = setup_settings(int_bits=16)
    assert settings.int_bits == 16
    settings = setup_settings()
    assert settings.int_bits == 8


def test_override_without_equals_is_rejected():
    with pytest.raises(ConfigurationError, match="key=value"):
        parse_config_overrides(["junk"])


@pytest.mark.parametrize("raw", ["no", "off", "False ", "0"])
def test_explain_override_false_values(raw):
    """String forms of false turn the panel off."""
    settings = setup_settings(explain=True, config_overrides=[f"explain={raw}"])
    assert settings.explain is False


def test_explain_override_true_values():
    assert setup_settings(config_overrides=["explain=yes"]).explain is True
    assert setup_settings(config_overrides=["explain=on"]).explain is True


def test_explain_override_rejects_garbage():
    with pytest.raises(ConfigurationError, match="explain expects a boolean"):
        Settings().apply_overrides({"explain": "maybe"})


def test_int_bits_override_rejects_non_ascii_digits():
    with pytest.raises(ConfigurationError, match="int_bits expects an integer"):
        setup_settings(config_overrides=["int_bits=²"])


def test_int_bits_override_from_string():
    settings = Settings()
    settings.apply_overrides({"int_bits": " 16 "})
    assert settings.int_bits == 16
