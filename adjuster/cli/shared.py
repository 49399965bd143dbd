"""Shared utilities for CLI commands."""

from __future__ import annotations

import contextlib
import logging
import re
import sys
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, TextIO

from dotenv import load_dotenv

from ..config import Settings
from ..error_handling import ConfigurationError, ErrorHandler, format_error_message, setup_logging


def setup_settings(
    log_level: Optional[str] = None,
    int_bits: Optional[int] = None,
    explain: Optional[bool] = None,
    *,
    config_overrides: Optional[List[str]] = None,
) -> Settings:
    """Setup and validate settings for CLI commands.

    Precedence, lowest first: defaults, environment (and ``.env``),
    explicit options, ``--set`` overrides.
    """
    load_dotenv()
    settings = Settings.from_env()

    if log_level is not None:
        settings.log_level = log_level.upper()
    if int_bits is not None:
        settings.int_bits = int_bits
    if explain is not None:
        settings.explain = explain

    overrides_dict = parse_config_overrides(config_overrides)
    if overrides_dict:
        settings.apply_overrides(overrides_dict)

    settings.ensure()
    setup_logging(settings.log_level, settings.log_file)
    return settings


def parse_config_overrides(config_overrides: Optional[List[str]]) -> Dict[str, Any]:
    """Parse CLI configuration overrides in key=value format.

    Args:
        config_overrides: List of strings in format "key=value"

    Returns:
        Dictionary of parsed overrides
    """
    if not config_overrides:
        return {}

    overrides = {}
    for override in config_overrides:
        if "=" not in override:
            raise ConfigurationError(format_error_message("INVALID_OVERRIDE", override=override))

        key, value = override.split("=", 1)
        key = key.strip()
        value = value.strip()

        # Try to convert value to appropriate type
        if value.lower() in ("true", "false"):
            value = value.lower() == "true"
        elif re.fullmatch(r"-?[0-9]+", value):
            value = int(value)
        # Otherwise keep as string

        overrides[key] = value

    return overrides


@contextlib.contextmanager
def open_input(path: Optional[Path]) -> Iterator[TextIO]:
    """Yield the input stream: ``path`` if given, otherwise stdin."""
    if path is None:
        yield sys.stdin
        return
    # reported by the caller
    with ErrorHandler("open input", log_level=logging.DEBUG, path=path):
        handle = path.open("r", encoding="utf-8")
    with handle:
        yield handle
