from __future__ import annotations

import os
import re
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

from .constants import (
    ENV_EXPLAIN,
    ENV_INT_BITS,
    ENV_LOG_FILE,
    ENV_LOG_LEVEL,
    MAX_INT_BITS,
    MIN_INT_BITS,
    VALID_LOG_LEVELS,
)
from .error_handling import ConfigurationError, format_error_message


def _get_bool(key: str, default: bool) -> bool:
    value = os.environ.get(key, str(default)).lower()
    return value in ("true", "1", "yes")


def _get_int(key: str, default: int) -> int:
    raw = os.environ.get(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(f"{key} must be an integer, got {raw!r}") from e


def _coerce_bool(key: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in ("true", "1", "yes", "on"):
        return True
    if text in ("false", "0", "no", "off", ""):
        return False
    raise ConfigurationError(
        format_error_message("INVALID_SETTING_VALUE", key=key, expected="a boolean", value=value)
    )


def _coerce_int(key: str, value: Any) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    text = str(value).strip()
    if not re.fullmatch(r"-?[0-9]+", text):
        raise ConfigurationError(
            format_error_message("INVALID_SETTING_VALUE", key=key, expected="an integer", value=value)
        )
    return int(text)


@dataclass
class Settings:
    log_level: str = "WARNING"
    log_file: Optional[Path] = None
    int_bits: int = 0  # 0 = unbounded Python integers
    explain: bool = False

    @staticmethod
    def from_env() -> "Settings":
        log_file = os.environ.get(ENV_LOG_FILE, "")
        return Settings(
            log_level=os.environ.get(ENV_LOG_LEVEL, "WARNING").upper(),
            log_file=Path(log_file) if log_file else None,
            int_bits=_get_int(ENV_INT_BITS, 0),
            explain=_get_bool(ENV_EXPLAIN, False),
        )

    @property
    def width(self) -> Optional[int]:
        """Fixed integer width, or None when arithmetic is unbounded."""
        return self.int_bits or None

    def apply_overrides(self, overrides: Dict[str, Any]) -> None:
        """Set fields by name, e.g. ``{"int_bits": 32}``."""
        names = [f.name for f in fields(self)]
        for key, value in overrides.items():
            if key not in names:
                raise ConfigurationError(
                    format_error_message("UNKNOWN_SETTING", key=key, names=", ".join(names))
                )
            if key == "log_file":
                value = Path(str(value)) if value else None
            elif key == "log_level":
                value = str(value).upper()
            elif key == "explain":
                value = _coerce_bool(key, value)
            elif key == "int_bits":
                value = _coerce_int(key, value)
            setattr(self, key, value)

    def ensure(self) -> None:
        if self.log_level not in VALID_LOG_LEVELS:
            raise ConfigurationError(
                format_error_message("INVALID_LOG_LEVEL", levels=", ".join(VALID_LOG_LEVELS))
            )
        bits = self.int_bits
        if not isinstance(bits, int) or isinstance(bits, bool) or (
            bits != 0 and not MIN_INT_BITS <= bits <= MAX_INT_BITS
        ):
            raise ConfigurationError(
                format_error_message(
                    "INVALID_INT_BITS", low=MIN_INT_BITS, high=MAX_INT_BITS, value=bits
                )
            )
