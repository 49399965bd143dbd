"""Constants for the conditional adjuster."""

from __future__ import annotations

# Fixed comparison point; values below it add, values above it subtract
THRESHOLD = 5

# Environment variables read by Settings.from_env()
ENV_LOG_LEVEL = "ADJUSTER_LOG_LEVEL"
ENV_LOG_FILE = "ADJUSTER_LOG_FILE"
ENV_INT_BITS = "ADJUSTER_INT_BITS"
ENV_EXPLAIN = "ADJUSTER_EXPLAIN"

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# 0 disables fixed-width wraparound
MIN_INT_BITS = 2
MAX_INT_BITS = 128

# Process exit codes
EXIT_OK = 0
EXIT_INPUT_ERROR = 1
EXIT_CONFIG_ERROR = 2

# Error message templates
ERRORS = {
    "INPUT_EXHAUSTED": "input exhausted: expected integer #{position} but the input ended",
    "INPUT_MALFORMED": "malformed input: {token!r} is not an integer (value #{position})",
    "INPUT_OUT_OF_RANGE": "malformed input: {token} does not fit in {bits}-bit signed integer (value #{position})",
    "INPUT_UNDECODABLE": "malformed input: undecodable bytes at value #{position} ({reason})",
    "INVALID_LOG_LEVEL": "log level must be one of: {levels}",
    "INVALID_INT_BITS": "int_bits must be 0 (unbounded) or between {low} and {high}, got {value}",
    "INVALID_OVERRIDE": "override {override!r} must have the form key=value",
    "INVALID_SETTING_VALUE": "setting {key} expects {expected}, got {value!r}",
    "UNKNOWN_SETTING": "unknown setting {key!r}; choose one of: {names}",
    "FILE_NOT_FOUND": "NOT_FOUND: {path}",
}
