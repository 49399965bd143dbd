"""Centralized error handling and custom exceptions for the adjuster."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from .constants import ERRORS


class AdjusterError(Exception):
    """Base exception for adjuster errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.details = details or {}


class InputError(AdjusterError):
    """Raised when the input source cannot supply a required integer."""

    def __init__(self, message: str, position: int, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)
        self.position = position


class InputExhaustedError(InputError):
    """Raised when the input ends before a required integer was read."""

    @classmethod
    def at(cls, position: int) -> "InputExhaustedError":
        return cls(
            format_error_message("INPUT_EXHAUSTED", position=position),
            position,
            {"position": position},
        )


class InputMalformedError(InputError):
    """Raised when the next input token is not a usable integer."""

    def __init__(self, message: str, position: int, token: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, position, details)
        self.token = token


class ConfigurationError(AdjusterError):
    """Raised when configuration is invalid or missing."""
    pass


def format_error_message(error_key: str, **kwargs) -> str:
    """Format an error message from the constants."""
    try:
        template = ERRORS.get(error_key, "Unknown error")
        return template.format(**kwargs)
    except KeyError as e:
        return f"Error formatting message for '{error_key}': missing key {e}"


def handle_file_operation_error(error: Exception, file_path: str | Path) -> str:
    """Handle common file operation errors and return user-friendly message."""
    if isinstance(error, FileNotFoundError):
        return format_error_message("FILE_NOT_FOUND", path=file_path)
    elif isinstance(error, PermissionError):
        return f"Permission denied: {file_path}"
    elif isinstance(error, OSError):
        return f"OS error accessing {file_path}: {error}"
    else:
        return f"Unexpected error with {file_path}: {error}"


class ErrorHandler:
    """Context manager for consistent error handling.

    Adjuster errors pass through unchanged. Anything else is logged and,
    when ``reraise`` is set, converted to an ``AdjusterError``.
    """

    def __init__(
        self,
        operation: str,
        reraise: bool = True,
        log_level: int = logging.ERROR,
        path: Optional[str | Path] = None,
    ):
        self.operation = operation
        self.reraise = reraise
        self.log_level = log_level
        self.path = path
        self.error: Optional[Exception] = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            return False

        self.error = exc_val
        if isinstance(exc_val, AdjusterError):
            return False

        if self.path is not None and isinstance(exc_val, OSError):
            detail = handle_file_operation_error(exc_val, self.path)
        else:
            detail = str(exc_val)
        error_msg = f"Error in {self.operation}: {detail}"

        logging.getLogger("adjuster").log(self.log_level, error_msg)

        if self.reraise:
            raise AdjusterError(error_msg, {"operation": self.operation}) from exc_val

        return True  # Suppress the exception


def setup_logging(level: int | str = logging.WARNING, log_file: Optional[Path] = None) -> None:
    """Set up centralized logging for the adjuster.

    Handlers are replaced on every call, so repeated CLI invocations in one
    process do not stack duplicate output.
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    root_logger = logging.getLogger('adjuster')
    root_logger.setLevel(level)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    # Console handler; stdout is reserved for the result
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # File handler if specified
    if log_file:
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
        except OSError as e:
            root_logger.warning(f"Could not set up file logging: {e}")
