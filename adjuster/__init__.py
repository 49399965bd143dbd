from .core import Adjustment, Branch, adjust, adjust_stream, trace_adjust, wrap_int
from .error_handling import (
    AdjusterError,
    ConfigurationError,
    InputError,
    InputExhaustedError,
    InputMalformedError,
)
from .input_source import IntegerReader

__all__ = [
    "Adjustment",
    "Branch",
    "adjust",
    "adjust_stream",
    "trace_adjust",
    "wrap_int",
    "AdjusterError",
    "ConfigurationError",
    "InputError",
    "InputExhaustedError",
    "InputMalformedError",
    "IntegerReader",
]
