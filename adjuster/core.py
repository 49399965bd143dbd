"""Conditional adjustment of an integer against a fixed threshold.

A run reads ``x``. Below the threshold one more value is read and added,
above it one more value is read and subtracted, and at the threshold ``x``
is returned untouched without reading anything else.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional, Tuple

from .constants import THRESHOLD

if TYPE_CHECKING:
    from .input_source import IntegerReader


logger = logging.getLogger(__name__)


class Branch(str, enum.Enum):
    ADD = "add"
    SUBTRACT = "subtract"
    UNCHANGED = "unchanged"


@dataclass(frozen=True)
class Adjustment:
    """Record of a single run."""
    initial: int
    branch: Branch
    operand: Optional[int]
    result: int
    consumed: int

    def expression(self) -> str:
        if self.branch is Branch.ADD:
            return f"{self.initial} + {self.operand} = {self.result}"
        if self.branch is Branch.SUBTRACT:
            return f"{self.initial} - {self.operand} = {self.result}"
        return str(self.result)


def int_range(bits: int) -> Tuple[int, int]:
    """Inclusive bounds of a signed two's-complement integer of ``bits`` width."""
    return -(1 << (bits - 1)), (1 << (bits - 1)) - 1


def wrap_int(value: int, bits: Optional[int]) -> int:
    """Wrap ``value`` to a signed ``bits``-wide integer; falsy ``bits`` means unbounded."""
    if not bits:
        return value
    mask = (1 << bits) - 1
    value &= mask
    if value >> (bits - 1):
        value -= 1 << bits
    return value


def trace_adjust(x: int, next_input: Callable[[], int], int_bits: Optional[int] = None) -> Adjustment:
    """Adjust ``x`` and return the full record of what happened.

    ``next_input`` is called at most once, and only when ``x`` differs from
    the threshold. Errors it raises propagate unchanged.
    """
    if x < THRESHOLD:
        y = next_input()
        result = wrap_int(x + y, int_bits)
        logger.debug("%d < %d: adding %d", x, THRESHOLD, y)
        return Adjustment(x, Branch.ADD, y, result, consumed=2)
    elif x > THRESHOLD:
        z = next_input()
        result = wrap_int(x - z, int_bits)
        logger.debug("%d > %d: subtracting %d", x, THRESHOLD, z)
        return Adjustment(x, Branch.SUBTRACT, z, result, consumed=2)

    logger.debug("%d == %d: no further input", x, THRESHOLD)
    return Adjustment(x, Branch.UNCHANGED, None, x, consumed=1)


def adjust(x: int, next_input: Callable[[], int], int_bits: Optional[int] = None) -> int:
    return trace_adjust(x, next_input, int_bits).result


def adjust_stream(reader: "IntegerReader", int_bits: Optional[int] = None) -> Adjustment:
    """Read ``x`` from ``reader`` and adjust it using the same reader."""
    x = reader.next_int()
    return trace_adjust(x, reader.next_int, int_bits if int_bits is not None else reader.int_bits)
