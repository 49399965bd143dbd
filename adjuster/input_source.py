"""Sequential integer source over a text stream."""

from __future__ import annotations

import io
import logging
import re
from collections import deque
from typing import Deque, Optional, TextIO

from .core import int_range
from .error_handling import InputExhaustedError, InputMalformedError, format_error_message


logger = logging.getLogger(__name__)

_INT_RE = re.compile(r"[+-]?[0-9]+")
_MAX_SHOWN = 40


def _shown(token: str) -> str:
    return token if len(token) <= _MAX_SHOWN else token[:_MAX_SHOWN] + "..."


class IntegerReader:
    """Read whitespace-delimited integers from a stream, one at a time.

    Lines are pulled lazily, so asking for the first value never waits on a
    second line. Tokens left over after the run are never inspected.
    """

    def __init__(self, stream: TextIO, int_bits: Optional[int] = None) -> None:
        self._stream = stream
        self._tokens: Deque[str] = deque()
        self._eof = False
        self.int_bits = int_bits or None
        self.consumed = 0

    @classmethod
    def from_text(cls, text: str, int_bits: Optional[int] = None) -> "IntegerReader":
        return cls(io.StringIO(text), int_bits=int_bits)

    def _next_token(self) -> Optional[str]:
        while not self._tokens:
            if self._eof:
                return None
            try:
                line = self._stream.readline()
            except UnicodeDecodeError as e:
                position = self.consumed + 1
                raise InputMalformedError(
                    format_error_message("INPUT_UNDECODABLE", position=position, reason=e.reason),
                    position,
                    "",
                    {"position": position, "reason": e.reason},
                ) from e
            if not line:
                self._eof = True
                return None
            self._tokens.extend(line.split())
        return self._tokens.popleft()

    def next_int(self) -> int:
        """Return the next integer, raising an InputError if none is available."""
        position = self.consumed + 1
        token = self._next_token()
        if token is None:
            raise InputExhaustedError.at(position)

        if not _INT_RE.fullmatch(token):
            raise self._malformed(token, position)

        try:
            value = int(token)
        except ValueError as e:
            # int() refuses digit strings beyond sys.get_int_max_str_digits()
            raise self._malformed(token, position) from e
        if self.int_bits is not None:
            low, high = int_range(self.int_bits)
            if not low <= value <= high:
                raise InputMalformedError(
                    format_error_message(
                        "INPUT_OUT_OF_RANGE", token=_shown(token), bits=self.int_bits, position=position
                    ),
                    position,
                    token,
                    {"position": position, "token": _shown(token), "bits": self.int_bits},
                )

        self.consumed += 1
        logger.debug("read value #%d: %d", position, value)
        return value

    @staticmethod
    def _malformed(token: str, position: int) -> InputMalformedError:
        shown = _shown(token)
        return InputMalformedError(
            format_error_message("INPUT_MALFORMED", token=shown, position=position),
            position,
            token,
            {"position": position, "token": shown},
        )

    __call__ = next_int
