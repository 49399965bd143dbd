"""
Unit tests for IntegerReader.
"""

import io
import sys

import pytest

from adjuster.error_handling import InputExhaustedError, InputMalformedError
from adjuster.input_source import IntegerReader


needs_digit_limit = pytest.mark.skipif(
    not 0 < getattr(sys, "get_int_max_str_digits", lambda: 0)() < 5000,
    reason="int() has no digit limit below 5000 on this interpreter",
)


class LineCountingStream(io.StringIO):
    def __init__(self, text):
        super().__init__(text)
        self.lines_read = 0

    def readline(self, *args):
        line = super().readline(*args)
        if line:
            self.lines_read += 1
        return line


def test_reads_tokens_across_whitespace_and_lines():
    reader = IntegerReader.from_text("  1\t2\n\n 3  \n-4 +5\n")
    assert [reader.next_int() for _ in range(5)] == [1, 2, 3, -4, 5]
    assert reader.consumed == 5


def test_callable_alias():
    reader = IntegerReader.from_text("8")
    assert reader() == 8


def test_exhausted_reports_position():
    reader = IntegerReader.from_text("1\n")
    reader.next_int()
    with pytest.raises(InputExhaustedError) as excinfo:
        reader.next_int()
    assert excinfo.value.position == 2
    assert excinfo.value.details == {"position": 2}
    assert "#2" in str(excinfo.value)


def test_empty_input():
    with pytest.raises(InputExhaustedError) as excinfo:
        IntegerReader.from_text("").next_int()
    assert excinfo.value.position == 1


@pytest.mark.parametrize("token", ["abc", "4abc", "1.5", "--3", "1_000", "+"])
def test_malformed_tokens(token):
    reader = IntegerReader.from_text(token)
    with pytest.raises(InputMalformedError) as excinfo:
        reader.next_int()
    assert excinfo.value.token == token
    assert excinfo.value.position == 1
    assert reader.consumed == 0


def test_out_of_range_with_width():
    reader = IntegerReader.from_text("2147483648", int_bits=32)
    with pytest.raises(InputMalformedError, match="32-bit"):
        reader.next_int()


def test_zero_width_means_unbounded():
    reader = IntegerReader.from_text(str(2**100), int_bits=0)
    assert reader.int_bits is None
    assert reader.next_int() == 2**100


def test_reads_lines_lazily():
    """Reading the first value does not pull later lines."""
    stream = LineCountingStream("5\n99\n")
    reader = IntegerReader(stream)
    assert reader.next_int() == 5
    assert stream.lines_read == 1


@needs_digit_limit
def test_oversized_token_is_malformed():
    """Digit strings int() refuses to convert surface as malformed input."""
    huge = "1" * 5000
    reader = IntegerReader.from_text("4 " + huge)
    assert reader.next_int() == 4
    with pytest.raises(InputMalformedError) as excinfo:
        reader.next_int()
    assert excinfo.value.position == 2
    assert excinfo.value.token == huge
    assert len(str(excinfo.value)) < 200
    assert reader.consumed == 1


def test_undecodable_bytes_are_malformed():
    stream = io.TextIOWrapper(io.BytesIO(b"\xff\xfe 3\n"), encoding="utf-8")
    reader = IntegerReader(stream)
    with pytest.raises(InputMalformedError, match="undecodable") as excinfo:
        reader.next_int()
    assert excinfo.value.position == 1
    assert reader.consumed == 0
