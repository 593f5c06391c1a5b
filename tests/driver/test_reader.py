"""Tests for the case reader."""

import io

import pytest

from suffixnest.driver.errors import (
    InputFormatError,
    MalformedCountError,
    TruncatedPatternListError,
)
from suffixnest.driver.reader import iter_cases, read_cases, tokenize


class TestTokenize:
    def test_ignores_line_structure(self):
        stream = io.StringIO("2 a\n  ba\n\n0\n")
        assert list(tokenize(stream)) == ["2", "a", "ba", "0"]


class TestReadCases:
    def test_two_cases(self):
        stream = io.StringIO("2\na ba\n1\nq\n0\n")
        assert list(read_cases(stream)) == [["a", "ba"], ["q"]]

    def test_zero_stops_reading(self):
        stream = io.StringIO("1 a\n0\n1 b\n")
        assert list(read_cases(stream)) == [["a"]]

    def test_immediate_zero(self):
        assert list(read_cases(io.StringIO("0\n"))) == []

    def test_empty_input(self):
        assert list(read_cases(io.StringIO(""))) == []

    def test_missing_terminator(self):
        assert list(iter_cases(["1", "a"])) == [["a"]]


class TestReadErrors:
    def test_malformed_count(self):
        with pytest.raises(MalformedCountError) as exc_info:
            list(iter_cases(["x", "a"]))
        assert exc_info.value.token == "x"
        assert exc_info.value.position == 0

    def test_negative_count(self):
        with pytest.raises(MalformedCountError):
            list(iter_cases(["-1"]))

    def test_malformed_second_count(self):
        cases = iter_cases(["1", "a", "two", "b", "c"])
        assert next(cases) == ["a"]
        with pytest.raises(MalformedCountError) as exc_info:
            next(cases)
        assert exc_info.value.position == 2

    def test_truncated_list(self):
        with pytest.raises(TruncatedPatternListError) as exc_info:
            list(iter_cases(["3", "a", "b"]))
        assert exc_info.value.expected == 3
        assert exc_info.value.actual == 2

    def test_errors_share_base(self):
        with pytest.raises(InputFormatError):
            list(iter_cases(["3"]))
        with pytest.raises(ValueError):
            list(iter_cases(["?"]))

    @pytest.mark.parametrize("token", ["1_0", "+3", "٣", " 1"])
    def test_count_must_be_ascii_digits(self, token):
        with pytest.raises(MalformedCountError) as exc_info:
            list(iter_cases([token, "a", "b", "c"]))
        assert exc_info.value.token == token


class TestAsciiWhitespace:
    def test_unicode_separators_stay_in_pattern(self):
        stream = io.StringIO("1\na\x1cb\n1 c\x85d\u2028e\n0\n")
        assert list(read_cases(stream)) == [["a\x1cb"], ["c\x85d\u2028e"]]

    def test_mixed_ascii_whitespace(self):
        stream = io.StringIO("2\ta\r\n\x0bb\x0c\n0")
        assert list(tokenize(stream)) == ["2", "a", "b", "0"]
