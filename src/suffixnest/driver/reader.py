"""Whitespace-token reader for the multi-case input format.

Input is a stream of whitespace-separated tokens:

    n  pattern_1 ... pattern_n
    n  pattern_1 ... pattern_n
    ...
    0

Line breaks carry no meaning. A count of 0 ends the input. Running out
of tokens where a count is expected also ends it; running out in the
middle of a case is an error.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator
from typing import TextIO

from suffixnest.driver.errors import MalformedCountError, TruncatedPatternListError

log = logging.getLogger(__name__)

# ASCII whitespace only; other separators are pattern characters.
_SEPARATORS = re.compile(r"[ \t\n\r\f\v]+")


def tokenize(stream: TextIO) -> Iterator[str]:
    """Yield whitespace-delimited tokens from a text stream, line by line."""
    for line in stream:
        for token in _SEPARATORS.split(line):
            if token:
                yield token


def parse_count(token: str, position: int) -> int:
    if not (token.isascii() and token.isdigit()):
        raise MalformedCountError(token, position)
    return int(token)


def iter_cases(tokens: Iterable[str]) -> Iterator[list[str]]:
    """Group a token sequence into cases of patterns.

    Raises:
        MalformedCountError: if a count token is not a non-negative integer
        TruncatedPatternListError: if tokens run out inside a case
    """
    it = iter(tokens)
    position = 0
    while True:
        token = next(it, None)
        if token is None:
            log.debug("Input ended without a terminating 0 count")
            return
        count = parse_count(token, position)
        position += 1
        if count == 0:
            return
        patterns: list[str] = []
        for token in it:
            patterns.append(token)
            if len(patterns) == count:
                break
        position += len(patterns)
        if len(patterns) < count:
            raise TruncatedPatternListError(count, len(patterns))
        yield patterns


def read_cases(stream: TextIO) -> Iterator[list[str]]:
    """Yield the pattern list of every case in `stream`."""
    return iter_cases(tokenize(stream))
