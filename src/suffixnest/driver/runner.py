"""Run every case of an input stream and write the answers in one go.

Answers are collected in an explicit OutputAccumulator and written to
the output stream only after the last case, one decimal line per case
in input order. If any case is malformed, nothing is written.
"""

from __future__ import annotations

import io
import logging
from typing import TextIO

from suffixnest.automaton.finder import NestedSubstringFinder
from suffixnest.driver.reader import read_cases

log = logging.getLogger(__name__)


class OutputAccumulator:
    """Buffers answer lines until flush()."""

    def __init__(self) -> None:
        self._buffer = io.StringIO()
        self._lines = 0

    @property
    def line_count(self) -> int:
        return self._lines

    def append(self, answer: int) -> None:
        self._buffer.write(f"{answer}\n")
        self._lines += 1

    def getvalue(self) -> str:
        return self._buffer.getvalue()

    def flush(self, out: TextIO) -> None:
        out.write(self.getvalue())
        out.flush()


def run_cases(
    stream: TextIO,
    out: TextIO,
    accumulator: OutputAccumulator | None = None,
) -> list[int]:
    """Answer every case in `stream`, then write all answers to `out`.

    Returns the answers in input order. Input format errors propagate
    before anything is written.
    """
    accumulator = accumulator or OutputAccumulator()
    finder = NestedSubstringFinder()
    answers: list[int] = []
    for case_no, patterns in enumerate(read_cases(stream), start=1):
        for pattern in patterns:
            finder.add_string(pattern)
        answer = finder.count_nested()
        log.debug("Case %d: %d pattern(s), answer %d", case_no, len(patterns), answer)
        accumulator.append(answer)
        answers.append(answer)
        finder.reset()
    accumulator.flush(out)
    return answers
