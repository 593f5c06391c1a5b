"""Per-case accumulator of patterns for the nested count query."""

from __future__ import annotations

from suffixnest.automaton.aho_corasick import AhoCorasick


class NestedSubstringFinder:
    """Collects the patterns of one case and computes their nested count.

    Every count_nested() call builds a fresh automaton from the
    collected patterns, so nothing leaks from one call to the next.
    reset() drops the patterns before the next case.
    """

    def __init__(self) -> None:
        self._patterns: list[str] = []

    @property
    def pattern_count(self) -> int:
        return len(self._patterns)

    def add_string(self, pattern: str) -> None:
        self._patterns.append(pattern)

    def count_nested(self) -> int:
        return AhoCorasick(self._patterns).build()

    def reset(self) -> None:
        self._patterns.clear()
