"""Shared fixtures for automaton tests."""

from __future__ import annotations

import pytest

from suffixnest.automaton.aho_corasick import AhoCorasick

CLASSIC_PATTERNS = ["he", "she", "his", "hers"]


@pytest.fixture
def classic_automaton() -> AhoCorasick:
    """The textbook he/she/his/hers automaton, already built."""
    ac = AhoCorasick(CLASSIC_PATTERNS)
    ac.build()
    return ac


@pytest.fixture
def nesting_chain() -> list[str]:
    """Each pattern is a suffix of the next."""
    return ["a", "ba", "cba"]
