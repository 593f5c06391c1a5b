"""Aho-Corasick automaton over a set of character patterns.

The automaton is built in the classic phases:

    1. Build the goto trie: insert each pattern character by character.
    2. Compute suffix (failure) links in BFS order: a node's link is the
       longest proper suffix of its path that is also a trie path.
    3. Compute terminal (dictionary suffix) links: the nearest terminal
       node on the suffix chain.

While the links are computed, each node also gets its nested count,
the number of patterns that can be stacked inside its path. The
maximum over all nodes is what this package is about; see links.py.

No text searching is done here. The goto function is exposed through
transition() so the automaton can be inspected state by state.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from suffixnest.automaton.links import resolve_links
from suffixnest.automaton.transitions import TransitionCache
from suffixnest.automaton.trie import Node, TrieStore


class AutomatonNotBuiltError(RuntimeError):
    """Raised when link-dependent queries run before build()."""


class AhoCorasick:
    """Aho-Corasick automaton with nested-count bookkeeping.

    Usage:
        ac = AhoCorasick()
        ac.add_pattern("a")
        ac.add_pattern("ba")
        ac.add_pattern("cba")
        ac.build()  # MUST call before querying
        ac.max_nested_count  # 3

    Calling add_pattern() after build() invalidates the automaton; you
    must call build() again.
    """

    def __init__(self, patterns: Iterable[Sequence[str]] = ()) -> None:
        self._trie = TrieStore()
        self._cache = TransitionCache()
        self._built = False
        self._max_nested = 0
        for pattern in patterns:
            self.add_pattern(pattern)

    @property
    def built(self) -> bool:
        return self._built

    @property
    def root(self) -> Node:
        return self._trie.root

    @property
    def trie(self) -> TrieStore:
        return self._trie

    @property
    def pattern_count(self) -> int:
        return self._trie.pattern_count

    @property
    def max_nested_count(self) -> int:
        self._require_built("max_nested_count")
        return self._max_nested

    def add_pattern(self, pattern: Sequence[str]) -> None:
        """Insert a pattern into the goto trie."""
        self._trie.insert(pattern)
        self._built = False

    def build(self) -> int:
        """Resolve all links and return the maximum nested count."""
        self._cache.clear()
        self._max_nested = resolve_links(self._trie)
        self._built = True
        return self._max_nested

    def transition(self, node: Node, ch: str) -> Node:
        """Automaton state reached from `node` on character `ch`."""
        self._require_built("transition()")
        return self._cache.transition(node, ch)

    def walk(self, text: Sequence[str]) -> Node:
        """Feed `text` through the automaton from the root; return the final state."""
        self._require_built("walk()")
        node = self._trie.root
        for ch in text:
            node = self._cache.transition(node, ch)
        return node

    def node_count(self) -> int:
        return self._trie.node_count

    def _require_built(self, what: str) -> None:
        if not self._built:
            raise AutomatonNotBuiltError(f"Must call build() before {what}")
