"""Memoized goto function of the Aho-Corasick automaton.

transition(node, ch) is the state the automaton moves to from `node`
on character `ch`: the trie child if one exists, otherwise the
transition of node's suffix link, bottoming out at the root (which
stays at itself for characters it has no edge for).

The memo table is a side table keyed by node id, kept apart from the
trie so the trie is never touched after link resolution. The lookup
is an explicit loop over the suffix chain; every node passed on the way
gets the answer cached, so repeated queries are O(1) amortized.
"""

from __future__ import annotations

from suffixnest.automaton.trie import Node


class TransitionCache:
    """Lazily filled table node_id -> character -> target node."""

    def __init__(self) -> None:
        self._table: dict[int, dict[str, Node]] = {}

    @property
    def cached_entries(self) -> int:
        return sum(len(row) for row in self._table.values())

    def clear(self) -> None:
        self._table.clear()

    def lookup(self, node: Node, ch: str) -> Node | None:
        """Return the memoized target for (node, ch) without computing it."""
        row = self._table.get(node.node_id)
        if row is None:
            return None
        return row.get(ch)

    def transition(self, node: Node, ch: str) -> Node:
        """Return the automaton state reached from `node` on `ch`.

        Suffix links must already be resolved.
        """
        visited: list[Node] = []
        current = node
        while True:
            target = current.children.get(ch)
            if target is not None:
                break
            target = self.lookup(current, ch)
            if target is not None:
                break
            visited.append(current)
            if current.suffix_link is None:
                target = current
                break
            current = current.suffix_link

        for seen in visited:
            self._table.setdefault(seen.node_id, {})[ch] = target
        return target
