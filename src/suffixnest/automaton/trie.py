"""Character trie that backs the Aho-Corasick automaton.

Every node lives in one arena list owned by the TrieStore and is
identified by its index in that list (the root is always node 0).
Children are held in a per-node dict keyed by character, so the tree
itself is a plain parent -> child structure. Suffix and terminal links
are filled in later by the link resolver; they point back into the same
arena and never own anything.

Patterns are arbitrary character sequences. The empty pattern is legal
and simply marks the root as terminal.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field


@dataclass(eq=False)
class Node:
    """One position in the trie (one prefix of the inserted patterns).

    children maps a character to the next node.
    suffix_link is the node for the longest proper suffix of this
    node's path that is also in the trie (None only for the root).
    terminal_link is the nearest terminal node on the suffix chain,
    not counting this node.
    """
    node_id: int
    depth: int = 0
    is_terminal: bool = False
    nested_count: int = 0
    children: dict[str, Node] = field(default_factory=dict)
    suffix_link: Node | None = None
    terminal_link: Node | None = None

    def __repr__(self) -> str:
        return (
            f"Node(id={self.node_id}, depth={self.depth}, "
            f"terminal={self.is_terminal}, nested={self.nested_count})"
        )


class TrieStore:
    """Arena of trie nodes built from inserted patterns.

    Usage:
        trie = TrieStore()
        trie.insert("a")
        trie.insert("ba")
        trie.node_count  # 4: root, "a", "b", "ba"
    """

    def __init__(self) -> None:
        self._nodes: list[Node] = [Node(node_id=0)]
        self._pattern_count = 0

    @property
    def root(self) -> Node:
        return self._nodes[0]

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    @property
    def pattern_count(self) -> int:
        """Number of insert() calls, duplicates included."""
        return self._pattern_count

    @property
    def terminal_count(self) -> int:
        """Number of distinct patterns stored."""
        return sum(1 for node in self._nodes if node.is_terminal)

    def node(self, node_id: int) -> Node:
        return self._nodes[node_id]

    def nodes(self) -> Iterator[Node]:
        """Iterate over all nodes in creation order."""
        return iter(self._nodes)

    def insert(self, pattern: Sequence[str]) -> Node:
        """Insert a pattern and return its terminal node.

        One node is created per character not already on the path.
        Inserting the same pattern twice leaves the trie unchanged.
        """
        node = self._nodes[0]
        for ch in pattern:
            child = node.children.get(ch)
            if child is None:
                child = Node(node_id=len(self._nodes), depth=node.depth + 1)
                self._nodes.append(child)
                node.children[ch] = child
            node = child
        node.is_terminal = True
        self._pattern_count += 1
        return node

    def find(self, path: Sequence[str]) -> Node | None:
        """Return the node spelling `path`, or None if it is not in the trie."""
        node = self._nodes[0]
        for ch in path:
            nxt = node.children.get(ch)
            if nxt is None:
                return None
            node = nxt
        return node
