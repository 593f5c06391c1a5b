"""Suffix links, terminal links and nested counts in one BFS pass.

For every node other than the root:

    suffix_link    longest proper suffix of the node's path that is
                   also a path in the trie.
    terminal_link  nearest terminal node reachable by following suffix
                   links, not counting the node itself.
    nested_count   how many inserted patterns can be stacked inside the
                   node's path: the larger of the parent's count and the
                   suffix-link target's count, plus one if the node is
                   itself terminal.

All three depend only on nodes that are strictly shallower (the parent
and the suffix-link target), so a plain breadth-first pass resolves
them in a valid order. The maximum nested count over all nodes is the
answer for a set of patterns.

Suffix link walk for a child `child` of `curr` along character `ch`:
start from curr's own suffix link (not curr, whose `ch` edge is the
child itself) and keep following suffix links until some node has a
`ch` edge. That edge's target is the link. If the chain runs out, the
link is the root. Root's children have an empty chain and link to the
root directly.
"""

from __future__ import annotations

import logging
from collections import deque

from suffixnest.automaton.trie import Node, TrieStore

log = logging.getLogger(__name__)


def nested_count_for(child: Node, parent: Node) -> int:
    """Apply the nesting rule to a child whose suffix link is already set."""
    if child.suffix_link is None:
        return 1 if child.is_terminal else 0
    count = max(parent.nested_count, child.suffix_link.nested_count)
    if child.is_terminal:
        count += 1
    return count


def _find_suffix_link(root: Node, curr: Node, ch: str) -> Node:
    probe = curr.suffix_link
    while probe is not None:
        target = probe.children.get(ch)
        if target is not None:
            return target
        probe = probe.suffix_link
    return root


def resolve_links(trie: TrieStore) -> int:
    """Fill in suffix links, terminal links and nested counts.

    Returns the maximum nested count over all nodes (0 for an empty
    trie). Safe to call again on the same trie; every link is
    recomputed from scratch.
    """
    root = trie.root
    root.suffix_link = None
    root.terminal_link = None
    root.nested_count = 1 if root.is_terminal else 0
    best = root.nested_count

    queue: deque[Node] = deque([root])
    while queue:
        curr = queue.popleft()
        for ch, child in curr.children.items():
            link = _find_suffix_link(root, curr, ch)
            child.suffix_link = link
            child.terminal_link = link if link.is_terminal else link.terminal_link
            child.nested_count = nested_count_for(child, curr)
            if child.nested_count > best:
                best = child.nested_count
            queue.append(child)

    log.debug(
        "Resolved links for %d nodes (%d patterns), max nested count %d",
        trie.node_count, trie.pattern_count, best,
    )
    return best


def terminal_chain(node: Node) -> list[Node]:
    """Return the terminal nodes on node's suffix chain, deepest first.

    The node itself is included when it is terminal. Useful for
    inspecting which patterns end at the same position.
    """
    chain: list[Node] = []
    current = node if node.is_terminal else node.terminal_link
    while current is not None:
        chain.append(current)
        current = current.terminal_link
    return chain
