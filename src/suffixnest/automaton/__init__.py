"""Aho-Corasick automaton and nested pattern counting."""

from suffixnest.automaton.aho_corasick import AhoCorasick, AutomatonNotBuiltError
from suffixnest.automaton.finder import NestedSubstringFinder
from suffixnest.automaton.links import resolve_links, terminal_chain
from suffixnest.automaton.transitions import TransitionCache
from suffixnest.automaton.trie import Node, TrieStore

__all__ = [
    "AhoCorasick",
    "AutomatonNotBuiltError",
    "NestedSubstringFinder",
    "Node",
    "TransitionCache",
    "TrieStore",
    "resolve_links",
    "terminal_chain",
]
