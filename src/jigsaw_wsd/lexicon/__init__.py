"""Lexicon graph, table loaders and graph queries."""

from jigsaw_wsd.lexicon.graph import LexiconGraph, build_lexicon_graph
from jigsaw_wsd.lexicon.loader import (
    LexiconLoadError,
    LexiconTables,
    load_lexicon_tables,
    save_lexicon_tables,
    wordnet_tables,
)
from jigsaw_wsd.lexicon.models import Domain, LemmaEntry, Pointer, Synset
from jigsaw_wsd.lexicon.query import NO_COMMON_ANCESTOR, GraphQuery

__all__ = [
    "Domain",
    "GraphQuery",
    "LemmaEntry",
    "LexiconGraph",
    "LexiconLoadError",
    "LexiconTables",
    "NO_COMMON_ANCESTOR",
    "Pointer",
    "Synset",
    "build_lexicon_graph",
    "load_lexicon_tables",
    "save_lexicon_tables",
    "wordnet_tables",
]
