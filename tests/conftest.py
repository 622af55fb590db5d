"""Shared fixtures: a small hand-built lexicon and a deterministic text processor."""

from __future__ import annotations

import re
from typing import Sequence

import pandas as pd
import pytest

from jigsaw_wsd.constants import STOP_WORDS
from jigsaw_wsd.lexicon.graph import LexiconGraph, build_lexicon_graph
from jigsaw_wsd.lexicon.loader import LexiconTables
from jigsaw_wsd.lexicon.query import GraphQuery
from jigsaw_wsd.nlp.tags import TAGSET_PENN
from jigsaw_wsd.nlp.text_processing import normalize_text

SYNSETS = [
    (
        "n001",
        'an organization founded for a purpose; "the school is an institution"',
        "institution",
    ),
    ("n002", "a financial institution that accepts deposits", "bank depository_institution"),
    ("n003", "an institution for education", "school"),
    ("n004", "sloping land beside a body of water", "bank"),
    ("n005", "an elevated geological formation", "slope incline"),
    ("n006", "a clear liquid that forms rivers", "water"),
    ("n007", "a substance that flows freely", "liquid"),
    ("n008", "a medium of exchange", "money"),
    ("n009", "a large natural stream of water", "river"),
    ("n010", "a natural elevation of land", "elevation"),
    ("v001", "put money into a bank", "deposit bank"),
    ("v002", "tilt the slope of a plane", "bank tilt"),
    ("v003", "move fast", "run"),
    ("a001", 'above average in size; "a large river"', "large big"),
    ("a002", "significant in effect", "big important"),
    ("r001", "with speed", "quickly"),
]

LEMMAS = [
    ("bank", "n002 n004", "v001 v002", "", ""),
    ("institution", "n001", "", "", ""),
    ("school", "n003", "", "", ""),
    ("slope", "n005", "", "", ""),
    ("water", "n006", "", "", ""),
    ("liquid", "n007", "", "", ""),
    ("money", "n008", "", "", ""),
    ("river", "n009", "", "", ""),
    ("deposit", "", "v001", "", ""),
    ("run", "", "v003", "", ""),
    ("big", "", "", "a001 a002", ""),
    ("large", "", "", "a001", ""),
    ("quickly", "", "", "", "r001"),
    ("depository_institution", "n002", "", "", ""),
    ("elevation", "n010", "", "", ""),
]

RELATIONS = [
    ("n002", "@", "n001"),
    ("n003", "@", "n001"),
    ("n004", "@", "n010"),
    ("n005", "@", "n010"),
    ("n006", "@", "n007"),
    ("n009", "#p", "n006"),
    ("a001", "&", "a002"),
    ("bank", "+c", "depository_institution"),
]

# Penn tags used by the fake processor's tagger
TAGS = {
    "bank": "NN",
    "banks": "NNS",
    "institution": "NN",
    "school": "NN",
    "water": "NN",
    "money": "NN",
    "river": "NN",
    "slope": "NN",
    "plane": "NN",
    "deposit": "VB",
    "deposited": "VBD",
    "run": "VB",
    "tilt": "VB",
    "put": "VB",
    "big": "JJ",
    "large": "JJ",
    "quickly": "RB",
}


def make_tables(
    synsets=SYNSETS, lemmas=LEMMAS, relations=RELATIONS, semfield=None, domains=None
) -> LexiconTables:
    return LexiconTables(
        synsets=pd.DataFrame(synsets, columns=["id", "gloss", "words"]),
        lemmas=pd.DataFrame(lemmas, columns=["lemma", "id_n", "id_v", "id_a", "id_r"]),
        relations=pd.DataFrame(relations, columns=["source", "type", "target"]),
        semfield=pd.DataFrame(semfield or [], columns=["synset", "domains"]),
        domain_hierarchy=pd.DataFrame(domains or [], columns=["domain", "hypers", "hypons"]),
    )


class FakeTextProcessor:
    """Deterministic text processor: dictionary tagger, lowercase stems and lemmas."""

    tagset = TAGSET_PENN

    def __init__(self, tags: dict[str, str] | None = None):
        self.tags = TAGS if tags is None else tags

    def tokenize(self, text: str) -> list[str]:
        return re.findall(r"\w+|[^\w\s]", text)

    def pos_tag(self, tokens: Sequence[str]) -> list[str]:
        return [self.tags.get(token.lower(), "DT") for token in tokens]

    def stem(self, word: str) -> str:
        return word.lower()

    def lemmatize(self, word: str, pos: str) -> str:
        word = word.lower()
        if word == "deposited":
            return "deposit"
        if word == "banks":
            return "bank"
        return word

    def is_stop_word(self, word: str) -> bool:
        return word.lower() in STOP_WORDS

    def normalize(self, text: str) -> str:
        return normalize_text(text)


@pytest.fixture
def tables() -> LexiconTables:
    return make_tables()


@pytest.fixture
def graph(tables) -> LexiconGraph:
    return build_lexicon_graph(tables)


@pytest.fixture
def query(graph) -> GraphQuery:
    return GraphQuery(graph)


@pytest.fixture
def processor() -> FakeTextProcessor:
    return FakeTextProcessor()
