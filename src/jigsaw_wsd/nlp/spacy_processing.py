"""spaCy-based text processing."""

from __future__ import annotations

from functools import lru_cache
from typing import Sequence

import spacy
from nltk.stem.snowball import SnowballStemmer
from spacy.language import Language
from spacy.tokens import Doc

from jigsaw_wsd.constants import (
    LEMMA_CACHE_SIZE,
    SPACY_DISABLED,
    SPACY_MODEL_DEFAULT,
    STEMMER_LANGUAGE_DEFAULT,
)
from jigsaw_wsd.nlp.tags import TAGSET_UNIVERSAL
from jigsaw_wsd.nlp.text_processing import normalize_text


@lru_cache
def initialize_spacy_model(model_name: str = SPACY_MODEL_DEFAULT) -> Language:
    """Load and cache a spaCy model."""
    return spacy.load(model_name, disable=SPACY_DISABLED)


class SpacyTextProcessor:
    """Tokenization, tagging, lemmatization and stop words from spaCy.

    Stemming uses NLTK's Snowball stemmer. pos_tag returns universal POS
    tags (NOUN, VERB, ...).

    Example:
        >>> processor = SpacyTextProcessor()
        >>> processor.pos_tag(["The", "bank", "closed"])
        ['DET', 'NOUN', 'VERB']
    """

    tagset = TAGSET_UNIVERSAL

    def __init__(
        self,
        model_name: str = SPACY_MODEL_DEFAULT,
        language: str = STEMMER_LANGUAGE_DEFAULT,
        nlp: Language | None = None,
    ):
        self.nlp = nlp if nlp is not None else initialize_spacy_model(model_name)
        self.stemmer = SnowballStemmer(language)
        self.lemmatize = lru_cache(maxsize=LEMMA_CACHE_SIZE)(self._lemmatize)

    def tokenize(self, text: str) -> list[str]:
        return [token.text for token in self.nlp.make_doc(text) if not token.is_space]

    def _parse(self, tokens: Sequence[str]) -> Doc:
        doc = Doc(self.nlp.vocab, words=list(tokens))
        return self.nlp(doc)

    def pos_tag(self, tokens: Sequence[str]) -> list[str]:
        if not tokens:
            return []
        return [token.pos_ for token in self._parse(tokens)]

    def stem(self, word: str) -> str:
        return self.stemmer.stem(word).lower()

    def _lemmatize(self, word: str, pos: str) -> str:
        """Lemma of an isolated word; the lowercased word when spaCy has none."""
        doc = self._parse([word])
        lemma = doc[0].lemma_ if len(doc) else ""
        return (lemma or word).lower()

    def is_stop_word(self, word: str) -> bool:
        return self.nlp.vocab[word.lower()].is_stop

    def normalize(self, text: str) -> str:
        return normalize_text(text)
