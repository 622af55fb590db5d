"""Text processing collaborators: tokenizer, tagger, stemmer, lemmatizer, stop words.

The disambiguator only depends on the TextProcessor protocol. Two
implementations are provided: SimpleTextProcessor (NLTK) here and
SpacyTextProcessor in jigsaw_wsd.nlp.spacy_processing.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Callable, Protocol, Sequence

from nltk.stem.snowball import SnowballStemmer
from nltk.tokenize import RegexpTokenizer

from jigsaw_wsd.constants import (
    ENCODING_UTF8,
    POS_ADJ,
    POS_ADV,
    POS_NOUN,
    POS_VERB,
    STEMMER_LANGUAGE_DEFAULT,
    STOP_WORDS,
)
from jigsaw_wsd.nlp.tags import TAGSET_PENN

logger = logging.getLogger(__name__)

# Runs of characters other than letters (accented Latin included) and digits
_NON_WORD = re.compile(r"[^a-zA-Z0-9À-ÖØ-öø-ÿ]+")

_WORD_PATTERN = r"\w+(?:[-']\w+)*|[^\w\s]+"

# Morph-it tag prefix -> lexicon POS letter
_MORPH_TAG_PREFIXES: tuple[tuple[str, str], ...] = (
    ("NOUN", POS_NOUN),
    ("ADJ", POS_ADJ),
    ("ADV", POS_ADV),
    ("VER", POS_VERB),
)


class TextProcessor(Protocol):
    """Interface of the text processing collaborator."""

    tagset: str

    def tokenize(self, text: str) -> list[str]: ...

    def pos_tag(self, tokens: Sequence[str]) -> list[str]: ...

    def stem(self, word: str) -> str: ...

    def lemmatize(self, word: str, pos: str) -> str: ...

    def is_stop_word(self, word: str) -> bool: ...

    def normalize(self, text: str) -> str: ...


def normalize_text(text: str | None) -> str:
    """Replace runs of non-alphanumeric characters with a single space.

    Examples:
        >>> normalize_text("a (large) building; \\"the house\\"")
        'a large building the house '
    """
    if text is None:
        return ""
    return _NON_WORD.sub(" ", text)


def load_word_list(path: str | Path) -> frozenset[str]:
    """Load a stop-word file (one word per line, lowercased)."""
    path = Path(path)
    with path.open(encoding=ENCODING_UTF8) as f:
        return frozenset(line.strip().lower() for line in f if line.strip())


def load_lemma_dictionary(path: str | Path) -> dict[tuple[str, str], str]:
    """Load a morph-it style lemma dictionary.

    Each line holds "form lemma TAG" separated by spaces or tabs; only
    NOUN, ADJ, ADV and VER tags are kept. Malformed lines are skipped.

    Returns:
        Mapping (form, pos_letter) -> lemma
    """
    lemmas: dict[tuple[str, str], str] = {}
    path = Path(path)
    with path.open(encoding=ENCODING_UTF8) as f:
        for line in f:
            parts = line.split()
            if len(parts) != 3:
                continue
            form, lemma, tag = parts
            for prefix, pos in _MORPH_TAG_PREFIXES:
                if tag.startswith(prefix):
                    lemmas[(form, pos)] = lemma
                    break
    logger.info(f"Loaded {len(lemmas)} lemma entries from {path}")
    return lemmas


class SimpleTextProcessor:
    """NLTK-based text processing.

    Args:
        language: Snowball stemmer language
        stop_words: Stop-word set; defaults to the built-in English list
        lemmas: (form, pos) -> lemma dictionary
        use_morphy: Fall back to NLTK's WordNet morphology when a form is
            not in the lemma dictionary (needs the WordNet corpus)
        tagger: Callable returning one tag per token; defaults to NLTK's
            averaged-perceptron Penn Treebank tagger

    Example:
        >>> processor = SimpleTextProcessor()
        >>> processor.tokenize("The bank closed.")
        ['The', 'bank', 'closed', '.']
        >>> processor.stem("running")
        'run'
    """

    tagset = TAGSET_PENN

    def __init__(
        self,
        language: str = STEMMER_LANGUAGE_DEFAULT,
        stop_words: frozenset[str] | None = None,
        lemmas: dict[tuple[str, str], str] | None = None,
        use_morphy: bool = False,
        tagger: Callable[[list[str]], list[str]] | None = None,
    ):
        self.stemmer = SnowballStemmer(language)
        self.tokenizer = RegexpTokenizer(_WORD_PATTERN)
        self.stop_words = STOP_WORDS if stop_words is None else stop_words
        self.lemmas = lemmas or {}
        self.use_morphy = use_morphy
        self._tagger = tagger

    @classmethod
    def from_files(
        cls,
        stop_word_file: str | Path | None = None,
        lemma_file: str | Path | None = None,
        language: str = STEMMER_LANGUAGE_DEFAULT,
        use_morphy: bool = False,
    ) -> "SimpleTextProcessor":
        """Build a processor from stop-word and lemma files (either may be None)."""
        stop_words = load_word_list(stop_word_file) if stop_word_file else None
        lemmas = load_lemma_dictionary(lemma_file) if lemma_file else None
        return cls(language=language, stop_words=stop_words, lemmas=lemmas, use_morphy=use_morphy)

    def tokenize(self, text: str) -> list[str]:
        return self.tokenizer.tokenize(text)

    def pos_tag(self, tokens: Sequence[str]) -> list[str]:
        """Tag tokens (Penn Treebank tags with the default tagger)."""
        tokens = list(tokens)
        if not tokens:
            return []
        if self._tagger is not None:
            return list(self._tagger(tokens))
        import nltk

        return [tag for _, tag in nltk.pos_tag(tokens)]

    def stem(self, word: str) -> str:
        return self.stemmer.stem(word).lower()

    def lemmatize(self, word: str, pos: str) -> str:
        """Lemma of a word for a lexicon POS letter; the lowercased word if unknown."""
        lemma = self.lemmas.get((word, pos)) or self.lemmas.get((word.lower(), pos))
        if lemma is not None:
            return lemma
        if self.use_morphy and pos in (POS_NOUN, POS_VERB, POS_ADJ, POS_ADV):
            from nltk.corpus import wordnet as wn

            base = wn.morphy(word.lower(), pos)
            if base is not None:
                return base.lower()
        return word.lower()

    def is_stop_word(self, word: str) -> bool:
        return word.lower() in self.stop_words

    def normalize(self, text: str) -> str:
        return normalize_text(text)
