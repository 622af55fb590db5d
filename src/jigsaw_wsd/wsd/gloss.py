"""Gloss construction and Lesk-style overlap measures."""

from __future__ import annotations

import logging
import math
import re
from collections import Counter
from typing import Callable

from jigsaw_wsd.constants import (
    ADJ_GLOSS_RELATIONS,
    ADV_GLOSS_RELATIONS,
    MEASURE_TFIDF,
    MEASURE_WEIGHTED,
    NOUN_GLOSS_RELATIONS,
    POS_ADJ,
    POS_ADV,
    POS_NOUN,
    POS_VERB,
    VERB_GLOSS_RELATIONS,
    RelationType,
)
from jigsaw_wsd.lexicon.query import GraphQuery
from jigsaw_wsd.nlp.text_processing import TextProcessor
from jigsaw_wsd.wsd.tokens import Token, TokenGroup

logger = logging.getLogger(__name__)

GLOSS_RELATIONS: dict[str, tuple[RelationType, ...]] = {
    POS_VERB: VERB_GLOSS_RELATIONS,
    POS_NOUN: NOUN_GLOSS_RELATIONS,
    POS_ADJ: ADJ_GLOSS_RELATIONS,
    POS_ADV: ADV_GLOSS_RELATIONS,
}

_SPACES = re.compile(r" {2,}")


def collapse_spaces(text: str) -> str:
    return _SPACES.sub(" ", text)


# =============================================================================
# GLOSS BUILDERS
# =============================================================================


def build_context_gloss(query: GraphQuery, processor: TextProcessor, context: TokenGroup) -> str:
    """Concatenate the normalized glosses of every candidate of every context token.

    Usage examples (text from the first double quote on) are left out.
    """
    parts = []
    for token in context:
        for synset_id in token.candidates:
            parts.append(processor.normalize(query.graph.context_gloss(synset_id)))
    return collapse_spaces(" ".join(parts))


def build_target_gloss(
    query: GraphQuery,
    processor: TextProcessor,
    target: Token,
    synset_id: str,
    depth: int,
) -> str:
    """Gloss of one candidate sense of the target, expanded with related words.

    The gloss (with usage examples) and the synset's own words are
    normalized, then the words of synsets reachable through the POS
    relation set (up to `depth` hops) are appended.
    """
    words = " ".join(word.replace("_", " ") for word in query.graph.words(synset_id))
    parts = [processor.normalize(f"{query.graph.gloss(synset_id)} {words}")]
    for relation in GLOSS_RELATIONS.get(target.pos, ()):
        parts.extend(query.related_words(synset_id, relation, depth))
    return collapse_spaces(" ".join(parts))


# =============================================================================
# OVERLAP MEASURES
# =============================================================================


def _context_table(context_gloss: str, stem: Callable[[str], str]) -> tuple[Counter, int]:
    tokens = context_gloss.split()
    return Counter(stem(token) for token in tokens), len(tokens)


def _matches(
    target_gloss: str, table: Counter, target_stem: str, stem: Callable[[str], str]
) -> list[tuple[str, int]]:
    matched: dict[str, int] = {}
    for token in target_gloss.split():
        token_stem = stem(token)
        if token_stem == target_stem or token_stem in matched:
            continue
        count = table.get(token_stem)
        if count:
            matched[token_stem] = count
    return list(matched.items())


def compare_weighted(
    target_gloss: str,
    context_gloss: str,
    target_stem: str,
    stem: Callable[[str], str],
    measure: str = MEASURE_WEIGHTED,
) -> float:
    """Overlap between a target gloss and a context gloss.

    Each distinct stem of the target gloss found in the context counts
    once: log(n / count) in weighted mode, count otherwise, where n is the
    number of context tokens. The target's own stem is ignored.

    Args:
        target_gloss: Gloss of a candidate sense
        context_gloss: Glosses of the context
        target_stem: Stem of the target word
        stem: Stemmer
        measure: "weighted" or "occurrence"

    Returns:
        Overlap score, 0.0 when nothing matches

    Examples:
        >>> compare_weighted("casa edificio", "io vivo in una casa grande", "casa", str.lower)
        0.0
    """
    table, n = _context_table(context_gloss, stem)
    score = 0.0
    for token_stem, count in _matches(target_gloss, table, target_stem, stem):
        contribution = math.log(n / count) if measure == MEASURE_WEIGHTED else float(count)
        logger.debug(f"Overlap {token_stem!r}: count={count} n={n} score={contribution}")
        score += contribution
    return score


def compare_tfidf(
    target_gloss: str,
    context_gloss: str,
    target_stem: str,
    stem: Callable[[str], str],
) -> float:
    """TF-IDF overlap: tf * (log(n / df) + 1).

    tf is the number of distinct matched stems and df the sum of their
    context counts; n is the number of context tokens.
    """
    table, n = _context_table(context_gloss, stem)
    matches = _matches(target_gloss, table, target_stem, stem)
    if not matches:
        return 0.0
    tf = len(matches)
    df = sum(count for _, count in matches)
    return tf * (math.log(n / df) + 1)


def gloss_overlap(
    target_gloss: str,
    context_gloss: str,
    target_stem: str,
    stem: Callable[[str], str],
    measure: str,
) -> float:
    """Dispatch to the configured overlap measure."""
    if measure == MEASURE_TFIDF:
        return compare_tfidf(target_gloss, context_gloss, target_stem, stem)
    return compare_weighted(target_gloss, context_gloss, target_stem, stem, measure)
