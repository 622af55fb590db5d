"""Per-POS sense scorers.

Three scoring models share the Gaussian positional decay and the
Zipfian rank prior:

- VerbSenseScorer: similarity between the context and the nouns of each
  candidate's gloss
- NounSenseScorer: joint model over every noun of the sentence, based on
  hypernym distance and nearest common ancestors
- AdjAdvSenseScorer: Lesk-style overlap between expanded candidate glosses
  and the context glosses

Scorers never modify tokens; they return a SenseRanking that the
disambiguator encodes.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from functools import lru_cache
from typing import ClassVar

import numpy as np

from jigsaw_wsd.config import WsdConfig
from jigsaw_wsd.constants import (
    MAX_DEPTH,
    POS_ADJ,
    POS_ADV,
    POS_NOUN,
    POS_VERB,
    ZIPF_EXPONENT_ADJ,
    ZIPF_EXPONENT_NOUN,
    ZIPF_EXPONENT_VERB,
    RelationType,
)
from jigsaw_wsd.lexicon.query import GraphQuery
from jigsaw_wsd.nlp.tags import map_pos_tag
from jigsaw_wsd.nlp.text_processing import TextProcessor
from jigsaw_wsd.wsd.gloss import build_context_gloss, build_target_gloss, gloss_overlap
from jigsaw_wsd.wsd.output import SenseRanking
from jigsaw_wsd.wsd.primitives import (
    depth_similarity,
    gaussian_weight,
    normalized_depth_similarity,
    zipf_prior,
)
from jigsaw_wsd.wsd.tokens import Token, TokenGroup, lookup_candidates

logger = logging.getLogger(__name__)


class SenseScorer:
    """Base class of the per-POS scoring models.

    Args:
        query: Graph query engine over the lexicon
        processor: Text processing collaborator
        config: Disambiguation parameters
    """

    pos_tags: ClassVar[frozenset[str]] = frozenset()
    zipf_exponent: ClassVar[float] = ZIPF_EXPONENT_NOUN

    def __init__(self, query: GraphQuery, processor: TextProcessor, config: WsdConfig):
        self.query = query
        self.processor = processor
        self.config = config

    @property
    def graph(self):
        return self.query.graph

    def prior(self, rank: int, total: int) -> float:
        return zipf_prior(rank, total, self.zipf_exponent)

    def weight(self, a: Token, b: Token) -> float:
        return gaussian_weight(a.group_position, b.group_position, self.config.sigma)

    def _distances(self, a: Token, b: Token):
        for sense_a in a.candidates:
            for sense_b in b.candidates:
                yield self.query.min_combined_distance(
                    sense_a, sense_b, RelationType.HYPERNYM, self.config.depth
                )

    def similarity(self, a: Token, b: Token) -> float:
        """Best depth similarity over all candidate pairs; 0.0 if either has none."""
        return max((depth_similarity(d) for d in self._distances(a, b)), default=0.0)

    def normalized_similarity(self, a: Token, b: Token) -> float:
        """Best normalized depth similarity over all candidate pairs."""
        return max((normalized_depth_similarity(d) for d in self._distances(a, b)), default=0.0)

    @staticmethod
    def outright(target: Token) -> SenseRanking:
        return SenseRanking(scores=[(target.candidates[0], 1.0)], best=0, outright=True)


class ContextSenseScorer(SenseScorer, ABC):
    """Scores one target token at a time against its own context."""

    @abstractmethod
    def rank(self, target: Token, context: TokenGroup) -> SenseRanking | None:
        """Score the candidates of target given its context.

        Returns:
            SenseRanking, or None when the target has no candidates
        """


# =============================================================================
# VERBS
# =============================================================================


class VerbSenseScorer(ContextSenseScorer):
    """Scores verb senses by the nouns of their glosses.

    For each candidate, every context token contributes its best
    normalized similarity to the nouns found in the candidate's gloss,
    weighted by Gaussian distance to the target. The weighted average is
    multiplied by the Zipf prior of the candidate's rank.

    In compact output, scoring stops as soon as a candidate's score
    exceeds the prior of the next-ranked candidate.
    """

    pos_tags = frozenset({POS_VERB})
    zipf_exponent = ZIPF_EXPONENT_VERB

    def __init__(self, query: GraphQuery, processor: TextProcessor, config: WsdConfig):
        super().__init__(query, processor, config)
        self.gloss_nouns = lru_cache(maxsize=16_384)(self._gloss_nouns)

    def _gloss_nouns(self, synset_id: str) -> tuple[Token, ...]:
        """Nouns of a synset's gloss that have candidate senses in the lexicon."""
        gloss = " ".join(self.graph.gloss(synset_id).split())
        tokens = self.processor.tokenize(gloss)
        tags = self.processor.pos_tag(tokens)
        nouns: list[Token] = []
        for word, tag in zip(tokens, tags):
            if self.processor.is_stop_word(word):
                continue
            if map_pos_tag(tag, self.processor.tagset) != POS_NOUN:
                continue
            stem = self.processor.stem(word)
            lemma = self.processor.lemmatize(word, POS_NOUN)
            candidates = lookup_candidates(self.graph, POS_NOUN, (word, lemma, stem))
            if not candidates:
                continue
            nouns.append(
                Token(
                    token=word,
                    stem=stem,
                    lemma=lemma,
                    pos=POS_NOUN,
                    position=len(nouns),
                    group_position=len(nouns),
                    candidates=candidates,
                )
            )
        return tuple(nouns)

    def rank(self, target: Token, context: TokenGroup) -> SenseRanking | None:
        candidates = target.candidates
        if not candidates:
            return None
        if len(candidates) == 1:
            return self.outright(target)

        total = len(candidates)
        weights = [self.weight(target, token) for token in context]
        weight_sum = sum(weights)

        scores: list[tuple[str, float]] = []
        best = 0
        best_score = float("-inf")
        for i, synset_id in enumerate(candidates):
            nouns = self.gloss_nouns(synset_id)
            weighted = 0.0
            if weight_sum > 0:
                for weight, token in zip(weights, context):
                    best_match = max(
                        (self.normalized_similarity(token, noun) for noun in nouns), default=0.0
                    )
                    weighted += weight * max(best_match, 0.0) / weight_sum
            phi = self.prior(i, total) * weighted
            logger.debug(f"Verb {target.token!r} sense {synset_id}: phi={phi}")
            scores.append((synset_id, phi))
            if phi > best_score:
                best_score = phi
                best = i
            if self.config.short_output and i < total - 1 and phi > self.prior(i + 1, total):
                logger.debug(f"Verb {target.token!r}: pruned after rank {i}")
                break
        return SenseRanking(scores=scores, best=best)


# =============================================================================
# NOUNS
# =============================================================================


class NounSenseScorer(SenseScorer):
    """Joint model over the nouns of a sentence.

    Every pair of nouns (i < j) contributes v = sim * gauss. The nearest
    common hypernym of the pair is searched over all candidate pairs; each
    candidate of i or j that is a hyponym of that ancestor receives v as
    support. A candidate's score is

        alfa * support / normalization + beta * zipf(rank)

    where normalization is the total v of the token's pairs (alfa / n
    replaces the support term when it is zero).
    """

    pos_tags = frozenset({POS_NOUN})
    zipf_exponent = ZIPF_EXPONENT_NOUN

    def _supports(self, ancestor: str | None, candidates: tuple[str, ...]) -> list[int]:
        if ancestor is None:
            return []
        return [
            k
            for k, synset_id in enumerate(candidates)
            if self.query.is_hypernym_of(ancestor, synset_id, MAX_DEPTH)
        ]

    def rank_group(self, nouns: TokenGroup) -> list[SenseRanking | None]:
        """Rank every noun of the group.

        Returns:
            One ranking per noun, None for nouns without candidates
        """
        n = len(nouns)
        if n == 0:
            return []
        max_senses = max(len(token.candidates) for token in nouns)
        support = np.zeros((n, max(max_senses, 1)))
        normalization = np.zeros(n)

        for i in range(n):
            for j in range(i + 1, n):
                a, b = nouns[i], nouns[j]
                v = self.similarity(a, b) * self.weight(a, b)
                depth, ancestor = self.query.common_min_synset(
                    a.candidates, b.candidates, RelationType.HYPERNYM, self.config.common_depth
                )
                logger.debug(
                    f"Nouns {a.token!r}/{b.token!r}: v={v} ancestor={ancestor} depth={depth}"
                )
                for k in self._supports(ancestor, a.candidates):
                    support[i, k] += v
                for k in self._supports(ancestor, b.candidates):
                    support[j, k] += v
                normalization[i] += v
                normalization[j] += v

        rankings: list[SenseRanking | None] = []
        for i, token in enumerate(nouns):
            total = len(token.candidates)
            if total == 0:
                rankings.append(None)
                continue
            priors = np.array([self.prior(k, total) for k in range(total)])
            if normalization[i] != 0:
                phi = self.config.alfa * support[i, :total] / normalization[i]
            else:
                phi = np.full(total, self.config.alfa / total)
            phi = phi + self.config.beta * priors
            best = int(np.argmax(phi))
            rankings.append(
                SenseRanking(
                    scores=[(sid, float(score)) for sid, score in zip(token.candidates, phi)],
                    best=best,
                )
            )
        return rankings


# =============================================================================
# ADJECTIVES AND ADVERBS
# =============================================================================


class AdjAdvSenseScorer(ContextSenseScorer):
    """Lesk-style gloss overlap for adjectives and adverbs.

    The context gloss concatenates the glosses of every candidate of every
    context token. Each target candidate's gloss (expanded with related
    words) is compared with it using the configured measure; overlaps are
    normalized to sum to 1 and blended with the Zipf prior.
    """

    pos_tags = frozenset({POS_ADJ, POS_ADV})
    zipf_exponent = ZIPF_EXPONENT_ADJ

    def rank(self, target: Token, context: TokenGroup) -> SenseRanking | None:
        candidates = target.candidates
        if not candidates:
            return None
        if len(candidates) == 1:
            return self.outright(target)

        context_gloss = build_context_gloss(self.query, self.processor, context)
        overlaps = []
        for synset_id in candidates:
            target_gloss = build_target_gloss(
                self.query, self.processor, target, synset_id, self.config.depth
            )
            overlaps.append(
                gloss_overlap(
                    target_gloss,
                    context_gloss,
                    target.stem,
                    self.processor.stem,
                    self.config.measure,
                )
            )

        total = len(candidates)
        overlap_sum = sum(overlaps)
        if overlap_sum > 0:
            normalized = [overlap / overlap_sum for overlap in overlaps]
        else:
            normalized = [1 / total] * total

        scores = []
        best = 0
        for j, synset_id in enumerate(candidates):
            score = self.config.alfa * normalized[j] + self.config.beta * self.prior(j, total)
            scores.append((synset_id, score))
            if score > scores[best][1]:
                best = j
        logger.debug(f"{target.pos} {target.token!r}: {scores}")
        return SenseRanking(scores=scores, best=best)


SCORERS: dict[str, type[SenseScorer]] = {
    POS_VERB: VerbSenseScorer,
    POS_NOUN: NounSenseScorer,
    POS_ADJ: AdjAdvSenseScorer,
    POS_ADV: AdjAdvSenseScorer,
}


def create_scorers(
    query: GraphQuery, processor: TextProcessor, config: WsdConfig
) -> dict[str, SenseScorer]:
    """Instantiate one scorer per POS letter (adjectives and adverbs share one)."""
    instances: dict[type[SenseScorer], SenseScorer] = {}
    scorers = {}
    for pos, scorer_cls in SCORERS.items():
        if scorer_cls not in instances:
            instances[scorer_cls] = scorer_cls(query, processor, config)
        scorers[pos] = instances[scorer_cls]
    return scorers
