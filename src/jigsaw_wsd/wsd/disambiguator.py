"""JIGSAW disambiguation orchestrator.

A sentence is disambiguated in three passes:

1. every verb, each with its own context (target excluded)
2. every noun, jointly in a single call
3. every adjective and adverb, each with its own context

Tokens without candidates, or whose winning score is below the cutoff
in compact output, are annotated "U".
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Sequence

from tqdm import tqdm

from jigsaw_wsd.config import WsdConfig
from jigsaw_wsd.constants import POS_ADJ, POS_ADV, POS_NOUN, POS_VERB, UNRESOLVED_SENSE
from jigsaw_wsd.lexicon.graph import LexiconGraph
from jigsaw_wsd.lexicon.query import GraphQuery
from jigsaw_wsd.nlp.tags import map_pos_tag
from jigsaw_wsd.nlp.text_processing import TextProcessor
from jigsaw_wsd.wsd.context import ContextBuilder
from jigsaw_wsd.wsd.output import SenseRanking, encode_ranking, finalize_sense
from jigsaw_wsd.wsd.scorers import (
    ContextSenseScorer,
    NounSenseScorer,
    SenseScorer,
    create_scorers,
)
from jigsaw_wsd.wsd.tokens import Token, TokenGroup, build_token_group

logger = logging.getLogger(__name__)

# Default number of worker threads for map_documents()
DEFAULT_WORKERS = 4


class JigsawDisambiguator:
    """Assigns lexicon senses to the content words of a sentence.

    The lexicon graph is read-only, so one disambiguator can process
    several documents concurrently (see map_documents).

    Args:
        graph: Lexicon graph
        processor: Text processing collaborator
        config: Disambiguation parameters (defaults if None)
        query: Graph query engine (built over graph if None)

    Example:
        >>> disambiguator = JigsawDisambiguator(graph, SimpleTextProcessor())
        >>> group = disambiguator.map_text("He sat on the bank of the river")
        >>> [(t.token, t.sense) for t in group if t.pos == "n"]
        [('bank', 'n09213565/0.81 ...'), ('river', ...)]
    """

    def __init__(
        self,
        graph: LexiconGraph,
        processor: TextProcessor,
        config: WsdConfig | None = None,
        query: GraphQuery | None = None,
    ):
        self.graph = graph
        self.processor = processor
        self.config = (config or WsdConfig()).validate()
        self.query = query or GraphQuery(graph)
        self.context_builder = ContextBuilder(
            processor.is_stop_word, radius=self.config.radius, max_verb=self.config.max_verb
        )
        self.scorers: dict[str, SenseScorer] = create_scorers(self.query, processor, self.config)
        self.noun_scorer: NounSenseScorer = self.scorers[POS_NOUN]  # type: ignore[assignment]
        if self.config.verbose:
            logging.getLogger("jigsaw_wsd").setLevel(logging.DEBUG)

    # =========================================================================
    # PASSES
    # =========================================================================

    def _assign(self, token: Token, ranking: SenseRanking | None) -> None:
        if ranking is None:
            token.sense = UNRESOLVED_SENSE
            return
        encoded = encode_ranking(ranking, self.config.short_output, self.config.cutoff)
        token.sense = encoded if encoded is not None else UNRESOLVED_SENSE

    def _score_token(self, group: TokenGroup, index: int) -> None:
        token = group[index]
        scorer: ContextSenseScorer = self.scorers[token.pos]  # type: ignore[assignment]
        try:
            context = self.context_builder.build(group, index, include_target=False)
            ranking = scorer.rank(token, context)
        except Exception:
            logger.exception(f"Scoring failed for {token.token!r} ({token.pos}), marked unresolved")
            token.sense = UNRESOLVED_SENSE
            return
        self._assign(token, ranking)

    def _score_nouns(self, group: TokenGroup) -> None:
        nouns = self.context_builder.nouns(group)
        if len(nouns) == 0:
            return
        try:
            rankings = self.noun_scorer.rank_group(nouns)
        except Exception:
            logger.exception("Noun scoring failed, marking nouns unresolved")
            for token in nouns:
                token.sense = UNRESOLVED_SENSE
            return
        for token, ranking in zip(nouns, rankings):
            self._assign(token, ranking)

    def disambiguate(self, group: TokenGroup) -> TokenGroup:
        """Disambiguate every content word of a sentence in place.

        Returns:
            The same group, with `sense` set on each content word
        """
        logger.debug(f"Verb pass over {len(group)} tokens")
        for i, token in enumerate(group):
            if token.pos == POS_VERB:
                self._score_token(group, i)

        logger.debug("Noun pass")
        self._score_nouns(group)

        logger.debug("Adjective/adverb pass")
        for i, token in enumerate(group):
            if token.pos in (POS_ADJ, POS_ADV):
                self._score_token(group, i)
        return group

    def disambiguate_target(self, group: TokenGroup, index: int) -> TokenGroup:
        """Disambiguate a single word of the group in place.

        A noun target first resolves up to max_verb verbs on each side,
        then runs the joint noun pass.
        """
        target = group[index]
        if target.pos == POS_NOUN:
            for verb in self.context_builder.nearest_verbs(group, index):
                self._score_token(group, verb.group_position)
            self._score_nouns(group)
        elif target.pos in (POS_VERB, POS_ADJ, POS_ADV):
            self._score_token(group, index)
        return group

    # =========================================================================
    # PIPELINES
    # =========================================================================

    def finalize(self, group: TokenGroup) -> TokenGroup:
        """Render final annotations ("U" for unresolved, POS-tag notation)."""
        for token in group:
            token.sense = finalize_sense(
                token, self.config.short_output, self.config.pos_tag_notation
            )
        return group

    def _lemmas(self, tokens: Sequence[str], pos_letters: Sequence[str]) -> list[str]:
        return [self.processor.lemmatize(t, p) for t, p in zip(tokens, pos_letters)]

    def build_group(self, tokens: Sequence[str]) -> TokenGroup:
        """Tag, stem and lemmatize tokens and look up their candidates."""
        tokens = list(tokens)
        tags = self.processor.pos_tag(tokens)
        letters = [map_pos_tag(tag, self.processor.tagset) for tag in tags]
        return build_token_group(
            tokens,
            letters,
            [self.processor.stem(t) for t in tokens],
            self._lemmas(tokens, letters),
            self.graph,
            convert_tags=False,
        )

    def map_tokens(self, tokens: Sequence[str]) -> TokenGroup:
        """Tag, stem, lemmatize and disambiguate pre-tokenized text."""
        return self.finalize(self.disambiguate(self.build_group(tokens)))

    def map_text(self, text: str) -> TokenGroup:
        """Tokenize and disambiguate raw text."""
        return self.map_tokens(self.processor.tokenize(text))

    def map_tagged(self, tokens: Sequence[str], tags: Sequence[str]) -> TokenGroup:
        """Disambiguate tokens already tagged with lexicon POS letters."""
        tokens = list(tokens)
        tags = list(tags)
        group = build_token_group(
            tokens,
            tags,
            [self.processor.stem(t) for t in tokens],
            self._lemmas(tokens, tags),
            self.graph,
            convert_tags=False,
        )
        return self.finalize(self.disambiguate(group))

    def map_documents(
        self,
        texts: Sequence[str],
        workers: int = DEFAULT_WORKERS,
        show_progress: bool = True,
    ) -> list[TokenGroup]:
        """Disambiguate independent documents in parallel.

        Args:
            texts: Raw documents
            workers: Worker threads
            show_progress: Show a tqdm progress bar

        Returns:
            One token group per document, in input order
        """
        texts = list(texts)
        logger.info(f"Disambiguating {len(texts)} documents with {workers} workers")
        with ThreadPoolExecutor(max_workers=max(1, workers)) as executor:
            results = executor.map(self.map_text, texts)
            if show_progress:
                results = tqdm(results, total=len(texts), desc="Disambiguating", unit="doc")
            return list(results)
