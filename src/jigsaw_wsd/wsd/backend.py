"""JIGSAW annotation backend for token DataFrames.

Tokens are grouped per sentence (ordered by position), disambiguated
with JigsawDisambiguator, and returned with synset_id, sense_score and
sense columns. Scores are always computed for every candidate so that
the winning score can be reported.
"""

from __future__ import annotations

import logging

import pandas as pd
from tqdm import tqdm

from jigsaw_wsd.config import WsdConfig
from jigsaw_wsd.constants import (
    LEMMA,
    POS,
    POSITION,
    SENSE,
    SENSE_SCORE,
    SENTENCE_ID,
    SURFACE,
    SYNSET_ID,
    UNRESOLVED_SENSE,
)
from jigsaw_wsd.lexicon.graph import LexiconGraph
from jigsaw_wsd.nlp.tags import TAGSET_UNIVERSAL
from jigsaw_wsd.nlp.text_processing import TextProcessor
from jigsaw_wsd.wsd.aggregator import aggregate_sense_statistics
from jigsaw_wsd.wsd.base import (
    SenseAnnotation,
    SenseBackend,
    validate_sentences_df,
    validate_tokens_df,
)
from jigsaw_wsd.wsd.disambiguator import JigsawDisambiguator
from jigsaw_wsd.wsd.output import best_sense
from jigsaw_wsd.wsd.tokens import Token, build_token_group, lookup_candidates

logger = logging.getLogger(__name__)


class JigsawSenseBackend(SenseBackend):
    """Sense annotation backend running the JIGSAW disambiguator.

    Args:
        graph: Lexicon graph
        processor: Text processing collaborator (stemming, lemmas for
            disambiguate_word, stop words)
        config: Disambiguation parameters; output options are overridden
            to full scored output
        tagset: Tagset of the pos column of tokens DataFrames
        show_progress: Show a tqdm progress bar over sentences

    Example:
        >>> backend = JigsawSenseBackend(graph, SimpleTextProcessor())
        >>> result = backend.disambiguate_word("He sat on the bank of the river", "bank", "n")
        >>> result.sense_id
        'n09213565'
    """

    def __init__(
        self,
        graph: LexiconGraph,
        processor: TextProcessor,
        config: WsdConfig | None = None,
        tagset: str = TAGSET_UNIVERSAL,
        show_progress: bool = False,
    ):
        self.user_config = config or WsdConfig()
        self.tagset = tagset
        self.show_progress = show_progress
        self.disambiguator = JigsawDisambiguator(
            graph,
            processor,
            self.user_config.with_overrides(short_output=False, pos_tag_notation=False),
        )

    @property
    def name(self) -> str:
        return "jigsaw"

    def _annotation(self, token: Token) -> SenseAnnotation:
        sense_id, score = best_sense(token.sense)
        config = self.user_config
        if sense_id is not None and config.short_output and score < config.cutoff:
            sense_id, score = None, 0.0
        return SenseAnnotation(
            lemma=token.lemma,
            sense_id=sense_id,
            score=score,
            sense=token.sense or UNRESOLVED_SENSE,
            gloss=self.disambiguator.graph.gloss(sense_id) if sense_id else None,
        )

    def annotate(self, tokens_df: pd.DataFrame, sentences_df: pd.DataFrame) -> pd.DataFrame:
        validate_tokens_df(tokens_df)
        validate_sentences_df(sentences_df)

        result = tokens_df.copy()
        result[SYNSET_ID] = None
        result[SENSE_SCORE] = 0.0
        result[SENSE] = UNRESOLVED_SENSE
        if result.empty:
            return result

        processor = self.disambiguator.processor
        grouped = result.sort_values([SENTENCE_ID, POSITION]).groupby(SENTENCE_ID, sort=False)
        iterator = grouped
        if self.show_progress:
            iterator = tqdm(grouped, desc="Annotating sentences", unit="sent")

        for sentence_id, sentence_df in iterator:
            surfaces = sentence_df[SURFACE].astype(str).tolist()
            group = build_token_group(
                surfaces,
                sentence_df[POS].astype(str).tolist(),
                [processor.stem(surface) for surface in surfaces],
                sentence_df[LEMMA].astype(str).tolist(),
                self.disambiguator.graph,
                convert_tags=True,
                tagset=self.tagset,
            )
            self.disambiguator.disambiguate(group)
            for idx, token in zip(sentence_df.index, group):
                annotation = self._annotation(token)
                result.at[idx, SYNSET_ID] = annotation.sense_id
                result.at[idx, SENSE_SCORE] = annotation.score
                result.at[idx, SENSE] = annotation.sense
            logger.debug(f"Sentence {sentence_id}: {len(group)} tokens annotated")

        return result

    def aggregate(self, annotated_df: pd.DataFrame) -> pd.DataFrame:
        return aggregate_sense_statistics(annotated_df)

    def disambiguate_word(
        self,
        sentence: str,
        lemma: str,
        pos: str | None = None,
    ) -> SenseAnnotation:
        """Disambiguate the first occurrence of `lemma` in a raw sentence.

        When pos is given, the token is forced to that POS and its
        candidates are looked up again.
        """
        processor = self.disambiguator.processor
        group = self.disambiguator.build_group(processor.tokenize(sentence))
        wanted = lemma.lower()
        index = next(
            (
                i
                for i, token in enumerate(group)
                if wanted in (token.lemma.lower(), token.token.lower())
            ),
            None,
        )
        if index is None:
            logger.warning(f"Lemma {lemma!r} not found in sentence")
            return SenseAnnotation(lemma=lemma, sense_id=None, score=0.0, sense=UNRESOLVED_SENSE)

        target = group[index]
        if pos is not None and pos != target.pos:
            target.pos = pos
            target.candidates = lookup_candidates(
                self.disambiguator.graph, pos, (lemma, target.token, target.stem)
            )
        self.disambiguator.disambiguate_target(group, index)
        annotation = self._annotation(target)
        annotation.lemma = lemma
        return annotation
