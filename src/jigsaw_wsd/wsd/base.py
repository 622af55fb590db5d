"""Base classes and types for DataFrame-level sense annotation.

This module defines the abstract interface for annotation backends that
add disambiguated senses to a tokens DataFrame, so that pipelines can
swap the scoring model without changing their I/O.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

import pandas as pd

from jigsaw_wsd.constants import (
    LEMMA,
    POS,
    POSITION,
    SENSE,
    SENSE_SCORE,
    SENTENCE,
    SENTENCE_ID,
    SURFACE,
    SYNSET_ID,
)


@dataclass
class SenseAnnotation:
    """Result of word sense disambiguation for a single token.

    Attributes:
        lemma: The lemmatized form of the word
        sense_id: Winning synset id (None if unresolved)
        score: Score of the winning sense (0.0 if unresolved)
        sense: Encoded annotation as produced by the disambiguator
            (single id, "id/score ..." list, or "U")
        gloss: Optional gloss of the winning sense
    """

    lemma: str
    sense_id: str | None
    score: float
    sense: str
    gloss: str | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for DataFrame operations."""
        return {
            LEMMA: self.lemma,
            SYNSET_ID: self.sense_id,
            SENSE_SCORE: self.score,
            SENSE: self.sense,
            "gloss": self.gloss,
        }


class SenseBackend(ABC):
    """Abstract base class for sense annotation backends.

    Usage:
        backend = JigsawSenseBackend(graph, processor)
        annotated_tokens = backend.annotate(tokens_df, sentences_df)
        stats = backend.aggregate(annotated_tokens)
    """

    @abstractmethod
    def annotate(
        self,
        tokens_df: pd.DataFrame,
        sentences_df: pd.DataFrame,
    ) -> pd.DataFrame:
        """Add sense annotations to a tokens DataFrame.

        Args:
            tokens_df: DataFrame with token information. Required columns:
                - sentence_id: ID linking to sentences_df
                - position: Index of the token in its sentence
                - surface: Surface form
                - lemma: The lemmatized word
                - pos: Part of speech tag
            sentences_df: DataFrame with sentence texts. Required columns:
                - sentence_id: Unique sentence identifier
                - sentence: The full sentence text

        Returns:
            DataFrame with original columns plus:
                - synset_id: The disambiguated sense ID (or None)
                - sense_score: Score of the winning sense
                - sense: Encoded annotation

        Raises:
            ValueError: If required columns are missing
        """
        pass

    @abstractmethod
    def aggregate(
        self,
        annotated_df: pd.DataFrame,
    ) -> pd.DataFrame:
        """Aggregate statistics by (lemma, synset_id).

        Args:
            annotated_df: Output of annotate()

        Returns:
            DataFrame of per-sense frequency statistics

        Raises:
            ValueError: If required columns are missing
        """
        pass

    def disambiguate_word(
        self,
        sentence: str,
        lemma: str,
        pos: str | None = None,
    ) -> SenseAnnotation:
        """Disambiguate a single word in context.

        Args:
            sentence: The sentence containing the target word
            lemma: The lemmatized form of the target word
            pos: Optional part of speech filter ('n', 'v', 'a', 'r')

        Returns:
            SenseAnnotation with the disambiguated sense

        Note:
            Default implementation raises NotImplementedError.
        """
        raise NotImplementedError(
            f"{self.__class__.__name__} does not support single-word disambiguation. "
            "Use annotate() for batch processing."
        )

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this backend for logging/display."""
        pass


def _require(df: pd.DataFrame, required: set[str], name: str) -> None:
    missing = required - set(df.columns)
    if missing:
        raise ValueError(f"{name} missing required columns: {sorted(missing)}")


def validate_tokens_df(df: pd.DataFrame) -> None:
    """Validate that tokens DataFrame has required columns.

    Raises:
        ValueError: If required columns are missing
    """
    _require(df, {SENTENCE_ID, POSITION, SURFACE, LEMMA, POS}, "tokens_df")


def validate_sentences_df(df: pd.DataFrame) -> None:
    """Validate that sentences DataFrame has required columns.

    Raises:
        ValueError: If required columns are missing
    """
    _require(df, {SENTENCE_ID, SENTENCE}, "sentences_df")


def validate_annotated_df(df: pd.DataFrame) -> None:
    """Validate that annotated DataFrame has required columns for aggregation.

    Raises:
        ValueError: If required columns are missing
    """
    _require(df, {LEMMA, SYNSET_ID, SENTENCE_ID}, "annotated_df")
