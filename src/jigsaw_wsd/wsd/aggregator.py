"""Aggregation utilities for sense statistics."""

import pandas as pd

from jigsaw_wsd.constants import (
    DOC_COUNT,
    DOMINANT_SYNSET,
    LEMMA,
    LEMMA_FREQ,
    SENSE_COUNT,
    SENSE_FREQ,
    SENSE_RATIO,
    SENTENCE_ID,
    SYNSET_ID,
)
from jigsaw_wsd.wsd.base import validate_annotated_df

SENSE_STATS_COLUMNS = [
    LEMMA,
    SYNSET_ID,
    SENSE_FREQ,
    LEMMA_FREQ,
    SENSE_RATIO,
    DOC_COUNT,
    SENSE_COUNT,
    DOMINANT_SYNSET,
]


def aggregate_sense_statistics(annotated_df: pd.DataFrame) -> pd.DataFrame:
    """Aggregate sense annotations into statistics by (lemma, synset_id).

    Unresolved tokens (synset_id missing) are left out. For each pair:
    - sense_freq: Occurrences of the sense
    - lemma_freq: Resolved occurrences of the lemma
    - sense_ratio: sense_freq / lemma_freq
    - doc_count: Number of unique sentences with this sense
    - sense_count: Number of different senses of the lemma
    - dominant_synset: Most frequent sense of the lemma

    Args:
        annotated_df: DataFrame with lemma, synset_id and sentence_id columns

    Returns:
        DataFrame with SENSE_STATS_COLUMNS

    Raises:
        ValueError: If required columns are missing

    Example:
        >>> annotated = pd.DataFrame({
        ...     "lemma": ["bank", "bank", "bank"],
        ...     "synset_id": ["n002", "n002", "n003"],
        ...     "sentence_id": [1, 2, 3],
        ... })
        >>> stats = aggregate_sense_statistics(annotated)
        >>> stats[stats["synset_id"] == "n002"]["sense_ratio"].iloc[0]
        0.6666666666666666
    """
    validate_annotated_df(annotated_df)

    resolved = annotated_df[annotated_df[SYNSET_ID].notna()]
    if resolved.empty:
        return pd.DataFrame(columns=SENSE_STATS_COLUMNS)

    lemma_freq = resolved.groupby(LEMMA).size().reset_index(name=LEMMA_FREQ)

    sense_stats = (
        resolved.groupby([LEMMA, SYNSET_ID])
        .agg(
            **{
                SENSE_FREQ: (SYNSET_ID, "size"),
                DOC_COUNT: (SENTENCE_ID, "nunique"),
            }
        )
        .reset_index()
    )
    sense_stats = sense_stats.merge(lemma_freq, on=LEMMA)
    sense_stats[SENSE_RATIO] = sense_stats[SENSE_FREQ] / sense_stats[LEMMA_FREQ]

    sense_count = resolved.groupby(LEMMA)[SYNSET_ID].nunique().reset_index(name=SENSE_COUNT)
    sense_stats = sense_stats.merge(sense_count, on=LEMMA)

    dominant = sense_stats.loc[sense_stats.groupby(LEMMA)[SENSE_FREQ].idxmax()][
        [LEMMA, SYNSET_ID]
    ].rename(columns={SYNSET_ID: DOMINANT_SYNSET})
    sense_stats = sense_stats.merge(dominant, on=LEMMA)

    return sense_stats[SENSE_STATS_COLUMNS]
