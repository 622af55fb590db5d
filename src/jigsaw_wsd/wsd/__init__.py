"""Word Sense Disambiguation (WSD) module.

This module implements the JIGSAW knowledge-based disambiguation
algorithm over a MultiWordNet-style lexicon graph.

Main components:
- JigsawDisambiguator: Three-pass orchestrator (verbs, nouns, adjectives/adverbs)
- VerbSenseScorer, NounSenseScorer, AdjAdvSenseScorer: Per-POS scoring models
- ContextBuilder: POS-filtered context windows
- JigsawSenseBackend: DataFrame annotation backend (SenseBackend interface)
- aggregate_sense_statistics: Per-sense frequency statistics
"""

from jigsaw_wsd.wsd.aggregator import SENSE_STATS_COLUMNS, aggregate_sense_statistics
from jigsaw_wsd.wsd.backend import JigsawSenseBackend
from jigsaw_wsd.wsd.base import (
    SenseAnnotation,
    SenseBackend,
    validate_annotated_df,
    validate_sentences_df,
    validate_tokens_df,
)
from jigsaw_wsd.wsd.context import CONTEXT_POS, ContextBuilder
from jigsaw_wsd.wsd.disambiguator import DEFAULT_WORKERS, JigsawDisambiguator
from jigsaw_wsd.wsd.gloss import (
    build_context_gloss,
    build_target_gloss,
    compare_tfidf,
    compare_weighted,
    gloss_overlap,
)
from jigsaw_wsd.wsd.output import (
    SenseRanking,
    best_sense,
    encode_ranking,
    finalize_sense,
    format_token_line,
    parse_scored_senses,
)
from jigsaw_wsd.wsd.primitives import (
    depth_similarity,
    gaussian_weight,
    normalized_depth_similarity,
    zipf_prior,
)
from jigsaw_wsd.wsd.scorers import (
    AdjAdvSenseScorer,
    ContextSenseScorer,
    NounSenseScorer,
    SenseScorer,
    VerbSenseScorer,
    create_scorers,
)
from jigsaw_wsd.wsd.tokens import Token, TokenGroup, build_token_group, lookup_candidates

__all__ = [
    # Aggregation
    "SENSE_STATS_COLUMNS",
    "aggregate_sense_statistics",
    # Backends
    "JigsawSenseBackend",
    "SenseAnnotation",
    "SenseBackend",
    "validate_annotated_df",
    "validate_sentences_df",
    "validate_tokens_df",
    # Orchestration
    "CONTEXT_POS",
    "ContextBuilder",
    "DEFAULT_WORKERS",
    "JigsawDisambiguator",
    # Glosses
    "build_context_gloss",
    "build_target_gloss",
    "compare_tfidf",
    "compare_weighted",
    "gloss_overlap",
    # Output
    "SenseRanking",
    "best_sense",
    "encode_ranking",
    "finalize_sense",
    "format_token_line",
    "parse_scored_senses",
    # Scoring
    "AdjAdvSenseScorer",
    "ContextSenseScorer",
    "NounSenseScorer",
    "SenseScorer",
    "VerbSenseScorer",
    "create_scorers",
    "depth_similarity",
    "gaussian_weight",
    "normalized_depth_similarity",
    "zipf_prior",
    # Tokens
    "Token",
    "TokenGroup",
    "build_token_group",
    "lookup_candidates",
]
