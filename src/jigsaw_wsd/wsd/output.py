"""Sense annotation encoding.

Compact output stores the winning synset id. Full output stores every
candidate with its score as "id/score id/score ...", rendered as
"id:score,id:score" when POS-tag notation is enabled. Tokens without a
resolved sense are rendered "U".
"""

from __future__ import annotations

from dataclasses import dataclass

from jigsaw_wsd.constants import POS_OTHER, UNRESOLVED_SENSE
from jigsaw_wsd.wsd.tokens import Token


@dataclass
class SenseRanking:
    """Scores of a token's candidate senses.

    Attributes:
        scores: (synset_id, score) pairs in candidate order; may stop short
            of the full candidate list when scoring was pruned
        best: Index of the winning pair in scores
        outright: True when a single candidate was assigned without scoring
    """

    scores: list[tuple[str, float]]
    best: int = 0
    outright: bool = False

    @property
    def best_id(self) -> str:
        return self.scores[self.best][0]

    @property
    def best_score(self) -> float:
        return self.scores[self.best][1]


def encode_ranking(ranking: SenseRanking, short_output: bool, cutoff: float) -> str | None:
    """Encode a ranking as a token annotation.

    Returns:
        The winning id (compact mode, None if below cutoff), or the
        "id/score ..." list (full mode)
    """
    if not ranking.scores:
        return None
    if ranking.outright:
        return ranking.best_id if short_output else f"{ranking.best_id}/1"
    if short_output:
        return ranking.best_id if ranking.best_score >= cutoff else None
    return " ".join(f"{synset_id}/{score}" for synset_id, score in ranking.scores)


def parse_scored_senses(annotation: str | None) -> list[tuple[str, float]]:
    """Parse a full-output annotation back into (id, score) pairs.

    Accepts both "id/score id/score" and "id:score,id:score" renderings.
    A bare id (compact output) parses as score 1.0; "U" and None parse as
    an empty list.

    Examples:
        >>> parse_scored_senses("n001/0.25 n002/0.75")
        [('n001', 0.25), ('n002', 0.75)]
        >>> parse_scored_senses("n001:0.25,n002:0.75")
        [('n001', 0.25), ('n002', 0.75)]
        >>> parse_scored_senses("U")
        []
    """
    if not annotation or annotation == UNRESOLVED_SENSE:
        return []
    if "," in annotation or ":" in annotation:
        items = [item for item in annotation.split(",") if item]
        separator = ":"
    else:
        items = annotation.split()
        separator = "/"
    pairs = []
    for item in items:
        synset_id, sep, score = item.partition(separator)
        pairs.append((synset_id, float(score) if sep else 1.0))
    return pairs


def best_sense(annotation: str | None) -> tuple[str | None, float]:
    """Return the highest-scoring (id, score) of an annotation, (None, 0.0) if none."""
    pairs = parse_scored_senses(annotation)
    if not pairs:
        return None, 0.0
    return max(pairs, key=lambda pair: pair[1])


def finalize_sense(token: Token, short_output: bool, pos_tag_notation: bool) -> str:
    """Render the final annotation of a token."""
    sense = token.sense
    if not sense or sense == UNRESOLVED_SENSE:
        return UNRESOLVED_SENSE
    if not pos_tag_notation:
        return sense
    if token.pos == POS_OTHER:
        return UNRESOLVED_SENSE
    if short_output:
        return sense
    return ",".join(f"{synset_id}:{score}" for synset_id, score in parse_scored_senses(sense))


def format_token_line(token: Token) -> str:
    """Render a token as "token stem pos lemma sense"."""
    sense = token.sense or UNRESOLVED_SENSE
    return f"{token.token} {token.stem} {token.pos} {token.lemma} {sense}"
