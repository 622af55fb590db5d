"""Tokens and token groups consumed by the scorers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Sequence

from jigsaw_wsd.lexicon.graph import LexiconGraph
from jigsaw_wsd.nlp.tags import TAGSET_PENN, map_pos_tag


@dataclass
class Token:
    """A word of the input sentence.

    Attributes:
        token: Surface form
        stem: Stem of the surface form
        lemma: Lemma
        pos: Lexicon POS letter ('n', 'v', 'a', 'r', 'o')
        position: Index in the sentence
        group_position: Index in the group the token was built in; used
            as the position for Gaussian decay
        candidates: Candidate synset ids, most frequent first
        sense: Resolved annotation (single id, "id/score ..." list, or
            None while unresolved)
    """

    token: str
    stem: str = ""
    lemma: str = ""
    pos: str = "o"
    position: int = 0
    group_position: int = 0
    candidates: tuple[str, ...] = ()
    sense: str | None = None


@dataclass
class TokenGroup:
    """Ordered sequence of tokens. Order is the context order."""

    tokens: list[Token] = field(default_factory=list)

    def append(self, token: Token) -> None:
        self.tokens.append(token)

    def __len__(self) -> int:
        return len(self.tokens)

    def __iter__(self) -> Iterator[Token]:
        return iter(self.tokens)

    def __getitem__(self, index: int) -> Token:
        return self.tokens[index]

    @property
    def senses(self) -> list[str | None]:
        return [t.sense for t in self.tokens]


def lookup_candidates(
    graph: LexiconGraph, pos: str, forms: Iterable[str | None]
) -> tuple[str, ...]:
    """Return the candidates of the first form that has any for this POS."""
    for form in forms:
        candidates = graph.synsets_for(form, pos)
        if candidates:
            return candidates
    return ()


def build_token_group(
    tokens: Sequence[str],
    pos_tags: Sequence[str],
    stems: Sequence[str],
    lemmas: Sequence[str],
    graph: LexiconGraph,
    convert_tags: bool = True,
    tagset: str = TAGSET_PENN,
) -> TokenGroup:
    """Build a token group with candidate senses looked up in the lexicon.

    Candidates are looked up by lemma, then surface form, then stem; the
    first non-empty list wins.

    Args:
        tokens: Surface forms
        pos_tags: Tagger tags (or lexicon letters when convert_tags=False)
        stems: Stems, one per token
        lemmas: Lemmas, one per token
        graph: Lexicon graph
        convert_tags: Map tagger tags into the lexicon tagset
        tagset: Tagset of pos_tags when converting

    Returns:
        TokenGroup in sentence order

    Raises:
        ValueError: If the sequences have different lengths
    """
    if not (len(tokens) == len(pos_tags) == len(stems) == len(lemmas)):
        raise ValueError(
            f"Length mismatch: {len(tokens)} tokens, {len(pos_tags)} tags, "
            f"{len(stems)} stems, {len(lemmas)} lemmas"
        )

    group = TokenGroup()
    for i, surface in enumerate(tokens):
        pos = map_pos_tag(pos_tags[i], tagset) if convert_tags else pos_tags[i]
        group.append(
            Token(
                token=surface,
                stem=stems[i],
                lemma=lemmas[i],
                pos=pos,
                position=i,
                group_position=len(group),
                candidates=lookup_candidates(graph, pos, (lemmas[i], surface, stems[i])),
            )
        )
    return group
