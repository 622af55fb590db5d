"""Data models for the lexicon graph.

This module defines immutable dataclasses for:
- Pointer: a typed, directed edge stored on its source synset or lemma
- Synset: a set of synonymous word senses with gloss and pointers
- LemmaEntry: surface form -> candidate synset ids per POS
- Domain: a label in the domain (semantic field) hierarchy
"""

from dataclasses import dataclass, field

from jigsaw_wsd.constants import POS_ADJ, POS_ADV, POS_NOUN, POS_VERB, RelationType


@dataclass(frozen=True)
class Pointer:
    """Directed typed edge.

    Attributes:
        relation: Relation type of the edge
        target: Target synset id (or target lemma for lexical relations)
    """

    relation: RelationType
    target: str


@dataclass(frozen=True)
class Synset:
    """A synset of the lexicon.

    Attributes:
        id: POS letter + zero-padded offset (e.g., "n00001740")
        gloss: Definitional text, possibly followed by quoted usage examples
        words: Ordered surface words of the synset (multiwords use "_")
        pointers: Outgoing typed pointers
        domains: Domain labels attached to the synset
    """

    id: str
    gloss: str = ""
    words: tuple[str, ...] = ()
    pointers: tuple[Pointer, ...] = ()
    domains: tuple[str, ...] = ()

    @property
    def pos(self) -> str:
        """POS letter encoded in the synset id."""
        return self.id[:1]

    def targets(self, relation: RelationType) -> tuple[str, ...]:
        """Return the targets of all pointers of the given relation type."""
        return tuple(p.target for p in self.pointers if p.relation == relation)


@dataclass(frozen=True)
class LemmaEntry:
    """Index entry for a surface form.

    Candidate lists are ordered as stored in the lexicon (most frequent
    sense first).
    """

    lemma: str
    noun: tuple[str, ...] = ()
    verb: tuple[str, ...] = ()
    adj: tuple[str, ...] = ()
    adv: tuple[str, ...] = ()
    pointers: tuple[Pointer, ...] = ()

    def senses(self, pos: str) -> tuple[str, ...]:
        """Return candidate synset ids for a POS letter ('n', 'v', 'a', 'r')."""
        if pos == POS_NOUN:
            return self.noun
        if pos == POS_VERB:
            return self.verb
        if pos == POS_ADJ:
            return self.adj
        if pos == POS_ADV:
            return self.adv
        return ()


@dataclass(frozen=True)
class Domain:
    """Domain label with links into the domain hierarchy."""

    label: str
    hypernyms: tuple[str, ...] = field(default=())
    hyponyms: tuple[str, ...] = field(default=())
