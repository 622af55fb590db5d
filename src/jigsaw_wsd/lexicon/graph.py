"""Immutable in-memory lexicon graph.

The graph is built once from LexiconTables and is read-only afterwards,
so a single instance can be shared by any number of concurrent
disambiguation calls without locking.

Graph construction synthesizes the inverse edge of every hypernym,
member_of, substance_of and part_of pointer (hyponym, has_member,
has_substance, has_part) so that traversal can move in both directions.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from types import MappingProxyType
from typing import Mapping

from jigsaw_wsd.constants import (
    DOMAIN,
    DOMAINS,
    GLOSS,
    HYPERS,
    HYPONS,
    ID,
    LEMMA,
    LEXICAL_RELATIONS,
    POS_LOOKUP_ORDER,
    POS_TO_LEMMA_COLUMN,
    REVERSE_RELATIONS,
    SOURCE,
    SYNSET,
    TARGET,
    TYPE,
    WORDS,
    RelationType,
    translate_relation,
)
from jigsaw_wsd.lexicon.loader import LexiconLoadError, LexiconTables, split_cell
from jigsaw_wsd.lexicon.models import Domain, LemmaEntry, Pointer, Synset

logger = logging.getLogger(__name__)


class LexiconGraph:
    """Read-only lexicon: synsets, lemma index, typed relations and domains.

    Lookups never raise on unknown ids: accessors return None or an empty
    tuple so that one bad reference only degrades the score of a single
    candidate.

    Example:
        >>> graph = build_lexicon_graph(tables)
        >>> graph.synsets_for("bank", "n")
        ('n08420278', 'n09213565')
        >>> graph.pointers("n09213565", RelationType.HYPERNYM)
        ('n09335240',)
    """

    def __init__(
        self,
        synsets: Mapping[str, Synset],
        lemmas: Mapping[str, LemmaEntry],
        domains: Mapping[str, Domain] | None = None,
    ):
        self._synsets = MappingProxyType(dict(synsets))
        self._lemmas = MappingProxyType(dict(lemmas))
        self._domains = MappingProxyType(dict(domains or {}))

    # =========================================================================
    # MAPS
    # =========================================================================

    @property
    def synsets(self) -> Mapping[str, Synset]:
        return self._synsets

    @property
    def lemmas(self) -> Mapping[str, LemmaEntry]:
        return self._lemmas

    @property
    def domains(self) -> Mapping[str, Domain]:
        return self._domains

    def __len__(self) -> int:
        return len(self._synsets)

    def __contains__(self, synset_id: object) -> bool:
        return synset_id in self._synsets

    # =========================================================================
    # ACCESSORS
    # =========================================================================

    def synset(self, synset_id: str | None) -> Synset | None:
        if synset_id is None:
            return None
        return self._synsets.get(synset_id)

    def lemma(self, word: str | None) -> LemmaEntry | None:
        if not word:
            return None
        return self._lemmas.get(word)

    def domain(self, label: str) -> Domain | None:
        return self._domains.get(label)

    def synsets_for(self, word: str | None, pos: str) -> tuple[str, ...]:
        """Return candidate synset ids of a word for a POS letter.

        Args:
            word: Surface form or lemma (exact key of the lemma index)
            pos: POS letter ('n', 'v', 'a', 'r'); anything else yields ()

        Returns:
            Candidate ids, most frequent sense first
        """
        entry = self.lemma(word)
        if entry is None:
            return ()
        return entry.senses(pos)

    def has_any_synsets(self, word: str) -> str | None:
        """Return the first POS (n, a, v, r order) for which the word has senses."""
        for pos in POS_LOOKUP_ORDER:
            if self.synsets_for(word, pos):
                return pos
        return None

    def gloss(self, synset_id: str) -> str:
        """Full gloss of a synset, including quoted usage examples."""
        synset = self.synset(synset_id)
        if synset is None:
            logger.warning(f"Gloss lookup on unknown synset: {synset_id}")
            return ""
        return synset.gloss or ""

    def context_gloss(self, synset_id: str) -> str:
        """Gloss truncated before the first double quote (no usage examples)."""
        gloss = self.gloss(synset_id)
        quote = gloss.find('"')
        if quote >= 0:
            gloss = gloss[:quote]
        return gloss

    def words(self, synset_id: str) -> tuple[str, ...]:
        synset = self.synset(synset_id)
        if synset is None:
            return ()
        return synset.words

    def pointers(self, synset_id: str, relation: RelationType) -> tuple[str, ...]:
        """Targets of the synset's pointers of one relation type."""
        synset = self.synset(synset_id)
        if synset is None:
            return ()
        return synset.targets(relation)

    def lexical_pointers(self, word: str, relation: RelationType) -> tuple[str, ...]:
        """Targets of a lemma's lexical pointers (composed_of / composes)."""
        entry = self.lemma(word)
        if entry is None:
            return ()
        return tuple(p.target for p in entry.pointers if p.relation == relation)

    def domains_of(self, synset_id: str) -> tuple[str, ...]:
        synset = self.synset(synset_id)
        if synset is None:
            return ()
        return synset.domains


# =============================================================================
# CONSTRUCTION
# =============================================================================


class _PointerStore:
    """Pointer lists per source; duplicate (source, pointer) pairs are dropped."""

    def __init__(self):
        self.pointers: dict[str, list[Pointer]] = defaultdict(list)
        self._seen: set[tuple[str, Pointer]] = set()

    def add(self, source: str, pointer: Pointer) -> bool:
        key = (source, pointer)
        if key in self._seen:
            return False
        self._seen.add(key)
        self.pointers[source].append(pointer)
        return True

    def get(self, source: str) -> tuple[Pointer, ...]:
        return tuple(self.pointers.get(source, ()))


def build_lexicon_graph(tables: LexiconTables) -> LexiconGraph:
    """Build the immutable lexicon graph from raw tables.

    Args:
        tables: Synset, lemma, relation and domain tables

    Returns:
        LexiconGraph with inverse edges synthesized for the hypernym,
        member_of, substance_of and part_of families

    Raises:
        LexiconLoadError: If the tables are malformed
    """
    tables.validate()

    # Synsets (pointers and domains attached below)
    base: dict[str, tuple[str, tuple[str, ...]]] = {}
    for row in tables.synsets.itertuples(index=False):
        record = row._asdict()
        synset_id = str(record[ID]).strip()
        if not synset_id:
            raise LexiconLoadError("synsets table contains an empty id")
        gloss = record[GLOSS]
        gloss = "" if gloss is None or gloss != gloss else str(gloss)
        base[synset_id] = (gloss, tuple(split_cell(record[WORDS])))
    logger.info(f"Synsets: {len(base)}")

    # Lemma index
    lemma_senses: dict[str, dict[str, tuple[str, ...]]] = {}
    for row in tables.lemmas.itertuples(index=False):
        record = row._asdict()
        word = str(record[LEMMA])
        lemma_senses[word] = {
            pos: tuple(split_cell(record[column])) for pos, column in POS_TO_LEMMA_COLUMN.items()
        }
    logger.info(f"Lemmas: {len(lemma_senses)}")

    # Relations
    synset_pointers = _PointerStore()
    lemma_pointers = _PointerStore()
    added = 0
    reversed_count = 0
    for row in tables.relations.itertuples(index=False):
        record = row._asdict()
        relation = translate_relation(record[TYPE])
        source = str(record[SOURCE]).strip()
        target = str(record[TARGET]).strip()
        if relation is None:
            logger.warning(f"Unknown relation code {record[TYPE]!r}: {source} -> {target}")
            continue

        if relation in LEXICAL_RELATIONS:
            if source not in lemma_senses:
                logger.warning(f"Source lemma (lexical relation) not found: {source}")
                continue
            lemma_pointers.add(source, Pointer(relation, target))
            if relation == RelationType.COMPOSED_OF and target in lemma_senses:
                lemma_pointers.add(target, Pointer(RelationType.COMPOSES, source))
            continue

        if source not in base:
            logger.warning(f"Source synset (semantic relation) not found: {source}")
            continue
        if synset_pointers.add(source, Pointer(relation, target)):
            added += 1
        inverse = REVERSE_RELATIONS.get(relation)
        if inverse is not None and target in base:
            if synset_pointers.add(target, Pointer(inverse, source)):
                reversed_count += 1
    logger.info(f"Relations: {added} stored, {reversed_count} reverse edges synthesized")

    # Domains
    domain_links: dict[str, tuple[list[str], list[str]]] = {}
    for row in tables.domain_hierarchy.itertuples(index=False):
        record = row._asdict()
        domain_links[str(record[DOMAIN])] = (split_cell(record[HYPERS]), split_cell(record[HYPONS]))
    domains = {
        label: Domain(
            label=label,
            hypernyms=tuple(d for d in hypers if d in domain_links),
            hyponyms=tuple(d for d in hypons if d in domain_links),
        )
        for label, (hypers, hypons) in domain_links.items()
    }

    synset_domains: dict[str, list[str]] = defaultdict(list)
    for row in tables.semfield.itertuples(index=False):
        record = row._asdict()
        synset_id = str(record[SYNSET])
        if synset_id not in base:
            logger.warning(f"Domain assignment on unknown synset: {synset_id}")
            continue
        for label in split_cell(record[DOMAINS]):
            if label in domains:
                synset_domains[synset_id].append(label)
            else:
                logger.warning(f"Domain not found: {label}")
    logger.info(f"Domains: {len(domains)}")

    synsets = {
        synset_id: Synset(
            id=synset_id,
            gloss=gloss,
            words=words,
            pointers=synset_pointers.get(synset_id),
            domains=tuple(synset_domains.get(synset_id, ())),
        )
        for synset_id, (gloss, words) in base.items()
    }
    lemmas = {
        word: LemmaEntry(
            lemma=word,
            noun=senses["n"],
            verb=senses["v"],
            adj=senses["a"],
            adv=senses["r"],
            pointers=lemma_pointers.get(word),
        )
        for word, senses in lemma_senses.items()
    }
    return LexiconGraph(synsets, lemmas, domains)
