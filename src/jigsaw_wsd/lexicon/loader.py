"""Lexicon table loaders.

A lexicon is supplied as five tables (pandas DataFrames) mirroring the
MultiWordNet relational store:

- synsets(id, gloss, words)
- lemmas(lemma, id_n, id_v, id_a, id_r)
- relations(source, type, target)
- semfield(synset, domains)
- domain_hierarchy(domain, hypers, hypons)

Multi-valued cells (words, candidate ids, domain labels) are whitespace
separated. Tables can be read from a directory of CSV files or built from
NLTK's WordNet corpus.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

import pandas as pd

from jigsaw_wsd.constants import (
    DOMAIN_COLUMNS,
    DOMAINS_FILE,
    ENCODING_UTF8,
    LEMMA_COLUMNS,
    LEMMAS_FILE,
    POS_ADJ,
    POS_ADV,
    POS_NOUN,
    POS_TO_LEMMA_COLUMN,
    POS_VERB,
    RELATION_COLUMNS,
    RELATIONS_FILE,
    SEMFIELD_COLUMNS,
    SEMFIELD_FILE,
    SYNSET_COLUMNS,
    SYNSETS_FILE,
)

logger = logging.getLogger(__name__)


class LexiconLoadError(ValueError):
    """Raised when lexical data is missing or malformed."""


def _empty(columns: list[str]) -> pd.DataFrame:
    return pd.DataFrame(columns=columns, dtype="object")


@dataclass
class LexiconTables:
    """Raw lexicon tables, consumed once by build_lexicon_graph()."""

    synsets: pd.DataFrame
    lemmas: pd.DataFrame
    relations: pd.DataFrame = field(default_factory=lambda: _empty(RELATION_COLUMNS))
    semfield: pd.DataFrame = field(default_factory=lambda: _empty(SEMFIELD_COLUMNS))
    domain_hierarchy: pd.DataFrame = field(default_factory=lambda: _empty(DOMAIN_COLUMNS))

    def validate(self) -> None:
        """Check that every table carries its required columns.

        Raises:
            LexiconLoadError: If a table is missing columns or the synset
                table is empty
        """
        _require_columns(self.synsets, SYNSET_COLUMNS, "synsets")
        _require_columns(self.lemmas, LEMMA_COLUMNS, "lemmas")
        _require_columns(self.relations, RELATION_COLUMNS, "relations")
        _require_columns(self.semfield, SEMFIELD_COLUMNS, "semfield")
        _require_columns(self.domain_hierarchy, DOMAIN_COLUMNS, "domain_hierarchy")
        if self.synsets.empty:
            raise LexiconLoadError("synsets table is empty")


def _require_columns(df: pd.DataFrame, required: list[str], name: str) -> None:
    if df is None:
        raise LexiconLoadError(f"{name} table is missing")
    missing = set(required) - set(df.columns)
    if missing:
        raise LexiconLoadError(f"{name} table missing required columns: {sorted(missing)}")


def split_cell(value: object) -> list[str]:
    """Split a whitespace-separated table cell into items.

    Examples:
        >>> split_cell("n001 n002")
        ['n001', 'n002']
        >>> split_cell(None)
        []
    """
    if value is None:
        return []
    if isinstance(value, float) and pd.isna(value):
        return []
    return str(value).split()


# =============================================================================
# CSV DIRECTORY
# =============================================================================


def _read_table(path: Path, columns: list[str], required: bool) -> pd.DataFrame:
    if not path.exists():
        if required:
            raise LexiconLoadError(f"Lexicon file not found: {path}")
        return _empty(columns)
    try:
        df = pd.read_csv(path, dtype=str, keep_default_na=False, encoding=ENCODING_UTF8)
    except (OSError, pd.errors.ParserError, UnicodeDecodeError) as e:
        raise LexiconLoadError(f"Unable to read lexicon file {path}: {e}") from e
    _require_columns(df, columns, path.name)
    return df


def load_lexicon_tables(directory: str | Path) -> LexiconTables:
    """Load lexicon tables from a directory of CSV files.

    Required files are synsets.csv, lemmas.csv and relations.csv;
    semfield.csv and domains.csv are optional.

    Args:
        directory: Directory holding the CSV files

    Returns:
        LexiconTables ready for build_lexicon_graph()

    Raises:
        LexiconLoadError: If the directory or a required file is missing,
            or a file lacks required columns
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise LexiconLoadError(f"Lexicon directory not found: {directory}")

    logger.info(f"Loading lexicon tables from {directory}")
    tables = LexiconTables(
        synsets=_read_table(directory / SYNSETS_FILE, SYNSET_COLUMNS, required=True),
        lemmas=_read_table(directory / LEMMAS_FILE, LEMMA_COLUMNS, required=True),
        relations=_read_table(directory / RELATIONS_FILE, RELATION_COLUMNS, required=True),
        semfield=_read_table(directory / SEMFIELD_FILE, SEMFIELD_COLUMNS, required=False),
        domain_hierarchy=_read_table(directory / DOMAINS_FILE, DOMAIN_COLUMNS, required=False),
    )
    tables.validate()
    return tables


def save_lexicon_tables(tables: LexiconTables, directory: str | Path) -> None:
    """Write lexicon tables as CSV files (the layout load_lexicon_tables reads)."""
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    tables.synsets.to_csv(directory / SYNSETS_FILE, index=False)
    tables.lemmas.to_csv(directory / LEMMAS_FILE, index=False)
    tables.relations.to_csv(directory / RELATIONS_FILE, index=False)
    tables.semfield.to_csv(directory / SEMFIELD_FILE, index=False)
    tables.domain_hierarchy.to_csv(directory / DOMAINS_FILE, index=False)


# =============================================================================
# NLTK WORDNET
# =============================================================================

# NLTK synset methods -> MultiWordNet pointer symbols. Inverse directions
# (hyponym, has_member, ...) are synthesized when the graph is built.
_WORDNET_SYNSET_POINTERS: tuple[tuple[str, str], ...] = (
    ("hypernyms", "@"),
    ("instance_hypernyms", "@"),
    ("member_holonyms", "#m"),
    ("substance_holonyms", "#s"),
    ("part_holonyms", "#p"),
    ("attributes", "="),
    ("entailments", "*"),
    ("causes", ">"),
    ("also_sees", "^"),
    ("verb_groups", "$"),
    ("similar_tos", "&"),
)


def wordnet_synset_id(synset) -> str:
    """Build a MultiWordNet-style id for an NLTK synset.

    Satellite adjectives ("s") are folded into "a".

    Examples:
        >>> from nltk.corpus import wordnet as wn
        >>> wordnet_synset_id(wn.synset("entity.n.01"))
        'n00001740'
    """
    pos = synset.pos()
    if pos == "s":
        pos = POS_ADJ
    return f"{pos}{synset.offset():08d}"


def _wordnet_gloss(synset) -> str:
    gloss = synset.definition()
    examples = synset.examples()
    if examples:
        gloss += "; " + "; ".join(f'"{example}"' for example in examples)
    return gloss


def wordnet_tables(pos: str | None = None) -> LexiconTables:
    """Build lexicon tables from NLTK's WordNet corpus.

    Args:
        pos: Optional POS letter to restrict the synset and lemma tables
             ('n', 'v', 'a', 'r'); None loads the whole corpus

    Returns:
        LexiconTables with synsets, lemmas, relations and topic domains

    Raises:
        LexiconLoadError: If the WordNet corpus is not installed
    """
    from nltk.corpus import wordnet as wn

    try:
        wn.get_version()
    except LookupError as e:
        raise LexiconLoadError(
            "NLTK WordNet corpus is not installed. "
            "Install with: python -m nltk.downloader wordnet"
        ) from e

    if pos is None:
        synset_iter = wn.all_synsets()
    else:
        wn_pos = [POS_ADJ, "s"] if pos == POS_ADJ else [pos]
        synset_iter = (s for p in wn_pos for s in wn.all_synsets(p))

    synset_rows = []
    relation_rows = []
    semfield_rows = []
    domain_labels: set[str] = set()

    for synset in synset_iter:
        sid = wordnet_synset_id(synset)
        synset_rows.append(
            {"id": sid, "gloss": _wordnet_gloss(synset), "words": " ".join(synset.lemma_names())}
        )
        for method, symbol in _WORDNET_SYNSET_POINTERS:
            for target in getattr(synset, method)():
                relation_rows.append(
                    {"source": sid, "type": symbol, "target": wordnet_synset_id(target)}
                )
        for lemma in synset.lemmas():
            for pertainym in lemma.pertainyms():
                symbol = "\\" if synset.pos() == POS_ADV else "pertains_to"
                relation_rows.append(
                    {"source": sid, "type": symbol, "target": wordnet_synset_id(pertainym.synset())}
                )
        labels = [d.lemma_names()[0] for d in synset.topic_domains()]
        if labels:
            domain_labels.update(labels)
            semfield_rows.append({"synset": sid, "domains": " ".join(labels)})

    lemma_rows = []
    lemma_names = wn.all_lemma_names() if pos is None else wn.all_lemma_names(pos=pos)
    for name in lemma_names:
        by_pos: dict[str, list[str]] = {POS_NOUN: [], POS_VERB: [], POS_ADJ: [], POS_ADV: []}
        for synset in wn.synsets(name):
            if name not in (n.lower() for n in synset.lemma_names()):
                continue
            sid = wordnet_synset_id(synset)
            if pos is None or sid[0] == pos:
                by_pos[sid[0]].append(sid)
        row = {"lemma": name}
        for p, column in POS_TO_LEMMA_COLUMN.items():
            row[column] = " ".join(by_pos[p])
        lemma_rows.append(row)

    logger.info(
        f"WordNet tables: {len(synset_rows)} synsets, {len(lemma_rows)} lemmas, "
        f"{len(relation_rows)} relations"
    )
    tables = LexiconTables(
        synsets=pd.DataFrame(synset_rows, columns=SYNSET_COLUMNS),
        lemmas=pd.DataFrame(lemma_rows, columns=LEMMA_COLUMNS),
        relations=pd.DataFrame(relation_rows, columns=RELATION_COLUMNS),
        semfield=pd.DataFrame(semfield_rows, columns=SEMFIELD_COLUMNS),
        domain_hierarchy=pd.DataFrame(
            [{"domain": label, "hypers": "", "hypons": ""} for label in sorted(domain_labels)],
            columns=DOMAIN_COLUMNS,
        ),
    )
    tables.validate()
    return tables
