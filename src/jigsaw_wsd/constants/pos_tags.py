"""Part-of-speech tag constants and external tagset tables.

Disambiguation works on a four-way tagset {n, v, a, r}; every other tag
is mapped to "o" and excluded from disambiguation.
"""

POS_NOUN = "n"
POS_VERB = "v"
POS_ADJ = "a"
POS_ADV = "r"
POS_OTHER = "o"

CONTENT_POS: frozenset[str] = frozenset({POS_NOUN, POS_VERB, POS_ADJ, POS_ADV})

# Lexicon lemma table column per POS
POS_TO_LEMMA_COLUMN: dict[str, str] = {
    POS_NOUN: "id_n",
    POS_VERB: "id_v",
    POS_ADJ: "id_a",
    POS_ADV: "id_r",
}

# Order used when probing a word for any sense
POS_LOOKUP_ORDER: tuple[str, ...] = (POS_NOUN, POS_ADJ, POS_VERB, POS_ADV)

# spaCy universal POS tags
SPACY_TO_MWN_POS: dict[str, str] = {
    "NOUN": POS_NOUN,
    "PROPN": POS_NOUN,  # Proper nouns treated as nouns
    "VERB": POS_VERB,
    "ADJ": POS_ADJ,
    "ADV": POS_ADV,
}

# Penn Treebank tags
PENN_TO_MWN_POS: dict[str, str] = {
    "NN": POS_NOUN,
    "NNS": POS_NOUN,
    "NNP": POS_NOUN,
    "NNPS": POS_NOUN,
    "VB": POS_VERB,
    "VBD": POS_VERB,
    "VBG": POS_VERB,
    "VBN": POS_VERB,
    "VBP": POS_VERB,
    "VBZ": POS_VERB,
    "JJ": POS_ADJ,
    "JJR": POS_ADJ,
    "JJS": POS_ADJ,
    "RB": POS_ADV,
    "RBR": POS_ADV,
    "RBS": POS_ADV,
}

# Italian (TANL/EVALITA style) tag prefixes
ITALIAN_PREFIX_TO_MWN_POS: tuple[tuple[str, str], ...] = (
    ("SP", POS_NOUN),
    ("S", POS_NOUN),
    ("V", POS_VERB),
    ("A", POS_ADJ),
    ("B", POS_ADV),
)
