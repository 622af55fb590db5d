"""Default values for graph traversal and disambiguation."""

import math

# Hard bound on relation traversal depth
MAX_DEPTH = 16

# Node budget for a single relation-closure traversal
MAX_CLOSURE_NODES = 50_000

# Closures kept per query engine
CLOSURE_CACHE_SIZE = 65_536

# Per-processor cache of isolated-word lemmas
LEMMA_CACHE_SIZE = 65_536

# Zipf exponents for the sense-rank prior (per POS)
ZIPF_EXPONENT_VERB = 1.977
ZIPF_EXPONENT_NOUN = 2.688
ZIPF_EXPONENT_ADJ = 2.855

# Floor term of the Gaussian positional weight
GAUSS_FLOOR = 1 - 2 / math.sqrt(2 * math.pi)

# Annotation for tokens without a resolved sense
UNRESOLVED_SENSE = "U"

# Similarity measures for gloss overlap
MEASURE_WEIGHTED = "weighted"
MEASURE_OCCURRENCE = "occurrence"
MEASURE_TFIDF = "tf-idf"
MEASURES = (MEASURE_WEIGHTED, MEASURE_OCCURRENCE, MEASURE_TFIDF)

# Numeric measure codes used by legacy configuration files
MEASURE_CODES: dict[str, str] = {
    "0": MEASURE_WEIGHTED,
    "1": MEASURE_OCCURRENCE,
    "2": MEASURE_TFIDF,
}

# Disambiguation defaults
DEPTH_DEFAULT = 6
COMMON_DEPTH_DEFAULT = 2
RADIUS_DEFAULT = 9
MAX_VERB_DEFAULT = 0
ALFA_DEFAULT = 0.7
BETA_DEFAULT = 0.3
THETA_DEFAULT = 0.5
SIGMA_DEFAULT = 2.0
CUTOFF_DEFAULT = -1.0
LOOK_GRAM_DEFAULT = 3

# Language for the Snowball stemmer
STEMMER_LANGUAGE_DEFAULT = "english"

# File encoding
ENCODING_UTF8 = "utf-8"

# spaCy pipeline used by SpacyTextProcessor
SPACY_MODEL_DEFAULT = "en_core_web_sm"
SPACY_DISABLED = ["parser", "ner", "textcat"]
