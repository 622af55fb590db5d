"""DataFrame column name constants."""

# Lexicon synset table
ID = "id"
GLOSS = "gloss"
WORDS = "words"

# Lexicon lemma table
LEMMA = "lemma"
ID_N = "id_n"
ID_V = "id_v"
ID_A = "id_a"
ID_R = "id_r"

# Lexicon relation table
SOURCE = "source"
TYPE = "type"
TARGET = "target"

# Lexicon domain tables
SYNSET = "synset"
DOMAINS = "domains"
DOMAIN = "domain"
HYPERS = "hypers"
HYPONS = "hypons"

SYNSET_COLUMNS = [ID, GLOSS, WORDS]
LEMMA_COLUMNS = [LEMMA, ID_N, ID_V, ID_A, ID_R]
RELATION_COLUMNS = [SOURCE, TYPE, TARGET]
SEMFIELD_COLUMNS = [SYNSET, DOMAINS]
DOMAIN_COLUMNS = [DOMAIN, HYPERS, HYPONS]

# Token columns
SENTENCE_ID = "sentence_id"
SENTENCE = "sentence"
POSITION = "position"
SURFACE = "surface"
POS = "pos"

# WSD columns
SYNSET_ID = "synset_id"
SENSE_SCORE = "sense_score"
SENSE = "sense"
SENSE_FREQ = "sense_freq"
LEMMA_FREQ = "lemma_freq"
SENSE_RATIO = "sense_ratio"
DOC_COUNT = "doc_count"
SENSE_COUNT = "sense_count"
DOMINANT_SYNSET = "dominant_synset"
