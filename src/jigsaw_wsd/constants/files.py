"""Lexicon file names."""

SYNSETS_FILE = "synsets.csv"
LEMMAS_FILE = "lemmas.csv"
RELATIONS_FILE = "relations.csv"
SEMFIELD_FILE = "semfield.csv"
DOMAINS_FILE = "domains.csv"
