"""Text processing collaborators and tagset mapping.

SpacyTextProcessor lives in jigsaw_wsd.nlp.spacy_processing and is not
imported here so that spaCy is only loaded when it is used.
"""

from jigsaw_wsd.nlp.tags import TAGSET_PENN, TAGSET_TANL, TAGSET_UNIVERSAL, map_pos_tag
from jigsaw_wsd.nlp.text_processing import (
    SimpleTextProcessor,
    TextProcessor,
    load_lemma_dictionary,
    load_word_list,
    normalize_text,
)

__all__ = [
    "TAGSET_PENN",
    "TAGSET_TANL",
    "TAGSET_UNIVERSAL",
    "SimpleTextProcessor",
    "TextProcessor",
    "load_lemma_dictionary",
    "load_word_list",
    "map_pos_tag",
    "normalize_text",
]
