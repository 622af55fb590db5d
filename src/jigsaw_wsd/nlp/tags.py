"""Mapping of external POS tagsets into the four-way lexicon tagset."""

from jigsaw_wsd.constants import (
    CONTENT_POS,
    ITALIAN_PREFIX_TO_MWN_POS,
    PENN_TO_MWN_POS,
    POS_OTHER,
    SPACY_TO_MWN_POS,
)

TAGSET_PENN = "penn"
TAGSET_UNIVERSAL = "universal"
TAGSET_TANL = "tanl"


def map_pos_tag(tag: str | None, tagset: str = TAGSET_PENN) -> str:
    """Map a tagger tag to 'n', 'v', 'a', 'r' or 'o'.

    Tags already in the four-way tagset pass through unchanged. Italian
    TANL tags are matched by prefix and only when that tagset is asked
    for, since their one-letter prefixes collide with Penn tags.

    Args:
        tag: Tag produced by a POS tagger
        tagset: One of "penn", "universal", "tanl"

    Returns:
        Lexicon POS letter, "o" for everything else

    Examples:
        >>> map_pos_tag("NNS")
        'n'
        >>> map_pos_tag("PROPN", "universal")
        'n'
        >>> map_pos_tag("VAif", "tanl")
        'v'
        >>> map_pos_tag("DT")
        'o'
    """
    if not tag:
        return POS_OTHER
    if tag in CONTENT_POS or tag == POS_OTHER:
        return tag
    if tagset == TAGSET_TANL:
        for prefix, pos in ITALIAN_PREFIX_TO_MWN_POS:
            if tag.startswith(prefix):
                return pos
        return POS_OTHER
    if tagset == TAGSET_UNIVERSAL:
        return SPACY_TO_MWN_POS.get(tag, POS_OTHER)
    return PENN_TO_MWN_POS.get(tag, POS_OTHER)
