"""Relation (pointer) type constants.

Relation types follow the MultiWordNet pointer inventory. Raw relation
tables encode them either by pointer symbol (e.g. "@" for hypernym) or by
name (e.g. "hypernym").

Reference: MultiWordNet relation tables (common_relation, english_relation,
italian_relation).
"""

from enum import Enum


class RelationType(str, Enum):
    """Typed edge between two synsets (or two lemmas for lexical relations)."""

    HYPERNYM = "hypernym"
    HYPONYM = "hyponym"
    MEMBER_OF = "member_of"
    HAS_MEMBER = "has_member"
    SUBSTANCE_OF = "substance_of"
    HAS_SUBSTANCE = "has_substance"
    PART_OF = "part_of"
    HAS_PART = "has_part"
    ATTRIBUTE = "attribute"
    NEAREST = "nearest"
    COMPOSED_OF = "composed_of"
    COMPOSES = "composes"
    ENTAILMENT = "entailment"
    CAUSES = "causes"
    ALSO_SEE = "also_see"
    VERB_GROUP = "verb_group"
    SIMILAR_TO = "similar_to"
    PARTICIPLE = "participle"
    PERTAINS_TO = "pertains_to"
    DERIVED_FROM = "derived_from"


# =============================================================================
# Pointer symbols
# =============================================================================

POINTER_SYMBOLS: dict[str, RelationType] = {
    "@": RelationType.HYPERNYM,
    "~": RelationType.HYPONYM,
    "#m": RelationType.MEMBER_OF,
    "#s": RelationType.SUBSTANCE_OF,
    "#p": RelationType.PART_OF,
    "%m": RelationType.HAS_MEMBER,
    "%s": RelationType.HAS_SUBSTANCE,
    "%p": RelationType.HAS_PART,
    "=": RelationType.ATTRIBUTE,
    "|": RelationType.NEAREST,
    "+c": RelationType.COMPOSED_OF,
    "-c": RelationType.COMPOSES,
    "*": RelationType.ENTAILMENT,
    ">": RelationType.CAUSES,
    "^": RelationType.ALSO_SEE,
    "$": RelationType.VERB_GROUP,
    "&": RelationType.SIMILAR_TO,
    "<": RelationType.PARTICIPLE,
    "\\": RelationType.DERIVED_FROM,
}

# Forward relations whose inverse is synthesized at load time
REVERSE_RELATIONS: dict[RelationType, RelationType] = {
    RelationType.HYPERNYM: RelationType.HYPONYM,
    RelationType.MEMBER_OF: RelationType.HAS_MEMBER,
    RelationType.SUBSTANCE_OF: RelationType.HAS_SUBSTANCE,
    RelationType.PART_OF: RelationType.HAS_PART,
}

# Relations between lemmas rather than synsets
LEXICAL_RELATIONS: frozenset[RelationType] = frozenset(
    {RelationType.COMPOSED_OF, RelationType.COMPOSES}
)


# =============================================================================
# Target-gloss expansion sets (per POS)
# =============================================================================

VERB_GLOSS_RELATIONS: tuple[RelationType, ...] = (
    RelationType.HYPERNYM,
    RelationType.HYPONYM,
    RelationType.CAUSES,
    RelationType.ENTAILMENT,
    RelationType.PARTICIPLE,
    RelationType.NEAREST,
    RelationType.SIMILAR_TO,
    RelationType.ALSO_SEE,
)

NOUN_GLOSS_RELATIONS: tuple[RelationType, ...] = (
    RelationType.HYPERNYM,
    RelationType.HYPONYM,
    RelationType.PART_OF,
    RelationType.MEMBER_OF,
    RelationType.HAS_MEMBER,
    RelationType.HAS_PART,
    RelationType.SUBSTANCE_OF,
    RelationType.HAS_SUBSTANCE,
    RelationType.COMPOSED_OF,
    RelationType.COMPOSES,
    RelationType.NEAREST,
    RelationType.SIMILAR_TO,
    RelationType.ALSO_SEE,
)

ADJ_GLOSS_RELATIONS: tuple[RelationType, ...] = (
    RelationType.ATTRIBUTE,
    RelationType.NEAREST,
    RelationType.SIMILAR_TO,
    RelationType.ALSO_SEE,
    RelationType.PERTAINS_TO,
    RelationType.DERIVED_FROM,
)

ADV_GLOSS_RELATIONS: tuple[RelationType, ...] = (
    RelationType.NEAREST,
    RelationType.SIMILAR_TO,
    RelationType.ALSO_SEE,
    RelationType.PERTAINS_TO,
    RelationType.DERIVED_FROM,
)


def translate_relation(code: str) -> RelationType | None:
    """Translate a pointer symbol or relation name into a RelationType.

    Args:
        code: Pointer symbol ("@", "#p", ...) or relation name ("hypernym")

    Returns:
        RelationType, or None if the code is not recognized

    Examples:
        >>> translate_relation("@")
        <RelationType.HYPERNYM: 'hypernym'>
        >>> translate_relation("part_of")
        <RelationType.PART_OF: 'part_of'>
        >>> translate_relation("!") is None
        True
    """
    if code is None:
        return None
    code = str(code).strip()
    if code in POINTER_SYMBOLS:
        return POINTER_SYMBOLS[code]
    try:
        return RelationType(code.lower())
    except ValueError:
        return None
