"""Project-wide constants."""

from .columns import *  # noqa: F401,F403
from .defaults import *  # noqa: F401,F403
from .files import *  # noqa: F401,F403
from .pos_tags import *  # noqa: F401,F403
from .relations import (  # noqa: F401
    ADJ_GLOSS_RELATIONS,
    ADV_GLOSS_RELATIONS,
    LEXICAL_RELATIONS,
    NOUN_GLOSS_RELATIONS,
    POINTER_SYMBOLS,
    REVERSE_RELATIONS,
    VERB_GLOSS_RELATIONS,
    RelationType,
    translate_relation,
)
from .stop_words import STOP_WORDS  # noqa: F401
