"""Context windows around a target token."""

from __future__ import annotations

import logging
from typing import Callable

from jigsaw_wsd.constants import (
    MAX_VERB_DEFAULT,
    POS_ADJ,
    POS_ADV,
    POS_NOUN,
    POS_VERB,
    RADIUS_DEFAULT,
)
from jigsaw_wsd.wsd.tokens import Token, TokenGroup

logger = logging.getLogger(__name__)

# Target POS -> neighbour POS admitted into its context
CONTEXT_POS: dict[str, frozenset[str]] = {
    POS_VERB: frozenset({POS_NOUN}),
    POS_NOUN: frozenset({POS_NOUN}),
    POS_ADJ: frozenset({POS_ADV, POS_NOUN}),
    POS_ADV: frozenset({POS_ADJ, POS_NOUN}),
}


class ContextBuilder:
    """Builds the POS-filtered token window of a target.

    Args:
        is_stop_word: Stop-word predicate on surface forms
        radius: Tokens collected on each side
        max_verb: Verbs appended to a noun target's context on each side

    Example:
        >>> builder = ContextBuilder(lambda w: w in {"the"}, radius=2)
        >>> context = builder.build(group, 3)
        >>> [t.token for t in context]
        ['bank', 'river', 'water']
    """

    def __init__(
        self,
        is_stop_word: Callable[[str], bool],
        radius: int = RADIUS_DEFAULT,
        max_verb: int = MAX_VERB_DEFAULT,
    ):
        self.is_stop_word = is_stop_word
        self.radius = radius
        self.max_verb = max_verb

    def _admits(self, target: Token, candidate: Token) -> bool:
        if self.is_stop_word(candidate.token):
            return False
        if (target.lemma or "").lower() == (candidate.lemma or "").lower():
            return False
        return candidate.pos in CONTEXT_POS.get(target.pos, frozenset())

    def build(self, group: TokenGroup, index: int, include_target: bool = False) -> TokenGroup:
        """Build the context of group[index].

        Left neighbours are collected closest first, then the target (when
        included), then right neighbours. A noun target additionally gets
        up to max_verb verbs from each side, appended last.
        """
        target = group[index]
        context = TokenGroup()

        count = 0
        for i in range(index - 1, -1, -1):
            if count >= self.radius:
                break
            if self._admits(target, group[i]):
                context.append(group[i])
                count += 1

        if include_target:
            context.append(target)

        count = 0
        for i in range(index + 1, len(group)):
            if count >= self.radius:
                break
            if self._admits(target, group[i]):
                context.append(group[i])
                count += 1

        if target.pos == POS_NOUN and self.max_verb > 0:
            for verb in self.nearest_verbs(group, index):
                context.append(verb)

        logger.debug(f"Context of {target.token!r}: {[t.token for t in context]}")
        return context

    def nearest_verbs(self, group: TokenGroup, index: int) -> list[Token]:
        """Up to max_verb verbs scanning left, then up to max_verb scanning right."""
        verbs: list[Token] = []
        left = [group[i] for i in range(index - 1, -1, -1) if group[i].pos == POS_VERB]
        right = [group[i] for i in range(index + 1, len(group)) if group[i].pos == POS_VERB]
        verbs.extend(left[: self.max_verb])
        verbs.extend(right[: self.max_verb])
        return verbs

    def nouns(self, group: TokenGroup) -> TokenGroup:
        """Every non-stop-word noun of the group, in sentence order."""
        nouns = TokenGroup()
        for token in group:
            if token.pos == POS_NOUN and not self.is_stop_word(token.token):
                nouns.append(token)
        return nouns
