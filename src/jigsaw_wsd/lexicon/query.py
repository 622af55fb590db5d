"""Depth-bounded queries over the lexicon graph.

GraphQuery answers the structural questions the scorers ask:

- relation_closure: every node reachable through one relation type,
  with its hop depth
- min_combined_distance: shortest path length through a shared node
- common_ancestor: nearest shared node of two closures
- is_hypernym_of: hypernymy test
- related_words: surface words reachable through a relation

Traversal never raises on unknown ids; misses yield empty closures and
sentinel distances.
"""

from __future__ import annotations

import logging
from collections import deque
from functools import lru_cache
from typing import Iterable

from jigsaw_wsd.constants import (
    CLOSURE_CACHE_SIZE,
    MAX_CLOSURE_NODES,
    MAX_DEPTH,
    RelationType,
)
from jigsaw_wsd.lexicon.graph import LexiconGraph

logger = logging.getLogger(__name__)

# Returned by common_ancestor() when the closures share no node
NO_COMMON_ANCESTOR: tuple[int, None] = (MAX_DEPTH + 1, None)


class GraphQuery:
    """Relation traversal over an immutable LexiconGraph.

    Closures are memoized per instance. functools.lru_cache is thread safe,
    so one GraphQuery can serve concurrent disambiguation calls.

    Args:
        graph: Lexicon graph to traverse
        max_nodes: Node budget for a single closure traversal
        cache_size: Number of closures kept in the LRU cache

    Example:
        >>> query = GraphQuery(graph)
        >>> query.relation_closure("n002", RelationType.HYPERNYM, 16)
        (('n001', 1),)
        >>> query.min_combined_distance("n002", "n003", RelationType.HYPERNYM, 16)
        2
    """

    def __init__(
        self,
        graph: LexiconGraph,
        max_nodes: int = MAX_CLOSURE_NODES,
        cache_size: int = CLOSURE_CACHE_SIZE,
    ):
        self.graph = graph
        self.max_nodes = max_nodes
        self._closure = lru_cache(maxsize=cache_size)(self._compute_closure)

    # =========================================================================
    # CLOSURE
    # =========================================================================

    def relation_closure(
        self, synset_id: str, relation: RelationType, max_depth: int = MAX_DEPTH
    ) -> tuple[tuple[str, int], ...]:
        """Return every node reachable from synset_id through `relation`.

        Nodes are listed in breadth-first order with their hop depth
        (1..max_depth). The start node (depth 0) is implicit and never
        listed. Each node appears once, at its shallowest depth.

        Args:
            synset_id: Start synset
            relation: Relation type to follow
            max_depth: Maximum number of hops (clamped to MAX_DEPTH)

        Returns:
            Tuple of (target_id, depth) pairs; empty for unknown ids or
            max_depth < 1
        """
        depth = min(max_depth, MAX_DEPTH)
        if depth < 1 or synset_id not in self.graph:
            return ()
        return self._closure(synset_id, relation, depth)

    def _compute_closure(
        self, synset_id: str, relation: RelationType, max_depth: int
    ) -> tuple[tuple[str, int], ...]:
        result: list[tuple[str, int]] = []
        visited = {synset_id}
        queue = deque([(synset_id, 0)])
        while queue:
            node, depth = queue.popleft()
            if depth >= max_depth:
                continue
            for target in self.graph.pointers(node, relation):
                if target in visited:
                    continue
                visited.add(target)
                result.append((target, depth + 1))
                if len(result) >= self.max_nodes:
                    logger.warning(
                        f"Closure budget exhausted: {synset_id} {relation.value} "
                        f"({self.max_nodes} nodes)"
                    )
                    return tuple(result)
                queue.append((target, depth + 1))
        return tuple(result)

    def _depth_map(self, synset_id: str, relation: RelationType, max_depth: int) -> dict[str, int]:
        return dict(self.relation_closure(synset_id, relation, max_depth))

    def clear_cache(self) -> None:
        self._closure.cache_clear()

    # =========================================================================
    # DISTANCES
    # =========================================================================

    def min_combined_distance(
        self,
        synset_a: str,
        synset_b: str,
        relation: RelationType = RelationType.HYPERNYM,
        max_depth: int = MAX_DEPTH,
    ) -> int:
        """Shortest combined hop count from both synsets to a shared node.

        Only closure nodes (depth 1 and deeper) are compared; the start
        nodes themselves never count as shared. Identical synsets are at
        distance 0. A synset and its direct hypernym share no node unless
        the hypernym has a hypernym of its own (distance 3).

        Returns:
            Minimum sum of the two depths, 2*MAX_DEPTH when the closures
            are disjoint, MAX_DEPTH+1 when max_depth is negative
        """
        if max_depth < 0:
            logger.warning(f"Negative traversal depth: {max_depth}")
            return MAX_DEPTH + 1
        if synset_a == synset_b:
            return 0
        if synset_a not in self.graph or synset_b not in self.graph:
            return 2 * MAX_DEPTH

        depths_a = self._depth_map(synset_a, relation, max_depth)
        depths_b = self._depth_map(synset_b, relation, max_depth)
        if len(depths_b) < len(depths_a):
            depths_a, depths_b = depths_b, depths_a

        best = 2 * MAX_DEPTH
        for node, depth in depths_a.items():
            other = depths_b.get(node)
            if other is not None and depth + other < best:
                best = depth + other
        return best

    def common_ancestor(
        self,
        synset_a: str,
        synset_b: str,
        relation: RelationType = RelationType.HYPERNYM,
        max_depth: int = MAX_DEPTH,
    ) -> tuple[int, str | None]:
        """Heuristic nearest common node of two closures.

        The search runs once from each side: side A takes the shallowest
        node of A's closure (first in breadth-first order) that B can also
        reach, side B does the same with the roles swapped. The side with
        the lower combined depth wins; ties keep side A.

        Returns:
            (combined_depth, ancestor_id), or (MAX_DEPTH+1, None) when the
            closures share no node
        """
        if max_depth < 0:
            logger.warning(f"Negative traversal depth: {max_depth}")
            return NO_COMMON_ANCESTOR
        if synset_a not in self.graph or synset_b not in self.graph:
            return NO_COMMON_ANCESTOR

        depths_a = self._depth_map(synset_a, relation, max_depth)
        depths_b = self._depth_map(synset_b, relation, max_depth)

        side_a = _first_shared(depths_a, depths_b)
        side_b = _first_shared(depths_b, depths_a)
        if side_a is None and side_b is None:
            return NO_COMMON_ANCESTOR
        if side_b is None or (side_a is not None and side_a[0] <= side_b[0]):
            return side_a
        return side_b

    def common_min_synset(
        self,
        senses_a: Iterable[str],
        senses_b: Iterable[str],
        relation: RelationType = RelationType.HYPERNYM,
        max_depth: int = MAX_DEPTH,
    ) -> tuple[int, str | None]:
        """Best common ancestor over every pair of candidate senses.

        Pairs are visited in candidate order; only a strictly smaller
        combined depth replaces the current best.
        """
        best = NO_COMMON_ANCESTOR
        senses_b = tuple(senses_b)
        for sense_a in senses_a:
            for sense_b in senses_b:
                found = self.common_ancestor(sense_a, sense_b, relation, max_depth)
                if found[0] < best[0]:
                    best = found
        return best

    def is_hypernym_of(
        self, ancestor_id: str | None, synset_id: str, max_depth: int = MAX_DEPTH
    ) -> bool:
        """True if ancestor_id is in the hypernym closure of synset_id.

        A synset is not its own hypernym.
        """
        if ancestor_id is None or ancestor_id == synset_id:
            return False
        return any(
            node == ancestor_id
            for node, _ in self.relation_closure(synset_id, RelationType.HYPERNYM, max_depth)
        )

    # =========================================================================
    # WORDS
    # =========================================================================

    def related_words(
        self, synset_id: str, relation: RelationType, max_depth: int
    ) -> list[str]:
        """Surface words of every synset reachable through `relation`.

        Multiword underscores are rendered as spaces.

        Examples:
            >>> query.related_words("n002", RelationType.HYPERNYM, 1)
            ['financial institution']
        """
        words: list[str] = []
        for node, _ in self.relation_closure(synset_id, relation, max_depth):
            words.extend(word.replace("_", " ") for word in self.graph.words(node))
        return words


def _first_shared(
    depths: dict[str, int], others: dict[str, int]
) -> tuple[int, str] | None:
    # dicts keep breadth-first insertion order
    for node, depth in depths.items():
        other = others.get(node)
        if other is not None:
            return depth + other, node
    return None
