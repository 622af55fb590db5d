"""Numeric primitives shared by the sense scorers."""

import math
from functools import lru_cache

from jigsaw_wsd.constants import GAUSS_FLOOR, MAX_DEPTH

# -log(1/MAX_DEPTH): divisor of the normalized similarity
_SIM_NORM = -math.log(1 / MAX_DEPTH)

# Similarity of identical synsets (combined distance 0)
MAX_SIMILARITY = -math.log(1 / (2 * MAX_DEPTH))


def gaussian_weight(pos_a: int, pos_b: int, sigma: float) -> float:
    """Positional weight of two tokens, maximal at distance 0.

    4 * N(pos_a - pos_b; 0, sigma) + k, with k = 1 - 2/sqrt(2*pi)
    keeping the weight positive at any distance.

    Examples:
        >>> round(gaussian_weight(3, 3, 1.0), 4)
        1.7979
    """
    x = pos_a - pos_b
    density = (1 / (sigma * math.sqrt(2 * math.pi))) * math.exp(-(x * x) / (2 * sigma * sigma))
    return 4 * density + GAUSS_FLOOR


@lru_cache(maxsize=1024)
def harmonic(n: int, exponent: float) -> float:
    """Generalized harmonic number H(n, s) = sum_{i=1..n} i^-s."""
    return sum(1 / (i**exponent) for i in range(1, n + 1))


def zipf_prior(rank: int, total: int, exponent: float) -> float:
    """Zipfian prior of the sense at 0-based `rank` among `total` senses.

    Values over rank = 0..total-1 sum to 1.
    """
    h = harmonic(total, exponent)
    if h == 0:
        return 0.0
    return 1 / (((rank + 1) ** exponent) * h)


def depth_similarity(distance: int) -> float:
    """Similarity of two synsets from their combined hypernym distance.

    Distances beyond MAX_DEPTH map to a constant floor (the normalized
    value at MAX_DEPTH + 1).
    """
    if distance == 0:
        return MAX_SIMILARITY
    if distance <= MAX_DEPTH:
        return -math.log(distance / (2 * MAX_DEPTH))
    return -math.log((MAX_DEPTH + 1) / (2 * MAX_DEPTH)) / _SIM_NORM


def normalized_depth_similarity(distance: int) -> float:
    """depth_similarity scaled by -log(1/MAX_DEPTH); used by the verb scorer."""
    if distance == 0:
        return MAX_SIMILARITY / _SIM_NORM
    if distance <= MAX_DEPTH:
        return -math.log(distance / (2 * MAX_DEPTH)) / _SIM_NORM
    return -math.log((MAX_DEPTH + 1) / (2 * MAX_DEPTH)) / _SIM_NORM
