"""
Mutation operators for tours.

Each operator derives a new, independent tour from a parent through a
randomized structural edit. The parent is never modified and the child
gets its cost computed against the same cities.
"""

import logging
import random
from typing import Callable, Dict, Optional, Sequence, Tuple

from ..core.errors import InvalidConfigurationError
from ..core.tour import Tour
from .config import MutationConfig

logger = logging.getLogger(__name__)

MutationOperator = Callable[..., Tour]


def _distinct_points(rng: random.Random, upper: int, k: int) -> Tuple[int, ...]:
    """Draw k values from [0, upper) until all differ, sorted ascending."""
    while True:
        points = [rng.randrange(upper) for _ in range(k)]
        if len(set(points)) == k:
            return tuple(sorted(points))


def inversion_mutation(
    tour: Tour,
    cities,
    rng: Optional[random.Random] = None,
    points: Optional[Sequence[int]] = None,
) -> Tour:
    """
    Inversion mutation: reverse a random contiguous segment.

    Args:
        tour: Parent tour (left untouched)
        cities: Cities the tour was built against
        rng: Random source (a fresh one is created if omitted)
        points: Optional fixed pair of distinct positions in [0, n)

    Returns:
        Offspring tour with positions p0..p1 (inclusive) reversed
    """
    n = len(tour)
    if n < 2:
        raise InvalidConfigurationError(
            f"inversion needs at least 2 cities, tour has {n}"
        )

    if points is None:
        p0, p1 = _distinct_points(rng or random.Random(), n, 2)
    else:
        p0, p1 = sorted(points)
        if p0 == p1 or p0 < 0 or p1 >= n:
            raise IndexError(f"invalid inversion points {tuple(points)} for {n} cities")

    g = tour.order
    g[p0 : p1 + 1] = reversed(g[p0 : p1 + 1])
    logger.debug("inversion over [%d, %d]", p0, p1)
    return Tour(cities, g)


def three_point_mutation(
    tour: Tour,
    cities,
    rng: Optional[random.Random] = None,
    points: Optional[Sequence[int]] = None,
) -> Tour:
    """
    Three-point re-splice: move a block in front of a later cut.

    Three distinct cuts t0 < t1 < t2 are drawn from [0, n], where n marks
    the end of the tour. The block at positions t0..t1 (inclusive) is
    removed and reinserted just before position t2; with t2 == n it goes
    to the tail.

    Args:
        tour: Parent tour (left untouched)
        cities: Cities the tour was built against
        rng: Random source (a fresh one is created if omitted)
        points: Optional fixed triple of distinct cuts in [0, n]

    Returns:
        Offspring tour
    """
    n = len(tour)
    if n < 2:
        raise InvalidConfigurationError(
            f"three-point mutation needs at least 2 cities, tour has {n}"
        )

    if points is None:
        t0, t1, t2 = _distinct_points(rng or random.Random(), n + 1, 3)
    else:
        t0, t1, t2 = sorted(points)
        if len({t0, t1, t2}) != 3 or t0 < 0 or t2 > n:
            raise IndexError(f"invalid three-point cuts {tuple(points)} for {n} cities")

    g = tour.order
    child = g[:t0] + g[t1 + 1 : t2] + g[t0 : t1 + 1] + g[t2:]
    logger.debug("three-point splice with cuts (%d, %d, %d)", t0, t1, t2)
    return Tour(cities, child)


MUTATION_OPERATORS: Dict[str, MutationOperator] = {
    "inversion": inversion_mutation,
    "three_point": three_point_mutation,
}


def mutate(
    tour: Tour,
    cities,
    config: Optional[MutationConfig] = None,
    rng: Optional[random.Random] = None,
) -> Tour:
    """
    Apply one mutation operator picked according to the config weights.

    Args:
        tour: Parent tour
        cities: Cities the tour was built against
        config: Operator weights and mutation rate
        rng: Random source

    Returns:
        Offspring tour, or a copy of the parent when no mutation fires
    """
    config = config or MutationConfig()
    rng = rng or random.Random()

    unknown = sorted(set(config.weights) - set(MUTATION_OPERATORS))
    if unknown:
        raise ValueError(f"Unknown mutation operator(s): {', '.join(unknown)}")

    if rng.random() >= config.mutation_rate:
        return tour.copy()

    names = list(MUTATION_OPERATORS)
    weights = [config.weight_of(name) for name in names]
    name = rng.choices(names, weights=weights)[0]
    return MUTATION_OPERATORS[name](tour, cities, rng)
