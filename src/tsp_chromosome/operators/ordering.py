"""
Ordering of tours by cost.

Provides the comparison used for selection and an in-place exchange sort
cheap enough to run on every generation of a small population.
"""

import logging
from typing import List, MutableSequence, Optional, Sequence

from ..core.tour import Tour

logger = logging.getLogger(__name__)


def compare_tours(a: Tour, b: Tour) -> int:
    """
    Compare two tours by cost.

    Returns:
        -1 if a is cheaper, 1 if b is cheaper, 0 on equal cost
    """
    return a.compare_to(b)


def sort_by_cost(tours: MutableSequence[Tour], count: Optional[int] = None) -> None:
    """
    Sort the first `count` tours by ascending cost, in place.

    Repeats adjacent-pair passes until one makes no swap. The sort is
    stable and allocates nothing; entries past `count` are left alone.

    Args:
        tours: Tours to reorder
        count: How many leading entries to sort (default: all)
    """
    if count is None:
        count = len(tours)
    if not 0 <= count <= len(tours):
        raise IndexError(f"cannot sort {count} tours out of {len(tours)}")

    passes = 0
    swapped = True
    while swapped:
        swapped = False
        passes += 1
        for i in range(count - 1):
            if tours[i].cost > tours[i + 1].cost:
                tours[i], tours[i + 1] = tours[i + 1], tours[i]
                swapped = True
    logger.debug("sorted %d tours in %d passes", count, passes)


def best_tour(tours: Sequence[Tour]) -> Tour:
    """
    Return the cheapest tour (the first one on ties).

    Args:
        tours: Non-empty sequence of tours

    Returns:
        Tour with minimum cost
    """
    if not tours:
        raise ValueError("best_tour() needs at least one tour")
    best = tours[0]
    for tour in tours[1:]:
        if tour.cost < best.cost:
            best = tour
    return best


def costs(tours: Sequence[Tour]) -> List[float]:
    """Costs of the given tours, in order."""
    return [t.cost for t in tours]
