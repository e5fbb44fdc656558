"""
Tour representation for the Traveling Salesman Problem.

A tour (the chromosome of the genetic search) is a permutation of city
indices together with the cached cost of visiting the cities in that
order and returning to the start.
"""

import random
from typing import Iterator, List, Optional, Sequence

from .errors import InvalidConfigurationError


def cost_of(cities, order: Sequence[int]) -> float:
    """
    Compute the closed-cycle cost of visiting cities in the given order.

    Args:
        cities: Indexable collection of cities exposing `distance(other)`
        order: City indices in visiting order

    Returns:
        Sum of consecutive distances plus the return to the first city
    """
    n = len(order)
    if n == 0:
        return 0.0

    for city in order:
        if not 0 <= city < len(cities):
            raise IndexError(f"city {city} out of range for {len(cities)} cities")

    cost = 0.0
    for i in range(n - 1):
        cost += cities[order[i]].distance(cities[order[i + 1]])

    # Return home
    cost += cities[order[0]].distance(cities[order[n - 1]])
    return cost


class Tour:
    """
    A candidate TSP solution: visiting order plus its cost.

    The tour owns its order buffer exclusively. Single-position and bulk
    setters do not refresh the cost; callers must follow them with
    `calculate_cost` before reading `cost` again.

    Attributes:
        cost: Cached closed-cycle cost of the current order
    """

    __slots__ = ("_order", "_cost")

    def __init__(self, cities, order: Sequence[int]):
        """
        Build a tour from an explicit order and compute its cost.

        The order is copied but not checked for being a permutation.

        Args:
            cities: Indexable collection of cities
            order: City indices in visiting order, one per city
        """
        self._order: List[int] = [0] * len(cities)
        self._cost = 0.0
        self.set_cities(order)
        self.calculate_cost(cities)

    @classmethod
    def from_order(cls, cities, order: Sequence[int]) -> "Tour":
        """Build a tour visiting cities in the given order."""
        return cls(cities, order)

    @classmethod
    def random(cls, cities, rng: Optional[random.Random] = None) -> "Tour":
        """
        Build a tour with a uniformly random visiting order.

        Args:
            cities: Indexable collection of cities
            rng: Random source (a fresh one is created if omitted)

        Returns:
            New tour with its cost computed
        """
        n = len(cities)
        if n == 0:
            raise InvalidConfigurationError("cannot build a tour over zero cities")
        rng = rng or random.Random()

        order = list(range(n))
        rng.shuffle(order)
        return cls(cities, order)

    def calculate_cost(self, cities) -> float:
        """
        Recompute and cache the cost of the current order.

        Args:
            cities: Indexable collection of cities

        Returns:
            The refreshed cost
        """
        self._cost = cost_of(cities, self._order)
        return self._cost

    @property
    def cost(self) -> float:
        """Cached cost of the tour."""
        return self._cost

    @property
    def order(self) -> List[int]:
        """Copy of the visiting order."""
        return list(self._order)

    def _check_position(self, index: int) -> None:
        if not 0 <= index < len(self._order):
            raise IndexError(
                f"position {index} out of range for tour of {len(self._order)} cities"
            )

    def get_city(self, index: int) -> int:
        """Get the city visited at the given position."""
        self._check_position(index)
        return self._order[index]

    def set_city(self, index: int, value: int) -> None:
        """Place a city at the given position (cost is not refreshed)."""
        self._check_position(index)
        self._order[index] = value

    def set_cities(self, order: Sequence[int]) -> None:
        """
        Replace the whole visiting order (cost is not refreshed).

        Args:
            order: New order; must hold exactly one entry per position
        """
        if len(order) != len(self._order):
            raise IndexError(
                f"order has {len(order)} entries, tour holds {len(self._order)}"
            )
        self._order[:] = order

    def is_valid(self) -> bool:
        """Check that the order is a permutation of [0, n)."""
        return sorted(self._order) == list(range(len(self._order)))

    def copy(self) -> "Tour":
        """Create an independent copy sharing no buffers."""
        clone = Tour.__new__(Tour)
        clone._order = list(self._order)
        clone._cost = self._cost
        return clone

    def compare_to(self, other: "Tour") -> int:
        """
        Compare two tours by cost.

        Returns:
            Negative if this tour is cheaper, positive if dearer, 0 on ties
        """
        if self._cost < other._cost:
            return -1
        if self._cost > other._cost:
            return 1
        return 0

    def __lt__(self, other: "Tour") -> bool:
        if not isinstance(other, Tour):
            return NotImplemented
        return self._cost < other._cost

    def __le__(self, other: "Tour") -> bool:
        if not isinstance(other, Tour):
            return NotImplemented
        return self._cost <= other._cost

    def __gt__(self, other: "Tour") -> bool:
        if not isinstance(other, Tour):
            return NotImplemented
        return self._cost > other._cost

    def __ge__(self, other: "Tour") -> bool:
        if not isinstance(other, Tour):
            return NotImplemented
        return self._cost >= other._cost

    def __len__(self) -> int:
        return len(self._order)

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._order))

    def __repr__(self) -> str:
        return f"Tour({len(self._order)} cities, cost={self._cost:.3f})"
