"""
City model for the chromosome core.

The tour only needs an indexable, fixed-size collection of cities that
can report the distance between two of them. This module provides a
Euclidean implementation backed by numpy positions and a networkx graph.
"""

import math
from dataclasses import dataclass
from itertools import combinations
from typing import Iterator, Sequence, Tuple

import numpy as np
import networkx as nx


@dataclass(frozen=True)
class City:
    """
    A city placed on the plane.

    Attributes:
        x: Horizontal coordinate
        y: Vertical coordinate
    """

    x: float
    y: float

    def distance(self, other: "City") -> float:
        """Euclidean distance to another city."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def __iter__(self):
        """Allow unpacking as (x, y)."""
        return iter((self.x, self.y))


class CitySet:
    """
    Fixed-size collection of cities addressed by integer index.

    Attributes:
        positions: Array of shape (n, 2) holding city coordinates
    """

    def __init__(self, positions):
        """
        Initialize the city set.

        Args:
            positions: Sequence of (x, y) pairs or an (n, 2) array
        """
        arr = np.asarray(positions, dtype=float)
        if arr.size == 0:
            arr = arr.reshape(0, 2)
        self._validate_positions(arr)

        self._positions = arr
        self._cities = tuple(City(float(x), float(y)) for x, y in arr)
        self._distance_matrix = None
        self._graph = None

    @classmethod
    def random(cls, num_cities: int, *, seed: int = 42) -> "CitySet":
        """
        Place cities uniformly at random in the unit square.

        Args:
            num_cities: Number of cities
            seed: Random seed for reproducibility

        Returns:
            New CitySet
        """
        if num_cities < 0:
            raise ValueError("num_cities must be non-negative")
        rng = np.random.default_rng(seed)
        return cls(rng.random(size=(num_cities, 2)))

    @staticmethod
    def _validate_positions(arr: np.ndarray) -> None:
        """Validate the coordinate array."""
        if arr.ndim != 2 or arr.shape[1] != 2:
            raise ValueError(f"positions must have shape (n, 2), got {arr.shape}")
        if not np.all(np.isfinite(arr)):
            raise ValueError("positions must be finite")

    @property
    def positions(self) -> np.ndarray:
        """Return a copy of the coordinate array."""
        return self._positions.copy()

    @property
    def distance_matrix(self) -> np.ndarray:
        """Pairwise Euclidean distances, computed on first access."""
        if self._distance_matrix is None:
            diff = self._positions[:, np.newaxis, :] - self._positions[np.newaxis, :, :]
            self._distance_matrix = np.sqrt(np.sum(np.square(diff), axis=-1))
        return self._distance_matrix

    def _build_graph(self) -> nx.Graph:
        if self._graph is None:
            G = nx.Graph()
            for i, city in enumerate(self._cities):
                G.add_node(i, pos=(city.x, city.y))
            dist = self.distance_matrix
            for c1, c2 in combinations(range(len(self._cities)), 2):
                G.add_edge(c1, c2, dist=float(dist[c1, c2]))
            self._graph = G
        return self._graph

    @property
    def graph(self) -> nx.Graph:
        """Complete graph with `pos` node and `dist` edge attributes."""
        return nx.Graph(self._build_graph())

    def get_position(self, index: int) -> Tuple[float, float]:
        """Get (x, y) position of a city."""
        city = self[index]
        return (city.x, city.y)

    def distance(self, a: int, b: int) -> float:
        """Distance between the cities at indices a and b."""
        return self[a].distance(self[b])

    def cycle_length(self, order: Sequence[int]) -> float:
        """
        Length of the closed cycle visiting cities in the given order.

        Walks the networkx graph, so it serves as an independent check
        of the cost cached by a tour.

        Args:
            order: City indices in visiting order

        Returns:
            Total distance including the edge back to the first city
        """
        if len(order) < 2:
            return 0.0
        path = list(order) + [order[0]]
        return float(nx.path_weight(self._build_graph(), path, weight="dist"))

    def __len__(self) -> int:
        return len(self._cities)

    def __getitem__(self, index: int) -> City:
        if not 0 <= index < len(self._cities):
            raise IndexError(f"city {index} out of range for {len(self._cities)} cities")
        return self._cities[index]

    def __iter__(self) -> Iterator[City]:
        return iter(self._cities)

    def __repr__(self) -> str:
        return f"CitySet(n={len(self._cities)})"
