"""
TSP Chromosome

The candidate-solution core of a genetic search for the Traveling
Salesman Problem: a tour over a set of cities, its closed-cycle cost,
the mutation operators that derive offspring from it, and ordering of
tours by cost for selection.
"""

from .core.city import City, CitySet
from .core.errors import InvalidConfigurationError
from .core.tour import Tour, cost_of
from .operators.config import MutationConfig
from .operators.mutation import (
    MUTATION_OPERATORS,
    inversion_mutation,
    three_point_mutation,
    mutate,
)
from .operators.ordering import best_tour, compare_tours, costs, sort_by_cost

__version__ = "1.0.0"

__all__ = [
    "City",
    "CitySet",
    "InvalidConfigurationError",
    "Tour",
    "cost_of",
    "MutationConfig",
    "MUTATION_OPERATORS",
    "inversion_mutation",
    "three_point_mutation",
    "mutate",
    "best_tour",
    "compare_tours",
    "costs",
    "sort_by_cost",
]
