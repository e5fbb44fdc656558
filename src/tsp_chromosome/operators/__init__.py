"""Mutation and ordering operators for tours."""

from .config import MutationConfig
from .mutation import MUTATION_OPERATORS, inversion_mutation, three_point_mutation, mutate
from .ordering import best_tour, compare_tours, costs, sort_by_cost

__all__ = [
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
