"""
Mutation configuration.

Defines the tunables used when picking a mutation operator for a tour.
"""

from dataclasses import dataclass, field
from typing import Dict


def _default_weights() -> Dict[str, float]:
    return {"inversion": 0.5, "three_point": 0.5}


@dataclass(frozen=True)
class MutationConfig:
    """
    Configuration for the mutation dispatcher.

    Attributes:
        weights: Relative weight per operator name; operators not listed
            get weight 0
        mutation_rate: Probability that any mutation is applied
    """

    weights: Dict[str, float] = field(default_factory=_default_weights)
    mutation_rate: float = 1.0

    def __post_init__(self) -> None:
        """Validate weights and rate."""
        if any(w < 0 for w in self.weights.values()):
            raise ValueError("operator weights must be non-negative")
        if sum(self.weights.values()) <= 0:
            raise ValueError("at least one operator weight must be positive")
        if not 0.0 <= self.mutation_rate <= 1.0:
            raise ValueError("mutation_rate must be in [0, 1]")

    def weight_of(self, name: str) -> float:
        """Weight of the operator registered under `name`."""
        return self.weights.get(name, 0.0)
