"""
Configuration for neuroevolution runs.

EvolutionConfig gathers every knob a driver needs: network topology,
population size, mutation parameters and the random seed. It also wires up
the standard operators so drivers don't have to.
"""

from dataclasses import dataclass, field, asdict
from typing import List, Dict, Any, Optional

import numpy as np

from .genetics.algorithm import GeneticAlgorithm
from .genetics.chromosome import Chromosome
from .genetics.operators import (
    GaussianMutation,
    RouletteWheelSelection,
    UniformCrossover,
)
from .network.network import Network, layer_sizes


@dataclass
class EvolutionConfig:
    """Configuration for an evolution run."""
    # Network shape, input layer first
    topology: List[int] = field(default_factory=lambda: [2, 4, 1])

    # Population parameters
    population_size: int = 50
    generations: int = 100

    # Mutation
    mutation_chance: float = 0.01
    mutation_coeff: float = 0.3

    # Reproducibility
    seed: Optional[int] = None

    # Early stopping (disabled when patience is None)
    early_stop_patience: Optional[int] = None
    early_stop_min_improvement: float = 0.001

    def __post_init__(self):
        """Validate configuration."""
        self.topology = layer_sizes(self.topology)

        if self.population_size < 1:
            raise ValueError(f"population_size must be at least 1, got {self.population_size}")
        if self.generations < 0:
            raise ValueError(f"generations must be non-negative, got {self.generations}")
        if not 0.0 <= self.mutation_chance <= 1.0:
            raise ValueError(f"mutation_chance {self.mutation_chance} out of range [0, 1]")
        if self.early_stop_patience is not None and self.early_stop_patience < 1:
            raise ValueError(
                f"early_stop_patience must be at least 1, got {self.early_stop_patience}"
            )

    @property
    def chromosome_length(self) -> int:
        """Number of genes encoding one network."""
        return Network.parameter_count(self.topology)

    def make_rng(self) -> np.random.Generator:
        """Random stream seeded from `seed` (fresh entropy when seed is None)."""
        return np.random.default_rng(self.seed)

    def build_algorithm(self) -> GeneticAlgorithm:
        return GeneticAlgorithm(
            RouletteWheelSelection(),
            UniformCrossover(),
            GaussianMutation(self.mutation_chance, self.mutation_coeff),
        )

    def initial_chromosomes(self, rng: np.random.Generator) -> List[Chromosome]:
        """Encode `population_size` randomly initialized networks."""
        return [
            Network.random(self.topology, rng).to_chromosome()
            for _ in range(self.population_size)
        ]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'EvolutionConfig':
        return cls(**data)
