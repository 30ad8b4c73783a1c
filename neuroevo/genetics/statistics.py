"""
Per-generation fitness statistics.

Records how a population's fitness evolves so drivers can print progress,
plot trajectories and decide when to stop.
"""

from dataclasses import dataclass, asdict
from typing import List, Dict, Any, Sequence

import numpy as np

from .individual import Individual


@dataclass
class GenerationStats:
    """Fitness summary for a single generation."""
    generation: int
    min_fitness: float
    max_fitness: float
    mean_fitness: float
    std_fitness: float
    population_size: int

    @classmethod
    def from_population(
        cls,
        generation: int,
        population: Sequence[Individual],
    ) -> 'GenerationStats':
        """
        Summarize an evaluated population.

        Raises:
            ValueError: If the population is empty
        """
        if len(population) == 0:
            raise ValueError("Cannot compute statistics of an empty population")

        fitnesses = np.array([individual.fitness for individual in population], dtype=np.float64)

        return cls(
            generation=generation,
            min_fitness=float(fitnesses.min()),
            max_fitness=float(fitnesses.max()),
            mean_fitness=float(fitnesses.mean()),
            std_fitness=float(fitnesses.std()),
            population_size=len(population),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def __str__(self) -> str:
        return (
            f"gen {self.generation:4d} | "
            f"min={self.min_fitness:.4f} "
            f"max={self.max_fitness:.4f} "
            f"mean={self.mean_fitness:.4f} "
            f"std={self.std_fitness:.4f}"
        )


class EvolutionHistory:
    """
    Tracks evolution progress over generations.

    Kept in memory only; `to_dict` exists for reporting and plotting.
    """

    def __init__(self):
        self.generations: List[GenerationStats] = []
        self.fitness_trajectory: List[float] = []
        self.mean_trajectory: List[float] = []

    def record_generation(
        self,
        generation: int,
        population: Sequence[Individual],
    ) -> GenerationStats:
        """
        Record statistics for an evaluated generation.

        Args:
            generation: Generation number
            population: Population with fitness evaluated

        Returns:
            GenerationStats for this generation
        """
        stats = GenerationStats.from_population(generation, population)

        self.generations.append(stats)
        self.fitness_trajectory.append(stats.max_fitness)
        self.mean_trajectory.append(stats.mean_fitness)

        return stats

    def __len__(self) -> int:
        return len(self.generations)

    @property
    def best_fitness(self) -> float:
        """Best fitness seen in any recorded generation."""
        if not self.fitness_trajectory:
            raise ValueError("No generations recorded")
        return max(self.fitness_trajectory)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'generations': [g.to_dict() for g in self.generations],
            'fitness_trajectory': self.fitness_trajectory,
            'mean_trajectory': self.mean_trajectory,
        }

    def should_early_stop(
        self,
        patience: int = 10,
        min_improvement: float = 0.001,
    ) -> bool:
        """
        Check if evolution has stagnated.

        Args:
            patience: Generations without improvement before stopping
            min_improvement: Minimum improvement to count as progress

        Returns:
            True if the best fitness of the last `patience` generations does
            not beat the earlier best by at least `min_improvement`
        """
        if patience < 1:
            raise ValueError(f"patience must be at least 1, got {patience}")

        # Need at least patience + 1 generations to compare
        if len(self.fitness_trajectory) <= patience:
            return False

        recent_best = max(self.fitness_trajectory[-patience:])
        older_best = max(self.fitness_trajectory[:-patience])

        return recent_best - older_best < min_improvement
