"""
Genetic operators: selection, crossover, and mutation.

Each operator family is a narrow interface (a Protocol) with one concrete
strategy:
- RouletteWheelSelection picks parents proportionally to fitness
- UniformCrossover mixes two parents gene by gene
- GaussianMutation nudges genes by a bounded random amount

Every operator takes the random stream as an explicit argument. The order in
which draws are consumed is part of each operator's contract, so a fixed seed
always reproduces the same offspring.
"""

from typing import Protocol, Sequence

import numpy as np

from .chromosome import Chromosome
from .individual import I


# =============================================================================
# Selection Operators
# =============================================================================

class SelectionMethod(Protocol):
    def select(self, population: Sequence[I], rng: np.random.Generator) -> I: ...


class RouletteWheelSelection:
    """
    Fitness-proportionate selection.

    The probability of picking member i is fitness(i) / sum(fitness). Members
    are not removed, so the same individual can be chosen any number of
    times (including as both parents of one child).
    """

    def select(self, population: Sequence[I], rng: np.random.Generator) -> I:
        """
        Pick one member of the population.

        Args:
            population: Non-empty sequence of individuals
            rng: Random stream (one draw is consumed)

        Returns:
            The selected individual (not a copy)

        Raises:
            ValueError: If the population is empty, a fitness is negative or
                not finite, or the fitnesses sum to zero
        """
        if len(population) == 0:
            raise ValueError("got an empty population")

        weights = np.array([individual.fitness for individual in population], dtype=np.float64)
        if not np.all(np.isfinite(weights)):
            raise ValueError("fitness values must be finite")
        if np.any(weights < 0):
            raise ValueError(f"fitness values must be non-negative, got min {weights.min()}")

        total = weights.sum()
        if total <= 0:
            raise ValueError("at least one individual must have positive fitness")

        index = rng.choice(len(population), p=weights / total)
        return population[int(index)]

    def __repr__(self) -> str:
        return "RouletteWheelSelection()"


# =============================================================================
# Crossover Operators
# =============================================================================

class CrossoverMethod(Protocol):
    def crossover(
        self,
        parent_a: Chromosome,
        parent_b: Chromosome,
        rng: np.random.Generator,
    ) -> Chromosome: ...


class UniformCrossover:
    """
    Uniform crossover producing a single child.

    For every position one fair coin is flipped: heads takes the gene from
    parent A, tails from parent B.
    """

    def crossover(
        self,
        parent_a: Chromosome,
        parent_b: Chromosome,
        rng: np.random.Generator,
    ) -> Chromosome:
        """
        Args:
            parent_a: First parent
            parent_b: Second parent, same length as parent_a
            rng: Random stream (one draw per gene)

        Returns:
            New child chromosome of the parents' length
        """
        if len(parent_a) != len(parent_b):
            raise ValueError(
                f"Parent lengths differ: {len(parent_a)} != {len(parent_b)}"
            )

        return Chromosome(
            a if rng.random() < 0.5 else b
            for a, b in zip(parent_a, parent_b)
        )

    def __repr__(self) -> str:
        return "UniformCrossover()"


# =============================================================================
# Mutation Operators
# =============================================================================

class MutationMethod(Protocol):
    def mutate(self, child: Chromosome, rng: np.random.Generator) -> None: ...


class GaussianMutation:
    """
    Bounded random perturbation of genes, applied in place.

    For every gene a sign is drawn first, then the gene is perturbed with
    probability `chance` by `sign * coeff * U[0, 1)`. The sign draw happens
    even when the gene is left alone.

    Args:
        chance: Probability that a given gene is perturbed, in [0, 1]
        coeff: Scale of the perturbation (any real value)
    """

    def __init__(self, chance: float, coeff: float):
        if not 0.0 <= chance <= 1.0:
            raise ValueError(f"Mutation chance {chance} out of range [0, 1]")

        self.chance = float(chance)
        self.coeff = float(coeff)

    def mutate(self, child: Chromosome, rng: np.random.Generator) -> None:
        for i in range(len(child)):
            sign = -1.0 if rng.random() < 0.5 else 1.0

            if rng.random() < self.chance:
                child[i] += sign * self.coeff * rng.random()

    def __repr__(self) -> str:
        return f"GaussianMutation(chance={self.chance}, coeff={self.coeff})"
