"""
Generational genetic algorithm.

One call to `evolve` turns a population into the next generation:
1. Select two parents (fitness-proportionate, with replacement)
2. Cross their chromosomes into one child
3. Mutate the child in place
4. Rebuild a population member from the child chromosome
5. Repeat until the new population is as large as the old one

The old population is replaced entirely; nothing is carried over.
"""

from typing import List, Sequence

import numpy as np

from .individual import I
from .operators import CrossoverMethod, MutationMethod, SelectionMethod


class GeneticAlgorithm:
    """
    Composes selection, crossover and mutation into one generational step.

    The algorithm holds no per-run state: the caller owns the population and
    feeds each generation back in after evaluating fitness.
    """

    def __init__(
        self,
        selection_method: SelectionMethod,
        crossover_method: CrossoverMethod,
        mutation_method: MutationMethod,
    ):
        self.selection_method = selection_method
        self.crossover_method = crossover_method
        self.mutation_method = mutation_method

    def evolve(self, population: Sequence[I], rng: np.random.Generator) -> List[I]:
        """
        Breed the next generation.

        Random draws are consumed strictly in this order for every child:
        parent A selection, parent B selection, crossover, mutation.

        Args:
            population: Current, fitness-evaluated population (not modified)
            rng: Random stream

        Returns:
            New list of individuals, same size as `population`
        """
        new_population = []

        for _ in range(len(population)):
            parent_a = self.selection_method.select(population, rng).chromosome
            parent_b = self.selection_method.select(population, rng).chromosome

            child = self.crossover_method.crossover(parent_a, parent_b, rng)
            self.mutation_method.mutate(child, rng)

            new_population.append(type(population[0]).create(child))

        return new_population

    def __repr__(self) -> str:
        return (
            f"GeneticAlgorithm(selection={self.selection_method!r}, "
            f"crossover={self.crossover_method!r}, "
            f"mutation={self.mutation_method!r})"
        )
