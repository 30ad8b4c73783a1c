"""
Genetic algorithm over fixed-length float chromosomes.

Key components:
- Chromosome: ordered vector of genes
- Individual: capability every population member provides
- Operators: roulette-wheel selection, uniform crossover, gaussian mutation
- GeneticAlgorithm: one full generational replacement step
- EvolutionHistory: per-generation fitness statistics
"""

from .chromosome import Chromosome
from .individual import Individual
from .operators import (
    SelectionMethod,
    CrossoverMethod,
    MutationMethod,
    RouletteWheelSelection,
    UniformCrossover,
    GaussianMutation,
)
from .algorithm import GeneticAlgorithm
from .statistics import GenerationStats, EvolutionHistory

__all__ = [
    'Chromosome',
    'Individual',
    # Operator interfaces
    'SelectionMethod',
    'CrossoverMethod',
    'MutationMethod',
    # Operators
    'RouletteWheelSelection',
    'UniformCrossover',
    'GaussianMutation',
    # Orchestration
    'GeneticAlgorithm',
    'GenerationStats',
    'EvolutionHistory',
]
