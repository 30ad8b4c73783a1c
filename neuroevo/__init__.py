"""
neuroevo - evolving feed-forward neural networks with a genetic algorithm.

A population member carries a Chromosome (flat list of floats) that decodes
into a Network. After the caller scores every member, the GeneticAlgorithm
breeds a complete new generation via roulette-wheel selection, uniform
crossover and gaussian mutation.

Example usage:
    from neuroevo import EvolutionConfig, Network

    config = EvolutionConfig(topology=[2, 4, 1], population_size=30, seed=7)
    rng = config.make_rng()
    ga = config.build_algorithm()

    population = [Brain.create(c) for c in config.initial_chromosomes(rng)]
    for generation in range(config.generations):
        evaluate(population)  # sets each member's fitness
        population = ga.evolve(population, rng)

where `Brain` is any class implementing the Individual capability
(`create`, `fitness`, `chromosome`).
"""

from .genetics import (
    Chromosome,
    Individual,
    SelectionMethod,
    CrossoverMethod,
    MutationMethod,
    RouletteWheelSelection,
    UniformCrossover,
    GaussianMutation,
    GeneticAlgorithm,
    GenerationStats,
    EvolutionHistory,
)
from .network import LayerTopology, Neuron, Layer, Network
from .config import EvolutionConfig

__version__ = "0.1.0"

__all__ = [
    'Chromosome',
    'Individual',
    'SelectionMethod',
    'CrossoverMethod',
    'MutationMethod',
    'RouletteWheelSelection',
    'UniformCrossover',
    'GaussianMutation',
    'GeneticAlgorithm',
    'GenerationStats',
    'EvolutionHistory',
    'LayerTopology',
    'Neuron',
    'Layer',
    'Network',
    'EvolutionConfig',
]
