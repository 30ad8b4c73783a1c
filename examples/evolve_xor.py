#!/usr/bin/env python3
"""
Evolve feed-forward networks that compute XOR.

Every individual is a network decoded from its chromosome. Fitness is
1 / (1 + mean squared error) over the four XOR cases, so it is always
positive and reaches 1.0 for a perfect network.

Usage:
    python examples/evolve_xor.py [options]

Options:
    --population N   Population size (default: 100)
    --generations N  Number of generations (default: 200)
    --hidden N       Hidden layer width (default: 4)
    --seed N         Random seed for reproducibility
    --plot PATH      Save a fitness history plot to PATH
"""

import argparse
import sys
import time
from pathlib import Path

import numpy as np

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from neuroevo.config import EvolutionConfig
from neuroevo.genetics.chromosome import Chromosome
from neuroevo.genetics.statistics import EvolutionHistory
from neuroevo.network.network import Network


XOR_INPUTS = np.array([[0.0, 0.0], [0.0, 1.0], [1.0, 0.0], [1.0, 1.0]])
XOR_TARGETS = np.array([0.0, 1.0, 1.0, 0.0])


class XorBrain:
    """Population member whose phenotype is an XOR-approximating network."""

    topology = [2, 4, 1]

    def __init__(self, chromosome: Chromosome):
        self.chromosome = chromosome
        self.network = Network.from_chromosome(self.topology, chromosome)
        self.fitness = 0.0

    @classmethod
    def create(cls, chromosome: Chromosome) -> 'XorBrain':
        return cls(chromosome)

    def evaluate(self) -> float:
        outputs = np.array([self.network.propagate(x)[0] for x in XOR_INPUTS])
        mse = float(np.mean((outputs - XOR_TARGETS) ** 2))
        self.fitness = 1.0 / (1.0 + mse)
        return self.fitness


def parse_args():
    parser = argparse.ArgumentParser(
        description='Evolve neural networks that solve XOR'
    )
    parser.add_argument(
        '--population', type=int, default=100,
        help='Population size (default: 100)'
    )
    parser.add_argument(
        '--generations', type=int, default=200,
        help='Number of generations (default: 200)'
    )
    parser.add_argument(
        '--hidden', type=int, default=4,
        help='Hidden layer width (default: 4)'
    )
    parser.add_argument(
        '--seed', type=int, default=None,
        help='Random seed for reproducibility'
    )
    parser.add_argument(
        '--plot', type=str, default=None,
        help='Save fitness history plot to this path'
    )
    return parser.parse_args()


def print_banner():
    print("=" * 70)
    print("   NEUROEVO - Evolving XOR")
    print("=" * 70)


def print_config(config: EvolutionConfig):
    print("\nConfiguration:")
    print(f"   Topology:           {config.topology}")
    print(f"   Genes per network:  {config.chromosome_length}")
    print(f"   Population size:    {config.population_size}")
    print(f"   Generations:        {config.generations}")
    print(f"   Mutation chance:    {config.mutation_chance}")
    print(f"   Mutation coeff:     {config.mutation_coeff}")
    print(f"   Seed:               {config.seed}")


def main():
    args = parse_args()

    print_banner()

    config = EvolutionConfig(
        topology=[2, args.hidden, 1],
        population_size=args.population,
        generations=args.generations,
        seed=args.seed,
        early_stop_patience=50,
    )
    XorBrain.topology = config.topology
    print_config(config)

    rng = config.make_rng()
    ga = config.build_algorithm()
    history = EvolutionHistory()

    population = [XorBrain.create(c) for c in config.initial_chromosomes(rng)]

    print("\n   Starting evolution...")
    start_time = time.time()

    for generation in range(1, config.generations + 1):
        for brain in population:
            brain.evaluate()

        stats = history.record_generation(generation, population)
        if generation % 10 == 0 or generation == 1:
            print(f"   {stats}")

        if history.should_early_stop(
            patience=config.early_stop_patience,
            min_improvement=config.early_stop_min_improvement,
        ):
            print(f"   Early stop: no improvement in {config.early_stop_patience} generations")
            break

        population = ga.evolve(population, rng)

    elapsed = time.time() - start_time

    for brain in population:
        brain.evaluate()
    best = max(population, key=lambda brain: brain.fitness)
    print("\n   Results:")
    print("   --------")
    print(f"   Generations completed: {len(history)}")
    print(f"   Best fitness:          {best.fitness:.4f}")
    print(f"   Runtime:               {elapsed:.1f}s")
    print("\n   Best network on XOR:")
    for x, target in zip(XOR_INPUTS, XOR_TARGETS):
        output = best.network.propagate(x)[0]
        print(f"   {x.astype(int).tolist()} -> {output:.3f} (target {target:.0f})")

    if args.plot:
        from neuroevo.visualization.plots import plot_fitness_history

        fig = plot_fitness_history(history, title='XOR Fitness')
        fig.savefig(args.plot, dpi=150, bbox_inches='tight')
        print(f"\n   Saved: {args.plot}")


if __name__ == '__main__':
    main()
