"""
Matplotlib-based visualization for evolution runs.

These functions create static plots for analysis and documentation.
"""

import numpy as np
from typing import Optional, Sequence, Tuple

# Matplotlib imports with non-GUI backend
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from ..genetics.individual import Individual
from ..genetics.statistics import EvolutionHistory


def plot_fitness_history(
    history: EvolutionHistory,
    figsize: Tuple[int, int] = (8, 5),
    title: Optional[str] = None,
    ax: Optional[plt.Axes] = None,
) -> plt.Figure:
    """
    Plot best, mean and worst fitness per generation.

    Args:
        history: Recorded evolution history
        figsize: Figure size
        title: Plot title
        ax: Existing axes to plot on

    Returns:
        matplotlib Figure
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    generations = [g.generation for g in history.generations]
    best = [g.max_fitness for g in history.generations]
    mean = np.array([g.mean_fitness for g in history.generations])
    std = np.array([g.std_fitness for g in history.generations])
    worst = [g.min_fitness for g in history.generations]

    ax.plot(generations, best, color='#e74c3c', linewidth=2, label='Best')
    ax.plot(generations, mean, color='#3498db', linewidth=2, label='Mean')
    ax.fill_between(generations, mean - std, mean + std, color='#3498db', alpha=0.2)
    ax.plot(generations, worst, color='#95a5a6', linewidth=1, linestyle='--', label='Worst')

    ax.set_xlabel('Generation')
    ax.set_ylabel('Fitness')
    ax.set_title(title or 'Fitness over Generations')
    ax.legend(loc='lower right')
    ax.grid(True, alpha=0.3)

    return fig


def plot_gene_distribution(
    population: Sequence[Individual],
    bins: int = 50,
    figsize: Tuple[int, int] = (8, 4),
    title: Optional[str] = None,
    ax: Optional[plt.Axes] = None,
) -> plt.Figure:
    """
    Histogram of every gene in the population.

    Useful to spot runaway weights when the mutation coefficient is large.
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    genes = np.concatenate([individual.chromosome.genes for individual in population])

    ax.hist(genes, bins=bins, color='#2ecc71', edgecolor='white', alpha=0.8)
    ax.axvline(0, color='black', linewidth=1, linestyle='--')
    ax.set_xlabel('Gene value')
    ax.set_ylabel('Count')
    ax.set_title(title or f'Gene Distribution ({len(population)} individuals)')

    return fig
