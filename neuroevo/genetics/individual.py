"""
The Individual capability.

The genetic algorithm never looks at phenotypes. It only needs population
members that report a fitness, expose their chromosome, and can be rebuilt
from a child chromosome. Any class with that shape qualifies; no base class
is required.
"""

from typing import Protocol, TypeVar, runtime_checkable

from .chromosome import Chromosome


I = TypeVar('I', bound='Individual')


@runtime_checkable
class Individual(Protocol):
    """
    Structural interface for population members.

    Attributes:
        fitness: Scalar fitness, higher is better. Roulette-wheel selection
            requires non-negative values.
        chromosome: The member's genetic encoding.
    """

    @property
    def fitness(self) -> float: ...

    @property
    def chromosome(self) -> Chromosome: ...

    @classmethod
    def create(cls, chromosome: Chromosome) -> 'Individual':
        """Build a fresh member from a (child) chromosome."""
        ...
