"""
Chromosome representation for neuroevolution.

A Chromosome is a fixed-length, ordered sequence of real-valued genes. It is
the unit that crossover and mutation operate on, and it is usually built
from (and decoded back into) the flattened parameters of a Network.
"""

import operator
from typing import Iterable, Iterator, List

import numpy as np


class Chromosome:
    """
    Ordered, fixed-length container of float genes.

    Genes can be read and overwritten in place, but the length never changes
    after construction.
    """

    def __init__(self, genes: Iterable[float]):
        self._genes = np.fromiter(genes, dtype=np.float64)

    @property
    def genes(self) -> np.ndarray:
        """Read-only view of the genes."""
        view = self._genes.view()
        view.flags.writeable = False
        return view

    def __len__(self) -> int:
        return len(self._genes)

    def __getitem__(self, index: int) -> float:
        return float(self._genes[operator.index(index)])

    def __setitem__(self, index: int, value: float) -> None:
        self._genes[operator.index(index)] = value

    def __iter__(self) -> Iterator[float]:
        return iter(self._genes.tolist())

    def to_list(self) -> List[float]:
        """Decompose into a plain list of genes."""
        return self._genes.tolist()

    def copy(self) -> 'Chromosome':
        return Chromosome(self._genes)

    def approx_eq(
        self,
        other: 'Chromosome',
        rel_tol: float = 1e-6,
        abs_tol: float = 1e-9,
    ) -> bool:
        """
        Compare genes element-wise within a tolerance.

        Operators accumulate rounding error, so exact comparison is rarely
        what you want.
        """
        if len(self) != len(other):
            return False
        return bool(np.allclose(self._genes, other._genes, rtol=rel_tol, atol=abs_tol))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Chromosome):
            return NotImplemented
        return self.approx_eq(other)

    __hash__ = None

    def __repr__(self) -> str:
        preview = ', '.join(f'{g:.3f}' for g in self._genes[:5])
        if len(self._genes) > 5:
            preview += ', ...'
        return f"Chromosome(len={len(self)}, genes=[{preview}])"
