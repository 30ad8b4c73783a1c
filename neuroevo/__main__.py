"""
Entry point for running neuroevo as a module.

Usage:
    python -m neuroevo    # Show help
"""

from . import __version__


USAGE = f"""
neuroevo {__version__} - Evolving Neural Networks with a Genetic Algorithm
=====================================================================

Usage:
    python examples/evolve_xor.py                 Evolve networks that solve XOR
    python examples/evolve_xor.py --plot out.png  Also save a fitness plot

Run the test suite with:
    python -m pytest tests/ -v
"""


def main():
    print(USAGE)


if __name__ == '__main__':
    main()
