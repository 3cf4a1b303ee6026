"""Conway's Game of Life in the terminal, forwards and backwards by parent search."""

__version__ = "0.1.0"