"""Classic algorithms on sequences, numbers and graphs."""

__version__ = "0.1.0"
__all__ = ["directed", "nqueens", "primes", "sequences", "undirected", "weighted"]