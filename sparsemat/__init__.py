"""Compressed sparse matrices and vectors, triplet assembly, permutations, products and Cuthill-McKee orderings."""

__version__ = "0.1.0"

__all__ = ["csmat", "etree", "special", "triplet", "permutation", "prod", "smmp", "ordering"]