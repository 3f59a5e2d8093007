"""Sparse adjacency helpers shared by the lattice builder and the rewirer."""

from .coordinates import edge_coordinates
from .edge_map import EdgeMap

__all__ = ["edge_coordinates", "EdgeMap"]
