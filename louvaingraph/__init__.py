"""CSR graphs and building blocks for Louvain-style community detection."""

__version__ = "0.1.0"

__all__ = [
    "clustering",
    "edges",
    "graph",
    "heap",
    "metrics",
    "similarity",
    "vertexfollowing",
]