"""Clique-density densest subgraph search: exact minimum-cut search and a core-based heuristic."""

__version__ = "0.1.0"