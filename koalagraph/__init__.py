"""Graph algorithms: vertex coloring, perfect-graph coloring, exact minimum dominating sets and maximum flow."""

__version__ = "0.1.0"