"""Vector math, curve-graph state, particle simulation, .ray scene output and frame image I/O for simple animated models."""

__version__ = "0.1.0"