"""Zero forcing, forts, propagation time and throttling of graphs."""

__version__ = "0.1.0"

__all__ = [
    "constructions",
    "forts",
    "graph",
    "milp",
    "nauty",
    "propagation",
    "zero_forcing",
]