"""Convex polytopes, random walks and Gaussian-cooling volume estimation."""

__version__ = "0.1.0"

__all__ = [
    "annealing",
    "gaussian",
    "hpolytope",
    "intersection",
    "known_generators",
    "point",
    "random_generators",
    "rng",
    "sdpa",
    "settings",
    "walks",
    "zonotope",
]