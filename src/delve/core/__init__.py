from .random import RandomSource, WeightedDistribution

__all__ = [
    "RandomSource",
    "WeightedDistribution",
]
