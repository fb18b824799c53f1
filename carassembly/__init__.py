"""Console game for assembling a car from parts and checking whether the parts fit together."""

__version__ = "1.0.0"