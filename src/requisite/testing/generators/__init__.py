"""Testing generators – property-based strategies for presence checks."""
from requisite.testing.generators.strategies import absent_values, options, present_values

__all__ = ["absent_values", "options", "present_values"]
