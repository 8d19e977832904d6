"""Kernel value types — public re-export surface.

Modules:
  option.py — Some, Nothing, Option, option_of
"""

from requisite.kernel.types.option import Nothing, Option, Some, option_of

__all__ = [
    "Nothing",
    "Option",
    "Some",
    "option_of",
]
