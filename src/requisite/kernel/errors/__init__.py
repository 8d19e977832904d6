"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    └── AbsentValueError     (presence.py)
"""

from requisite.kernel.errors.base import BaseError
from requisite.kernel.errors.presence import AbsentValueError

__all__ = [
    "AbsentValueError",
    "BaseError",
]
