"""Kernel – 100% framework-agnostic building blocks."""

from requisite.kernel.collections import build_sequence, build_set
from requisite.kernel.errors import AbsentValueError, BaseError
from requisite.kernel.presence import (
    is_absent,
    is_present,
    require_non_absent,
    require_non_absent_else,
    require_non_absent_else_compute,
)

__all__ = [
    "AbsentValueError",
    "BaseError",
    "build_sequence",
    "build_set",
    "is_absent",
    "is_present",
    "require_non_absent",
    "require_non_absent_else",
    "require_non_absent_else_compute",
]
