"""Kernel presence – null-validation helpers."""

from requisite.kernel.presence.validator import (
    is_absent,
    is_present,
    require_non_absent,
    require_non_absent_else,
    require_non_absent_else_compute,
)

__all__ = [
    "is_absent",
    "is_present",
    "require_non_absent",
    "require_non_absent_else",
    "require_non_absent_else_compute",
]
