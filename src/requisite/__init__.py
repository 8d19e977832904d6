"""
requisite – presence contracts and collection builders.

Import path convention::

    from requisite.kernel.presence import require_non_absent
    from requisite.kernel.collections import build_sequence, build_set
    from requisite.kernel.errors import AbsentValueError
    from requisite.kernel.types import Nothing, Option, Some
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
