"""Kernel collections – fixed-content container builders."""

from requisite.kernel.collections.builders import build_sequence, build_set

__all__ = ["build_sequence", "build_set"]
