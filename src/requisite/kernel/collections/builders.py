"""Collection builders – materialise containers from positional arguments."""

from __future__ import annotations

from typing import TypeVar

T = TypeVar("T")


def build_set(*items: T) -> set[T]:
    """Return a new set holding each distinct item once.

    Items are not filtered, so ``None`` is kept like any other element.
    """
    return set(items)


def build_sequence(*items: T) -> list[T]:
    """Return a new list with *items* in order, duplicates included."""
    return list(items)


__all__ = ["build_sequence", "build_set"]
