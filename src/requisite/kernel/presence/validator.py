"""Presence validators – assert a value is not absent at an API boundary.

A value is *absent* when it is ``None`` or a :class:`~requisite.kernel.types.Nothing`.
Falsy values (``0``, ``""``, ``[]``) and ``Some(...)`` are present.

Message and fallback producers are zero-argument callables. They run only on
the absent path, and at most once per call.
"""

from __future__ import annotations

from typing import Callable, TypeVar

from requisite.kernel.errors.presence import AbsentValueError
from requisite.kernel.types.option import Nothing

T = TypeVar("T")


def is_absent(value: object) -> bool:
    """Return ``True`` for ``None`` and ``Nothing()``."""
    return value is None or isinstance(value, Nothing)


def is_present(value: object) -> bool:
    """Negation of :func:`is_absent`."""
    return not is_absent(value)


def require_non_absent(
    value: T | None,
    message: str | Callable[[], object] | None = None,
) -> T:
    """Return *value* unchanged, raising ``AbsentValueError`` when it is absent.

    *message* is either a literal diagnostic or a producer called once, and
    only when *value* is absent. Non-string messages are converted with
    ``str()``. An absent producer yields an error with no message.

    Example::

        order = require_non_absent(repo.get(order_id), lambda: f"order {order_id}")
    """
    if is_present(value):
        return value  # type: ignore[return-value]
    if is_absent(message):
        raise AbsentValueError()
    if callable(message):
        raise AbsentValueError(str(message()))
    raise AbsentValueError(str(message))


def require_non_absent_else_compute(
    value: T | None,
    producer: Callable[[], T | None] | None,
) -> T:
    """Return *value* when present, otherwise the result of *producer*.

    Raises:
        AbsentValueError: *value* is absent and either *producer* is absent
            or it produced an absent value. No message is attached.
    """
    if is_present(value):
        return value  # type: ignore[return-value]
    if is_absent(producer):
        raise AbsentValueError()
    computed = producer()  # type: ignore[misc]
    if is_absent(computed):
        raise AbsentValueError()
    return computed  # type: ignore[return-value]


def require_non_absent_else(value: T | None, default: T | None) -> T:
    """Eager counterpart of :func:`require_non_absent_else_compute`."""
    if is_present(value):
        return value  # type: ignore[return-value]
    if is_absent(default):
        raise AbsentValueError()
    return default  # type: ignore[return-value]


__all__ = [
    "is_absent",
    "is_present",
    "require_non_absent",
    "require_non_absent_else",
    "require_non_absent_else_compute",
]
