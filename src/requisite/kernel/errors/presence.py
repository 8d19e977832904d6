"""Presence errors – a required value was absent."""

from __future__ import annotations

from typing import Any

from requisite.kernel.errors.base import BaseError


class AbsentValueError(BaseError):
    """A value required to be present was ``None`` or ``Nothing()``.

    ``message`` stays ``None`` when the caller supplied no diagnostic.
    """

    default_code = "absent_value"

    def __init__(self, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


__all__ = ["AbsentValueError"]
