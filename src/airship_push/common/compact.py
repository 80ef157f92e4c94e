"""Common – FieldMap helpers."""
from __future__ import annotations

from typing import Any, Mapping, Sequence

FieldMap = dict[str, Any]


def compact(fields: Mapping[str, Any]) -> FieldMap:
    """Return a copy of *fields* without the entries whose value is ``None``.

    Insertion order is preserved. Falsy values other than ``None``
    (``0``, ``False``, ``""``, ``{}``) are kept.
    """
    return {key: value for key, value in fields.items() if value is not None}


def first_or_none(values: Sequence[Any] | None) -> Any:
    if not values:
        return None
    return values[0]


__all__ = ["FieldMap", "compact", "first_or_none"]
