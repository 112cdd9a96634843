"""Listings and lookup tables derived from the cases of an enum type."""

from __future__ import annotations

from enum import Enum
from typing import Any

from ..errors import MissingCapabilityError
from .descriptor import describe
from .labels import has_label_capability, label

__all__ = [
    "HasEnumCollections",
    "names",
    "values",
    "name_values",
    "value_names",
    "to_select_array",
    "to_options_array",
]


def names(enum_cls: type[Enum]) -> list[str]:
    """Return case names in definition order."""
    return [case.name for case in describe(enum_cls).cases]


def values(enum_cls: type[Enum]) -> list[Any]:
    """Return backing values in definition order.

    Unbacked enums have no backing values, so their names are returned.
    """
    return [case.scalar for case in describe(enum_cls).cases]


def name_values(enum_cls: type[Enum]) -> dict[str, Any]:
    """Return a ``name -> value`` mapping."""
    return dict(zip(names(enum_cls), values(enum_cls), strict=True))


def value_names(enum_cls: type[Enum]) -> dict[Any, str]:
    """Return a ``value -> name`` mapping."""
    return dict(zip(values(enum_cls), names(enum_cls), strict=True))


def to_select_array(enum_cls: type[Enum]) -> dict[Any, str]:
    """Return a ``value -> label`` mapping suitable for select inputs.

    Raises :class:`MissingCapabilityError` when *enum_cls* does not mix in
    :class:`~ectype.core.labels.HasLabel`.
    """
    descriptor = describe(enum_cls)
    if not has_label_capability(enum_cls):
        raise MissingCapabilityError(enum_cls, "label")
    return {case.scalar: label(case.member) for case in descriptor.cases}


def to_options_array(enum_cls: type[Enum]) -> list[dict[str, Any]]:
    """Return one ``{"name", "value"[, "label"]}`` record per case.

    The ``label`` field is only present when *enum_cls* has label capability.
    """
    descriptor = describe(enum_cls)
    with_labels = has_label_capability(enum_cls)
    options: list[dict[str, Any]] = []
    for case in descriptor.cases:
        option: dict[str, Any] = {"name": case.name, "value": case.scalar}
        if with_labels:
            option["label"] = label(case.member)
        options.append(option)
    return options


class HasEnumCollections:
    """Mixin exposing the collection helpers as enum classmethods."""

    @classmethod
    def names(cls) -> list[str]:
        """Return case names in definition order."""
        return names(cls)  # type: ignore[arg-type]

    @classmethod
    def values(cls) -> list[Any]:
        """Return backing values, or names for unbacked enums."""
        return values(cls)  # type: ignore[arg-type]

    @classmethod
    def name_values(cls) -> dict[str, Any]:
        """Return a ``name -> value`` mapping."""
        return name_values(cls)  # type: ignore[arg-type]

    @classmethod
    def value_names(cls) -> dict[Any, str]:
        """Return a ``value -> name`` mapping."""
        return value_names(cls)  # type: ignore[arg-type]

    @classmethod
    def to_select_array(cls) -> dict[Any, str]:
        """Return a ``value -> label`` mapping; requires ``HasLabel``."""
        return to_select_array(cls)  # type: ignore[arg-type]

    @classmethod
    def to_options_array(cls) -> list[dict[str, Any]]:
        """Return option records with an optional ``label`` field."""
        return to_options_array(cls)  # type: ignore[arg-type]
