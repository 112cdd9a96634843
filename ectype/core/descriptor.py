"""Explicit descriptors of enum types.

Every helper in :mod:`ectype.core` works on an :class:`EnumDescriptor`
instead of poking at enum internals on its own. The descriptor records the
ordered cases of a type, whether the type is *backed* (its members carry a
scalar value of a mixed-in data type such as ``str`` or ``int``) and the
scalar that stands for each case.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..errors import EnumUsageError


@dataclass(frozen=True, slots=True)
class CaseDescriptor:
    """Describe a single enum case."""

    name: str
    value: Any
    scalar: Any
    member: Enum


@dataclass(frozen=True, slots=True)
class EnumDescriptor:
    """Describe an enum type and its cases in definition order."""

    enum_cls: type[Enum]
    type_name: str
    backed: bool
    cases: tuple[CaseDescriptor, ...]

    def case(self, name: str) -> CaseDescriptor:
        """Return the case called *name* or raise :class:`EnumUsageError`."""
        for case in self.cases:
            if case.name == name:
                return case
        raise EnumUsageError(f"{self.type_name} has no case named {name!r}")

    def has_case(self, name: str) -> bool:
        """Return ``True`` when the type defines a case called *name*."""
        return any(case.name == name for case in self.cases)


def is_backed(enum_cls: type[Enum]) -> bool:
    """Return ``True`` when *enum_cls* mixes in a scalar data type."""
    return getattr(enum_cls, "_member_type_", object) is not object


def ensure_enum(enum_cls: Any) -> type[Enum]:
    """Return *enum_cls* when it is an enum type, raise otherwise."""
    if not (isinstance(enum_cls, type) and issubclass(enum_cls, Enum)):
        raise EnumUsageError(f"expected an Enum subclass, got {enum_cls!r}")
    return enum_cls


def scalar_of(member: Enum) -> Any:
    """Return the backing value of *member*, or its name when unbacked."""
    return member.value if is_backed(type(member)) else member.name


def describe(enum_cls: type[Enum]) -> EnumDescriptor:
    """Build an :class:`EnumDescriptor` for *enum_cls*.

    Aliases are skipped, so the cases follow definition order exactly as
    iterating over the enum does.
    """
    ensure_enum(enum_cls)
    backed = is_backed(enum_cls)
    cases = tuple(
        CaseDescriptor(
            name=member.name,
            value=member.value,
            scalar=member.value if backed else member.name,
            member=member,
        )
        for member in enum_cls
    )
    return EnumDescriptor(
        enum_cls=enum_cls,
        type_name=enum_cls.__name__,
        backed=backed,
        cases=cases,
    )
