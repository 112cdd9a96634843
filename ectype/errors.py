"""Exception hierarchy shared by the enum helpers."""

from __future__ import annotations


class EctypeError(Exception):
    """Base class for errors raised by :mod:`ectype`."""


class EnumUsageError(EctypeError, TypeError):
    """Raised when a helper is called with an argument it cannot serve."""


class MissingCapabilityError(EnumUsageError):
    """Raised when an enum type lacks a capability required by an operation."""

    def __init__(self, enum_cls: type, capability: str) -> None:
        """Remember the offending *enum_cls* and the missing *capability*."""
        self.enum_cls = enum_cls
        self.capability = capability
        super().__init__(
            f"{capability} capability required: "
            f"{getattr(enum_cls, '__name__', enum_cls)!s} does not provide it"
        )
