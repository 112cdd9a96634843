"""Human-readable and translated labels for enum cases."""

from __future__ import annotations

import logging
import threading
import weakref
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Self, TypeVar

from .. import i18n
from ..errors import EnumUsageError
from ..i18n import Translator
from ..util.strings import headline
from .descriptor import describe, ensure_enum, scalar_of

__all__ = [
    "LabelOverride",
    "HasLabel",
    "label_overrides",
    "get_override",
    "label",
    "translated_label",
    "translation_key",
    "has_label_capability",
]

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=type[Enum])


@dataclass(frozen=True, slots=True)
class LabelOverride:
    """Custom display text, or translation key, attached to an enum case."""

    text: str
    is_key: bool = False


_OVERRIDES: weakref.WeakKeyDictionary[type[Enum], dict[str, LabelOverride]] = (
    weakref.WeakKeyDictionary()
)
_OVERRIDES_LOCK = threading.Lock()


def label_overrides(**overrides: LabelOverride | str) -> Callable[[E], E]:
    """Attach :class:`LabelOverride` records to enum cases as a class decorator.

    Keyword names are case names; a plain string is shorthand for a literal
    override::

        @label_overrides(Active=LabelOverride("status.active", is_key=True))
        class Status(HasLabel, Enum):
            Draft = auto()
            Active = auto()
    """
    normalised = {
        name: value if isinstance(value, LabelOverride) else LabelOverride(value)
        for name, value in overrides.items()
    }

    def decorate(enum_cls: E) -> E:
        descriptor = describe(enum_cls)
        unknown = sorted(name for name in normalised if not descriptor.has_case(name))
        if unknown:
            raise EnumUsageError(
                f"{descriptor.type_name} has no case(s) named {', '.join(unknown)}"
            )
        blank = sorted(
            name
            for name, override in normalised.items()
            if override.is_key and not override.text.strip()
        )
        if blank:
            raise EnumUsageError(
                f"{descriptor.type_name} has empty translation key(s) for {', '.join(blank)}"
            )
        with _OVERRIDES_LOCK:
            _OVERRIDES.setdefault(enum_cls, {}).update(normalised)
        logger.debug(
            "Registered %d label override(s) for %s", len(normalised), enum_cls.__name__
        )
        return enum_cls

    return decorate


def get_override(member: Enum) -> LabelOverride | None:
    """Return the override attached to *member*, if any."""
    return _OVERRIDES.get(type(member), {}).get(member.name)


def has_label_capability(enum_cls: type[Enum]) -> bool:
    """Return ``True`` when *enum_cls* mixes in :class:`HasLabel`."""
    return issubclass(ensure_enum(enum_cls), HasLabel)


def label(member: Enum) -> str:
    """Return the display label of *member*.

    An attached override wins and is returned verbatim; otherwise the case
    name is split into title-cased words.
    """
    override = get_override(member)
    if override is not None:
        return override.text
    return headline(member.name)


def translation_key(member: Enum) -> str:
    """Return the synthesized translation key of *member*.

    The key is ``<type name>.<scalar>`` in lower case, where the scalar is the
    backing value for backed enums and the case name otherwise.
    """
    return f"{type(member).__name__.lower()}.{str(scalar_of(member)).lower()}"


def translated_label(
    member: Enum,
    locale: str | None = None,
    *,
    translator: Translator | None = None,
) -> str:
    """Return the label of *member* translated for *locale*."""
    if translator is None:
        translator = i18n.get_translator()
    override = get_override(member)
    if override is not None:
        if not override.is_key:
            return override.text
        translated = translator.translate(override.text, locale)
        if translated == override.text:
            return headline(member.name)
        return translated

    key = translation_key(member)
    translated = translator.translate(key, locale)
    if translated != key:
        return translated
    return label(member)


class HasLabel:
    """Mixin giving enum members ``label()`` and ``trans()`` methods.

    Put it before :class:`enum.Enum` in the bases of the enum class.
    """

    def label(self) -> str:
        """Return the display label of this case."""
        return label(self)  # type: ignore[arg-type]

    def trans(
        self,
        locale: str | None = None,
        translator: Translator | None = None,
    ) -> str:
        """Return the translated label of this case."""
        return translated_label(self, locale, translator=translator)  # type: ignore[arg-type]

    @classmethod
    def from_label(cls, text: str) -> Self | None:
        """Return the first case whose label equals *text*, else ``None``."""
        for member in cls:  # type: ignore[attr-defined]
            if label(member) == text:
                return member
        return None
