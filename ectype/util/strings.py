"""String helpers for turning identifiers into display text."""

from __future__ import annotations

import re

__all__ = ["headline", "split_words"]

_UPPER_NOT_FIRST = re.compile(r"(?<!^)[A-Z]")
_WORD_START = re.compile(r"(^|\s)(\S)")


def split_words(identifier: str) -> str:
    """Return *identifier* with word boundaries turned into spaces.

    A space is inserted before every uppercase ASCII letter except the first
    character, and ``_``/``-`` separators become spaces. Case is preserved.
    """
    spaced = _UPPER_NOT_FIRST.sub(lambda match: f" {match.group(0)}", identifier)
    return spaced.replace("_", " ").replace("-", " ")


def headline(identifier: str) -> str:
    """Convert *identifier* into a title-cased, human-readable label.

    ``OrderStatus`` becomes ``"Order Status"`` and ``awaiting_payment``
    becomes ``"Awaiting Payment"``. Runs of whitespace are kept as they are.
    """
    lowered = split_words(identifier).lower()
    return _WORD_START.sub(
        lambda match: match.group(1) + match.group(2).upper(), lowered
    )
