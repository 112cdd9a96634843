"""Make enum cases callable."""

from __future__ import annotations

from typing import Any


class Invokable:
    """Mixin returning the backing value when a case is called.

    Only meaningful for backed enums; calling a case of a plain ``Enum``
    returns its opaque value.
    """

    def __call__(self) -> Any:
        """Return the backing value of this case."""
        return self.value  # type: ignore[attr-defined]
