"""Typed ectype settings with Pydantic validation."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import tomllib
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .i18n import GettextTranslator, NullTranslator, Translator


class LocalizationSettings(BaseModel):
    """Where enum label translations come from."""

    model_config = ConfigDict(validate_assignment=True)

    domain: str = "messages"
    localedir: str | None = None
    default_locale: str | None = None
    record_missing: bool = True

    @field_validator("domain", mode="before")
    @classmethod
    def _normalise_domain(cls, value: str | None) -> str:
        if value is None:
            return "messages"
        text = str(value).strip()
        return text or "messages"

    @field_validator("localedir", "default_locale", mode="before")
    @classmethod
    def _normalise_optional_text(cls, value: str | Path | None) -> str | None:
        if value is None:
            return None
        text = str(value).strip()
        return text or None


class EctypeSettings(BaseModel):
    """Aggregate settings for the enum helpers."""

    model_config = ConfigDict(validate_assignment=True)

    localization: LocalizationSettings = Field(default_factory=LocalizationSettings)
    log_level: int = Field(default=logging.INFO, ge=0)

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalise_log_level(cls, value: int | str) -> int:
        if isinstance(value, bool):
            raise ValueError("Boolean is not a valid log level")
        if isinstance(value, str):
            name = value.strip().upper()
            level = logging.getLevelName(name)
            if isinstance(level, int):
                return level
            return int(name)
        return value

    def build_translator(self) -> Translator:
        """Return the translator described by the localization settings."""
        loc = self.localization
        if loc.localedir is None:
            return NullTranslator()
        languages = [loc.default_locale] if loc.default_locale else None
        return GettextTranslator(
            loc.domain,
            loc.localedir,
            languages,
            record_missing=loc.record_missing,
        )

    def to_dict(self) -> dict:
        """Return settings as a plain dictionary."""
        return self.model_dump()


def load_settings(path: str | Path) -> EctypeSettings:
    """Load :class:`EctypeSettings` from *path* with validation.

    Format is detected by file extension: ``.toml`` uses :mod:`tomllib`,
    everything else is treated as JSON. Validation errors are wrapped into
    :class:`ValueError`.
    """
    p = Path(path)
    with p.open("rb") as fh:
        data = tomllib.load(fh) if p.suffix.lower() == ".toml" else json.load(fh)
    try:
        return EctypeSettings.model_validate(data)
    except ValidationError as exc:
        raise ValueError(str(exc)) from exc
