"""Localization services used to translate enum labels.

Label helpers never call gettext directly; they talk to a :class:`Translator`
which returns the translated text for a key, or the key itself when no
translation exists. :class:`GettextTranslator` serves compiled ``.mo``
catalogues and falls back to ``.po`` sources compiled in memory with
:mod:`polib`.
"""

from __future__ import annotations

import gettext as _gettext
import logging
import os
import threading
from collections.abc import Iterable, Mapping, Sequence
from io import BytesIO
from pathlib import Path
from typing import Protocol, runtime_checkable

import polib
from gettext import GNUTranslations, NullTranslations, _expand_lang

__all__ = [
    "Translator",
    "NullTranslator",
    "MappingTranslator",
    "GettextTranslator",
    "get_translator",
    "set_translator",
    "install",
    "translate",
]

logger = logging.getLogger(__name__)


@runtime_checkable
class Translator(Protocol):
    """Resolve translation keys into localized text."""

    def translate(self, key: str, locale: str | None = None) -> str:
        """Return the text for *key* under *locale*, or *key* when missing."""
        ...


class NullTranslator:
    """Translator that knows no translations at all."""

    def translate(self, key: str, locale: str | None = None) -> str:
        """Return *key* unchanged."""
        return key


class MappingTranslator:
    """Translator backed by in-memory ``{locale: {key: text}}`` catalogues."""

    def __init__(
        self,
        catalogues: Mapping[str, Mapping[str, str]],
        default_locale: str | None = None,
    ) -> None:
        """Store *catalogues* and the locale used when none is requested."""
        self._catalogues = {
            locale: dict(messages) for locale, messages in catalogues.items()
        }
        self.default_locale = default_locale

    def translate(self, key: str, locale: str | None = None) -> str:
        """Look *key* up in the catalogue of *locale* and its fallbacks."""
        requested = locale or self.default_locale
        if not requested:
            return key
        for candidate in _expand_languages([requested]):
            messages = self._catalogues.get(candidate)
            if messages is not None and key in messages:
                return messages[key]
        return key


class GettextTranslator:
    """Translator reading gettext catalogues for a single *domain*.

    Catalogues are looked up under ``<localedir>/<lang>/LC_MESSAGES`` and
    cached per requested locale. When *languages* is omitted the default
    locale is detected from the usual gettext environment variables.
    """

    def __init__(
        self,
        domain: str,
        localedir: str | os.PathLike[str],
        languages: Iterable[str] | None = None,
        *,
        record_missing: bool = True,
    ) -> None:
        """Prepare a translator for *domain* without loading catalogues yet."""
        self.domain = domain
        self.localedir = Path(localedir)
        self.languages = _prepare_language_list(languages)
        self.record_missing = record_missing
        self.missing: set[str] = set()
        self._catalogues: dict[tuple[str, ...], NullTranslations] = {}
        self._lock = threading.Lock()

    def translation(self, locale: str | None = None) -> NullTranslations:
        """Return the gettext catalogue serving *locale*."""
        requested = (
            tuple(_expand_languages([locale])) if locale else tuple(self.languages)
        )
        with self._lock:
            catalogue = self._catalogues.get(requested)
            if catalogue is None:
                catalogue = _load_translation(self.domain, self.localedir, requested)
                self._catalogues[requested] = catalogue
        return catalogue

    def translate(self, key: str, locale: str | None = None) -> str:
        """Translate *key* for *locale* returning *key* when it is unknown."""
        if not key:
            return key
        text = self.translation(locale).gettext(key)
        if text == key:
            logger.debug("No translation for %r (locale=%s)", key, locale)
            if self.record_missing:
                with self._lock:
                    self.missing.add(key)
        return text

    def flush_missing(self, path: str | os.PathLike[str]) -> int:
        """Append collected missing keys to the ``.po`` file at *path*.

        Keys already present in the file are not duplicated. Returns the
        number of entries added.
        """
        target = Path(path)
        with self._lock:
            pending = sorted(self.missing)
            self.missing.clear()
        catalog = polib.pofile(str(target)) if target.exists() else polib.POFile()
        if not catalog.metadata:
            catalog.metadata = {"Content-Type": "text/plain; charset=UTF-8"}
        added = 0
        for key in pending:
            if catalog.find(key) is not None:
                continue
            catalog.append(polib.POEntry(msgid=key, msgstr=""))
            added += 1
        target.parent.mkdir(parents=True, exist_ok=True)
        catalog.save(str(target))
        logger.debug("Flushed %d missing translation(s) to %s", added, target)
        return added


_TRANSLATOR: Translator = NullTranslator()


def get_translator() -> Translator:
    """Return the process-wide translator."""
    return _TRANSLATOR


def set_translator(translator: Translator) -> Translator:
    """Install *translator* process-wide and return the previous one."""
    global _TRANSLATOR
    previous = _TRANSLATOR
    _TRANSLATOR = translator
    return previous


def install(
    domain: str,
    localedir: str | os.PathLike[str],
    languages: Iterable[str] | None = None,
) -> GettextTranslator:
    """Create a :class:`GettextTranslator` and make it the process default."""
    translator = GettextTranslator(domain, localedir, languages)
    set_translator(translator)
    logger.debug(
        "Installed gettext translator domain=%s localedir=%s languages=%s",
        domain,
        translator.localedir,
        translator.languages,
    )
    return translator


def translate(key: str, locale: str | None = None) -> str:
    """Translate *key* with the process-wide translator."""
    return _TRANSLATOR.translate(key, locale)


def _load_translation(
    domain: str,
    localedir: Path,
    languages: Sequence[str],
) -> NullTranslations:
    try:
        translation = _gettext.translation(
            domain,
            localedir=str(localedir),
            languages=list(languages) or None,
            fallback=True,
        )
    except (OSError, ValueError) as exc:
        logger.warning("Skipping unreadable catalogue for %s: %s", domain, exc)
        translation = _load_mo_translation(domain, localedir, languages)
    if type(translation) is NullTranslations:
        fallback = _load_po_translation(domain, localedir, languages)
        if fallback is not None:
            translation = fallback
    return translation


def _load_mo_translation(
    domain: str,
    localedir: Path,
    languages: Sequence[str],
) -> NullTranslations:
    for language in languages:
        try:
            translation = _gettext.translation(
                domain,
                localedir=str(localedir),
                languages=[language],
                fallback=True,
            )
        except (OSError, ValueError) as exc:
            logger.warning("Skipping unreadable catalogue for %s: %s", language, exc)
            continue
        if type(translation) is not NullTranslations:
            return translation
    return NullTranslations()


def _prepare_language_list(languages: Iterable[str] | None) -> list[str]:
    if languages is None:
        return _languages_from_environment()
    return _expand_languages(languages)


def _languages_from_environment() -> list[str]:
    raw: list[str] = []
    for name in ("LANGUAGE", "LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(name)
        if not value:
            continue
        raw.extend(token.strip() for token in value.split(":") if token.strip())
    return _expand_languages(raw)


def _expand_languages(languages: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    expanded: list[str] = []
    for language in languages:
        if not language:
            continue
        for candidate in _expand_lang(language):
            if candidate and candidate not in seen:
                seen.add(candidate)
                expanded.append(candidate)
    return expanded


def _load_po_translation(
    domain: str,
    localedir: Path,
    languages: Sequence[str],
) -> NullTranslations | None:
    for language in languages:
        po_path = localedir / language / "LC_MESSAGES" / f"{domain}.po"
        if not po_path.exists():
            continue
        try:
            catalog = polib.pofile(str(po_path))
        except (OSError, ValueError) as exc:
            logger.warning("Skipping unreadable catalogue %s: %s", po_path, exc)
            continue
        logger.debug("Compiled %s in memory", po_path)
        return GNUTranslations(BytesIO(catalog.to_binary()))
    return None
