"""Extract translation catalogues for enum labels.

The entries are the keys :func:`~ectype.core.labels.translated_label` looks
up at runtime, so a generated ``.po`` file lists exactly what translators
need to fill in.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from enum import Enum
from pathlib import Path

import polib

from ..util.strings import headline
from .descriptor import describe
from .labels import get_override, label, translation_key

logger = logging.getLogger(__name__)


def translation_entries(enum_cls: type[Enum]) -> list[tuple[str, str]]:
    """Return ``(msgid, fallback label)`` pairs for the cases of *enum_cls*.

    Cases with a literal override are never translated and are skipped.
    """
    entries: list[tuple[str, str]] = []
    for case in describe(enum_cls).cases:
        override = get_override(case.member)
        if override is None:
            entries.append((translation_key(case.member), label(case.member)))
        elif override.is_key:
            entries.append((override.text, headline(case.name)))
    return entries


def build_catalog(
    enum_classes: Iterable[type[Enum]],
    *,
    language: str | None = None,
) -> polib.POFile:
    """Return a ``.po`` catalogue with an empty entry per translation key."""
    catalog = polib.POFile()
    catalog.metadata = {
        "Content-Type": "text/plain; charset=UTF-8",
        "Content-Transfer-Encoding": "8bit",
    }
    if language:
        catalog.metadata["Language"] = language
    for enum_cls in enum_classes:
        for msgid, fallback in translation_entries(enum_cls):
            if catalog.find(msgid) is not None:
                continue
            catalog.append(
                polib.POEntry(
                    msgid=msgid,
                    msgstr="",
                    tcomment=fallback,
                    occurrences=[(f"{enum_cls.__module__}.{enum_cls.__qualname__}", "")],
                )
            )
    return catalog


def write_catalog(
    path: str | os.PathLike[str],
    enum_classes: Iterable[type[Enum]],
    *,
    language: str | None = None,
) -> polib.POFile:
    """Write the catalogue for *enum_classes* to *path*.

    An existing file is merged: its translations are kept and only new keys
    are appended.
    """
    target = Path(path)
    generated = build_catalog(enum_classes, language=language)
    if target.exists():
        catalog = polib.pofile(str(target))
        added = 0
        for entry in generated:
            if catalog.find(entry.msgid) is None:
                catalog.append(entry)
                added += 1
        logger.debug("Merged %d new enum label key(s) into %s", added, target)
    else:
        catalog = generated
        logger.debug("Created catalogue %s with %d key(s)", target, len(catalog))
    target.parent.mkdir(parents=True, exist_ok=True)
    catalog.save(str(target))
    return catalog


def compile_catalogs(locales_dir: str | os.PathLike[str]) -> list[Path]:
    """Compile every ``.po`` file under *locales_dir* into a ``.mo`` file.

    Returns the paths of the written ``.mo`` files.
    """
    written: list[Path] = []
    for po_file in sorted(Path(locales_dir).rglob("*.po")):
        mo_file = po_file.with_suffix(".mo")
        polib.pofile(str(po_file)).save_as_mofile(str(mo_file))
        logger.debug("Compiled %s -> %s", po_file, mo_file)
        written.append(mo_file)
    return written
