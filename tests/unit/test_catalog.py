"""Tests for enum label catalogue extraction."""

from __future__ import annotations

from enum import Enum, auto
from pathlib import Path

import polib
import pytest

from ectype.core.catalog import (
    build_catalog,
    compile_catalogs,
    translation_entries,
    write_catalog,
)
from ectype.core.labels import HasLabel, LabelOverride, label_overrides
from ectype.i18n import GettextTranslator

pytestmark = pytest.mark.unit


@label_overrides(
    Active=LabelOverride("status.active_key", is_key=True),
    Archived="Put away",
)
class Status(HasLabel, Enum):
    Draft = auto()
    Active = auto()
    Archived = auto()


class Channel(HasLabel, str, Enum):
    Email = "email"
    TextMessage = "sms"


def test_translation_entries_cover_looked_up_keys() -> None:
    assert translation_entries(Status) == [
        ("status.draft", "Draft"),
        ("status.active_key", "Active"),
    ]
    assert translation_entries(Channel) == [
        ("channel.email", "Email"),
        ("channel.sms", "Text Message"),
    ]


def test_build_catalog_creates_empty_entries() -> None:
    catalog = build_catalog([Status, Channel], language="fr")
    assert catalog.metadata["Language"] == "fr"
    assert [entry.msgid for entry in catalog] == [
        "status.draft",
        "status.active_key",
        "channel.email",
        "channel.sms",
    ]
    entry = catalog.find("channel.sms")
    assert entry is not None
    assert entry.msgstr == ""
    assert entry.tcomment == "Text Message"


def test_build_catalog_skips_duplicate_types() -> None:
    catalog = build_catalog([Channel, Channel])
    assert len(catalog) == 2


def test_write_catalog_merges_existing_translations(tmp_path: Path) -> None:
    path = tmp_path / "fr" / "LC_MESSAGES" / "enums.po"
    write_catalog(path, [Status], language="fr")

    existing = polib.pofile(str(path))
    existing.find("status.draft").msgstr = "Brouillon"
    existing.save(str(path))

    merged = write_catalog(path, [Status, Channel], language="fr")
    assert merged.find("status.draft").msgstr == "Brouillon"
    assert merged.find("channel.email") is not None

    translator = GettextTranslator("enums", tmp_path, ["fr"])
    assert Status.Draft.trans(translator=translator) == "Brouillon"
    assert Status.Active.trans(translator=translator) == "Active"


def test_compile_catalogs_writes_mo_files(tmp_path: Path) -> None:
    path = tmp_path / "de" / "LC_MESSAGES" / "enums.po"
    catalog = write_catalog(path, [Channel], language="de")
    catalog.find("channel.email").msgstr = "E-Mail"
    catalog.save(str(path))

    written = compile_catalogs(tmp_path)
    assert written == [path.with_suffix(".mo")]
    translator = GettextTranslator("enums", tmp_path, ["de"])
    assert Channel.Email.trans(translator=translator) == "E-Mail"
    assert Channel.TextMessage.trans(translator=translator) == "Text Message"
