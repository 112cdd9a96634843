"""Pytest configuration for the ectype test suite."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass

import pytest

from ectype import i18n


@pytest.fixture
def restore_translator() -> Iterator[None]:
    """Restore the process-wide translator after the test."""
    previous = i18n.get_translator()
    try:
        yield
    finally:
        i18n.set_translator(previous)


def _normalise_marker_name(name: str) -> str:
    return name.replace("-", "_")


_SUITE_STASH_KEY = pytest.StashKey["SuiteDefinition"]()


@dataclass(frozen=True)
class SuiteDefinition:
    """Describe how a logical test suite should filter collected tests."""

    name: str
    include_any: Sequence[str] = ()
    exclude_any: Sequence[str] = ()
    include_by_default: bool = True
    description: str = ""

    def should_run(self, item: pytest.Item) -> bool:
        markers = {_normalise_marker_name(marker.name) for marker in item.iter_markers()}
        include = {_normalise_marker_name(name) for name in self.include_any}
        exclude = {_normalise_marker_name(name) for name in self.exclude_any}
        if include and markers & include:
            return True
        if not self.include_by_default:
            return False
        return not markers & exclude


SUITES: Mapping[str, SuiteDefinition] = {
    "core": SuiteDefinition(
        name="core",
        exclude_any=("quality",),
        description="Unit and smoke checks",
    ),
    "quality": SuiteDefinition(
        name="quality",
        include_any=("quality",),
        include_by_default=False,
        description="Docstring style enforcement",
    ),
}


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption(
        "--suite",
        action="store",
        choices=sorted(SUITES),
        help="Select the logical test suite to run",
    )


def pytest_configure(config: pytest.Config) -> None:
    suite_name = config.getoption("--suite")
    if suite_name is None:
        return
    config.stash[_SUITE_STASH_KEY] = SUITES[suite_name]


@pytest.hookimpl(trylast=True)
def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    suite = config.stash.get(_SUITE_STASH_KEY, None)
    if suite is None:
        return

    selected: list[pytest.Item] = []
    deselected: list[pytest.Item] = []
    for item in items:
        if suite.should_run(item):
            selected.append(item)
        else:
            deselected.append(item)

    if deselected:
        config.hook.pytest_deselected(items=deselected)
        items[:] = selected
