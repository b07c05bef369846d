"""Shared test fixtures for sayaka-util.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from sayaka_util.storage import StoreSettings, TextStore


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "sayaka_util"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def store(tmp_path: Path) -> Iterator[TextStore]:
    """A text store rooted in a fresh temporary directory."""
    with TextStore(StoreSettings(root=tmp_path, max_workers=4)) as text_store:
        yield text_store
