"""Test configuration and fixtures for fitquery."""

from pathlib import Path
from typing import Iterable, Optional

import pytest


def write_page(
    root: Path, relative_path: str, flags: Iterable[str] = (), tags: Optional[str] = None, extra: str = ""
) -> Path:
    """Create a page folder with a properties.xml file holding the given markers and tags."""
    folder = root / relative_path
    folder.mkdir(parents=True, exist_ok=True)
    body = "".join(f"\t<{flag}/>\n" for flag in flags)
    if tags is not None:
        body += f"\t<Suites>{tags}</Suites>\n"
    body += extra
    (folder / "properties.xml").write_text(f'<?xml version="1.0"?>\n<properties>\n{body}</properties>\n')
    return folder


@pytest.fixture
def make_page(tmp_path):
    """Factory creating page folders below tmp_path."""

    def _make_page(relative_path, flags=(), tags=None, extra=""):
        return write_page(tmp_path, relative_path, flags, tags, extra)

    return _make_page


@pytest.fixture
def wiki(tmp_path):
    """A small wiki with suites, tests, a static page, a skipped branch and reserved folders."""
    write_page(tmp_path, "SuiteOne", ["Suite"], "nightly, smoke")
    write_page(tmp_path, "SuiteOne/TestLogin", ["Test"], "fast")
    write_page(tmp_path, "SuiteOne/TestLogout", ["Test"])
    write_page(tmp_path, "SuiteOne/SetUp", ["Static"])
    write_page(tmp_path, "SuiteOne/Broken", ["Suite", "Prune"], "Flaky")
    write_page(tmp_path, "SuiteOne/Broken/TestCrash", ["Test"], "crash")
    write_page(tmp_path, "SuiteTwo", ["Suite"])
    write_page(tmp_path, "SuiteTwo/TestSearch", ["Test"], "Nightly")
    (tmp_path / "SuiteTwo" / "Notes").mkdir()
    (tmp_path / "SuiteTwo" / "content.txt").write_text("!contents")
    write_page(tmp_path, "files", ["Static"])
    (tmp_path / "files" / "images").mkdir()
    write_page(tmp_path, "FrontPage", ["Static"])
    write_page(tmp_path, "ErrorLogs/SuiteOne", ["Static"])
    return tmp_path
