"""Shared fixtures for links folder tests."""

from typing import List, Optional, Tuple

import pytest

from links_folder.exceptions import OpenError
from links_folder.launcher import LinkLauncher, Opener
from links_folder.models import Folder, Link, SavedApp, Tree
from links_folder.storage import LinkStorage


class FakeOpener(Opener):
    """Records open requests instead of starting processes."""
    
    def __init__(self, failing_urls=(), supports_app_targeting=True):
        self.calls: List[Tuple[str, Optional[SavedApp]]] = []
        self.failing_urls = set(failing_urls)
        self.supports_app_targeting = supports_app_targeting
    
    def build_command(self, url, app=None):
        return ["fake-open", url]
    
    def open_url(self, url, app=None):
        self.calls.append((url, app))
        if url in self.failing_urls:
            raise OpenError(f"cannot open {url}")


@pytest.fixture
def storage(tmp_path):
    return LinkStorage(support_dir=tmp_path / "support", assets_dir=tmp_path / "assets")


@pytest.fixture
def opener():
    return FakeOpener()


@pytest.fixture
def launcher(opener):
    return LinkLauncher(opener)


@pytest.fixture
def sample_tree():
    """
    Top level:
        work/ (gmail, nested/ (docs), calendar)
        news
    """
    return Tree(items=[
        Folder(id="work", title="Work", icon="💼", items=[
            Link(id="gmail", title="Gmail", url="https://mail.google.com"),
            Folder(id="nested", title="Nested", items=[
                Link(id="docs", title="Docs", url="https://docs.google.com",
                     app=SavedApp(name="Safari", path="/Applications/Safari.app",
                                  bundle_id="com.apple.Safari")),
            ]),
            Link(id="calendar", title="Calendar", url="https://calendar.google.com"),
        ]),
        Link(id="news", title="News", url="https://news.ycombinator.com"),
    ])
