"""Shared fixtures for itemfilter tests."""

from __future__ import annotations

import pytest

from itemfilter import Entry, ItemFilter


@pytest.fixture
def item_filter() -> ItemFilter:
    """Return a filter with default configuration."""
    return ItemFilter()


@pytest.fixture
def sample_entries() -> list[Entry]:
    """Create a small directory listing.

    Listing::

        .cache/          (hidden, inode/directory)
        .gitignore       (hidden, text/plain)
        .ssh/            (hidden, inode/directory)
        README.md        (text/markdown)
        notes.txt        (text/plain)
        photo.JPG        (image/jpeg)
        report-2024.pdf  (application/pdf)
        run              (application/x-executable)
    """
    return [
        Entry(".cache", is_hidden=True, mime_type="inode/directory"),
        Entry(".gitignore", is_hidden=True, mime_type="text/plain"),
        Entry(".ssh", is_hidden=True, mime_type="inode/directory"),
        Entry("README.md", mime_type="text/markdown"),
        Entry("notes.txt", mime_type="text/plain"),
        Entry("photo.JPG", mime_type="image/jpeg"),
        Entry("report-2024.pdf", mime_type="application/pdf"),
        Entry("run", mime_type="application/x-executable"),
    ]
