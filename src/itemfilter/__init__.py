"""itemfilter — decide which filesystem entries a file listing displays."""

from itemfilter.entry import Entry, FilesystemEntry
from itemfilter.filter import FilterSettings, ItemFilter, filter_entries

__version__ = "0.1.0"

__all__ = [
    "Entry",
    "FilesystemEntry",
    "FilterSettings",
    "ItemFilter",
    "filter_entries",
]
