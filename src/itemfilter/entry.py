"""Filesystem entry interface consumed by the item filter."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


class FilesystemEntry(Protocol):
    """Protocol for entries handed to ``ItemFilter.matches``.

    Keeps filter logic decoupled from the listing layer's item type.
    """

    @property
    def name(self) -> str: ...

    @property
    def is_hidden(self) -> bool: ...

    @property
    def mime_type(self) -> str: ...


@dataclass(frozen=True, slots=True)
class Entry:
    """A single filesystem entry considered for display.

    Attributes:
        name: Display name of the entry.
        is_hidden: Whether the entry counts as hidden.
        mime_type: Resolved MIME type, e.g. ``"text/plain"``.
    """

    name: str
    is_hidden: bool = False
    mime_type: str = ""

    @classmethod
    def from_name(cls, name: str, mime_type: str = "") -> Entry:
        """Build an entry, treating dot-prefixed names as hidden.

        Args:
            name: Display name of the entry.
            mime_type: Resolved MIME type.

        Returns:
            Entry: New entry instance.
        """
        return cls(name=name, is_hidden=name.startswith("."), mime_type=mime_type)
