"""Entry filtering: name pattern, MIME types and hidden-file logic."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TypeVar

from itemfilter.entry import FilesystemEntry
from itemfilter.wildcard import compile_exact, compile_wildcard, has_wildcard

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=FilesystemEntry)


@dataclass(frozen=True, slots=True)
class FilterSettings:
    """Complete configuration of an ``ItemFilter``.

    Attributes:
        pattern: Name filter text, literal substring or wildcard.
        mime_types: MIME types to include. Empty means no restriction.
        exclude_mime_types: MIME types to exclude.
        hidden_files_shown: Whether hidden entries are displayed.
        hidden_files_whitelist_enabled: Whether the whitelist applies.
        hidden_files_whitelist: Name patterns of always-shown hidden entries.
    """

    pattern: str = ""
    mime_types: tuple[str, ...] = ()
    exclude_mime_types: tuple[str, ...] = ()
    hidden_files_shown: bool = True
    hidden_files_whitelist_enabled: bool = False
    hidden_files_whitelist: tuple[str, ...] = ()


class ItemFilter:
    """Decide whether an entry belongs in the displayed listing.

    By default the pattern is a case-insensitive sub-string. As soon as
    it contains a ``*``, ``?`` or ``[`` it is treated as a wildcard that
    must match the whole name. A wildcard that does not compile falls
    back to sub-string matching on the original text.
    """

    def __init__(
        self,
        pattern: str = "",
        mime_types: Iterable[str] = (),
        exclude_mime_types: Iterable[str] = (),
        hidden_files_shown: bool = True,
        hidden_files_whitelist_enabled: bool = False,
        hidden_files_whitelist: Iterable[str] = (),
    ) -> None:
        self._pattern = ""
        self._lower_case_pattern = ""
        self._regexp: re.Pattern[str] | None = None
        self._mime_types: list[str] = []
        self._exclude_mime_types: list[str] = []
        self._hidden_files_shown = True
        self._hidden_whitelist_enabled = False
        self._hidden_whitelist: list[str] = []
        self._hidden_whitelist_regexps: list[re.Pattern[str]] = []

        self.pattern = pattern
        self.mime_types = mime_types
        self.exclude_mime_types = exclude_mime_types
        self.hidden_files_shown = hidden_files_shown
        self.hidden_files_whitelist_enabled = hidden_files_whitelist_enabled
        self.hidden_files_whitelist = hidden_files_whitelist

    @classmethod
    def from_settings(cls, settings: FilterSettings) -> ItemFilter:
        """Create a filter configured from *settings*."""
        item_filter = cls()
        item_filter.apply(settings)
        return item_filter

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.settings()!r})"

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------
    @property
    def pattern(self) -> str:
        return self._pattern

    @pattern.setter
    def pattern(self, pattern: str) -> None:
        self._pattern = pattern
        self._lower_case_pattern = pattern.lower()
        self._regexp = None
        if has_wildcard(pattern):
            self._regexp = compile_wildcard(pattern)
            if self._regexp is None:
                logger.debug("Falling back to sub-string matching for %r", pattern)

    @property
    def uses_regex(self) -> bool:
        """Whether the current pattern is matched as a wildcard."""
        return self._regexp is not None

    @property
    def mime_types(self) -> list[str]:
        return list(self._mime_types)

    @mime_types.setter
    def mime_types(self, types: Iterable[str]) -> None:
        self._mime_types = list(types)

    @property
    def exclude_mime_types(self) -> list[str]:
        return list(self._exclude_mime_types)

    @exclude_mime_types.setter
    def exclude_mime_types(self, types: Iterable[str]) -> None:
        self._exclude_mime_types = list(types)

    @property
    def hidden_files_shown(self) -> bool:
        return self._hidden_files_shown

    @hidden_files_shown.setter
    def hidden_files_shown(self, shown: bool) -> None:
        self._hidden_files_shown = shown

    @property
    def hidden_files_whitelist_enabled(self) -> bool:
        return self._hidden_whitelist_enabled

    @hidden_files_whitelist_enabled.setter
    def hidden_files_whitelist_enabled(self, enabled: bool) -> None:
        self._hidden_whitelist_enabled = enabled

    @property
    def hidden_files_whitelist(self) -> list[str]:
        """Name patterns of hidden entries that stay visible.

        Patterns may be exact names or wildcards. Surrounding whitespace
        is ignored and blank patterns are skipped.
        """
        return list(self._hidden_whitelist)

    @hidden_files_whitelist.setter
    def hidden_files_whitelist(self, patterns: Iterable[str]) -> None:
        self._hidden_whitelist = list(patterns)
        self._update_hidden_whitelist_regexps()

    def _update_hidden_whitelist_regexps(self) -> None:
        regexps: list[re.Pattern[str]] = []
        for pattern in self._hidden_whitelist:
            trimmed = pattern.strip()
            if not trimmed:
                continue
            if has_wildcard(trimmed):
                regexp = compile_wildcard(trimmed)
                if regexp is None:
                    logger.debug("Dropping hidden whitelist pattern %r", pattern)
                    continue
                regexps.append(regexp)
            else:
                regexps.append(compile_exact(trimmed))
        self._hidden_whitelist_regexps = regexps

    def settings(self) -> FilterSettings:
        """Return a snapshot of the current configuration."""
        return FilterSettings(
            pattern=self._pattern,
            mime_types=tuple(self._mime_types),
            exclude_mime_types=tuple(self._exclude_mime_types),
            hidden_files_shown=self._hidden_files_shown,
            hidden_files_whitelist_enabled=self._hidden_whitelist_enabled,
            hidden_files_whitelist=tuple(self._hidden_whitelist),
        )

    def apply(self, settings: FilterSettings) -> None:
        """Replace the whole configuration with *settings*.

        Args:
            settings: Configuration to apply.
        """
        self.pattern = settings.pattern
        self.mime_types = settings.mime_types
        self.exclude_mime_types = settings.exclude_mime_types
        self.hidden_files_shown = settings.hidden_files_shown
        self.hidden_files_whitelist_enabled = settings.hidden_files_whitelist_enabled
        self.hidden_files_whitelist = settings.hidden_files_whitelist

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def has_set_filters(self) -> bool:
        """Return whether any filter is active.

        The hidden-file whitelist alone never counts as a filter.
        """
        return bool(
            self._pattern
            or self._mime_types
            or self._exclude_mime_types
            or not self._hidden_files_shown
        )

    def matches(self, entry: FilesystemEntry) -> bool:
        """Return whether *entry* passes the filter.

        Hidden entries are rejected first unless hidden files are shown
        or the entry is whitelisted. The remaining entry must then match
        every configured pattern and MIME-type filter.

        Args:
            entry: Entry to check.

        Returns:
            bool: ``True`` when the entry should be displayed.
        """
        if (
            not self._hidden_files_shown
            and entry.is_hidden
            and not (
                self._hidden_whitelist_enabled and self.matches_hidden_whitelist(entry)
            )
        ):
            return False

        has_pattern_filter = bool(self._pattern)
        has_mime_types_filter = bool(self._mime_types or self._exclude_mime_types)

        if has_pattern_filter and has_mime_types_filter:
            return self.matches_pattern(entry) and self.matches_type(entry)
        if has_pattern_filter:
            return self.matches_pattern(entry)
        if has_mime_types_filter:
            return self.matches_type(entry)
        return True

    def matches_pattern(self, entry: FilesystemEntry) -> bool:
        """Return whether the entry name matches the pattern."""
        if self._regexp is not None:
            return self._regexp.search(entry.name) is not None
        return self._lower_case_pattern in entry.name.lower()

    def matches_type(self, entry: FilesystemEntry) -> bool:
        """Return whether the entry MIME type passes the type filters.

        Exclusion wins over inclusion. An empty include list lets every
        non-excluded type through.
        """
        mime_type = entry.mime_type
        if mime_type in self._exclude_mime_types:
            return False
        if mime_type in self._mime_types:
            return True
        return not self._mime_types

    def matches_hidden_whitelist(self, entry: FilesystemEntry) -> bool:
        """Return whether the entry name matches a whitelist pattern.

        Only the display name is checked, never the full path.
        """
        name = entry.name
        return any(regexp.search(name) for regexp in self._hidden_whitelist_regexps)


def filter_entries(
    entries: Iterable[E], item_filter: ItemFilter | None = None
) -> Iterator[E]:
    """Yield the entries accepted by *item_filter*, preserving order.

    Args:
        entries: Candidate entries, typically one directory listing.
        item_filter: Filter to apply. ``None`` or a filter without any
            active filters yields every entry.

    Yields:
        Entries for which ``item_filter.matches`` is true.
    """
    if item_filter is None or not item_filter.has_set_filters():
        yield from entries
        return

    rejected = 0
    for entry in entries:
        if item_filter.matches(entry):
            yield entry
        else:
            rejected += 1
    logger.debug("Filtered out %d entries", rejected)

