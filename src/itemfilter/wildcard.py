"""Wildcard patterns: detection, glob-to-regex translation and compilation."""

from __future__ import annotations

import logging
import re
from typing import Final

logger = logging.getLogger(__name__)

WILDCARD_CHARS: Final[tuple[str, ...]] = ("*", "?", "[")

_FLAGS: Final[int] = re.IGNORECASE | re.DOTALL


def has_wildcard(text: str) -> bool:
    """Return whether *text* contains a wildcard trigger character."""
    return any(char in text for char in WILDCARD_CHARS)


def translate(pattern: str) -> str:
    """Translate a glob-style wildcard into an anchored regular expression.

    ``*`` matches any run of characters, ``?`` any single character and
    ``[...]`` a character class (``!`` or ``^`` after the bracket negates).
    Everything else is literal. The result must match the whole name.

    An unterminated ``[`` is emitted as a bare bracket, so compiling the
    result raises ``re.error``. Translation itself never raises.

    Args:
        pattern: Wildcard pattern.

    Returns:
        str: Regular expression source.
    """
    parts: list[str] = []
    i = 0
    n = len(pattern)
    while i < n:
        char = pattern[i]
        i += 1
        if char == "*":
            # Collapse runs of stars
            while i < n and pattern[i] == "*":
                i += 1
            parts.append(".*")
        elif char == "?":
            parts.append(".")
        elif char == "[":
            end = _find_class_end(pattern, i)
            if end < 0:
                parts.append("[" + re.escape(pattern[i:]))
                break
            parts.append(_translate_class(pattern[i:end]))
            i = end + 1
        else:
            parts.append(re.escape(char))
    return r"\A(?:" + "".join(parts) + r")\Z"


def _find_class_end(pattern: str, start: int) -> int:
    """Return the index of the ``]`` closing a class opened before *start*.

    Returns -1 when the class is never closed.
    """
    j = start
    if j < len(pattern) and pattern[j] in "!^":
        j += 1
    # A leading ']' is a literal member of the class
    if j < len(pattern) and pattern[j] == "]":
        j += 1
    return pattern.find("]", j)


def _translate_class(body: str) -> str:
    negate = body[:1] in ("!", "^")
    if negate:
        body = body[1:]
    members = "".join(char if char == "-" else re.escape(char) for char in body)
    return "[" + ("^" if negate else "") + members + "]"


def compile_wildcard(pattern: str) -> re.Pattern[str] | None:
    """Compile a wildcard pattern case-insensitively.

    Args:
        pattern: Wildcard pattern.

    Returns:
        A compiled expression, or ``None`` when the translated pattern
        is not a valid regular expression.
    """
    try:
        return re.compile(translate(pattern), _FLAGS)
    except re.error as exc:
        logger.debug("Invalid wildcard pattern %r: %s", pattern, exc)
        return None


def compile_exact(text: str) -> re.Pattern[str]:
    """Compile a case-insensitive whole-name match for literal *text*."""
    return re.compile(r"\A" + re.escape(text) + r"\Z", _FLAGS)
