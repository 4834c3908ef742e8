"""Substring search and word splitting used by the XPM reader."""

from __future__ import annotations

import re

_WORD_SEPARATORS = re.compile(r"[ \t]+")


def _check_pattern(pattern: str) -> None:
    if not pattern:
        raise ValueError("search pattern must not be empty")


def find(text: str, pattern: str, length: int) -> int:
    """Return the index of the first occurrence of ``pattern`` in ``text``.

    ``length`` is the size of the region the caller is interested in; a
    pattern longer than that can never be found and yields -1. Returns -1
    when the pattern does not occur.
    """
    _check_pattern(pattern)
    if len(pattern) > length:
        return -1
    return text.find(pattern)


def find_unquoted(text: str, pattern: str, length: int) -> int:
    """Like :func:`find`, but skip matches that lie inside double quotes.

    A double quote toggles the quoted state as the text is scanned, so a
    match is only reported where an even number of quotes precedes it.
    """
    _check_pattern(pattern)
    if len(pattern) > length:
        return -1
    quoted = False
    for pos in range(len(text) - len(pattern) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(pattern, pos):
            return pos
    return -1


def split_words(text: str) -> list[str]:
    """Split ``text`` into words separated by runs of spaces and tabs.

    Only spaces and tabs separate words; other characters, newlines
    included, stay part of the word they touch.
    """
    return [word for word in _WORD_SEPARATORS.split(text) if word]